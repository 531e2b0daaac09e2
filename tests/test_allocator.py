"""Tests for buffer allocation."""
from unittest.mock import patch

import numpy as np
import pytest

from mdarray.domain.entities.element import FLOAT32, FLOAT64, INT32
from mdarray.domain.errors import AllocationError, MdarrayError
from mdarray.domain.interfaces.allocator import Allocator
from mdarray.infrastructure.cpu.allocator import CpuAllocator
from mdarray.infrastructure.cpu.tensor import FloatTensor, Tensor


class TestAllocatorInterface:
    """Tests for the Allocator abstract interface."""

    def test_allocate_is_abstract(self):
        """allocate must be provided by implementations."""
        assert "allocate" in Allocator.__abstractmethods__


class TestCpuAllocator:
    """Tests for CpuAllocator."""

    def test_allocates_filled_buffer(self):
        """The buffer has the requested length, dtype and value."""
        buffer = CpuAllocator().allocate(FLOAT64, 6, 1.5)
        assert buffer.shape == (6,)
        assert buffer.dtype == np.float64
        assert buffer.tolist() == [1.5] * 6

    def test_buffer_is_read_only(self):
        """Allocated buffers are frozen."""
        buffer = CpuAllocator().allocate(INT32, 3, 0)
        assert not buffer.flags.writeable

    def test_zero_elements(self):
        """Allocating zero elements yields an empty buffer."""
        buffer = CpuAllocator().allocate(FLOAT32, 0, 1.0)
        assert buffer.size == 0

    def test_limit_allows_exact_fit(self):
        """A request of exactly max_bytes is allowed."""
        buffer = CpuAllocator(max_bytes=16).allocate(FLOAT32, 4, 0.0)
        assert buffer.nbytes == 16

    def test_limit_exceeded(self):
        """A request above max_bytes raises AllocationError."""
        with pytest.raises(AllocationError, match="limit is 16 bytes"):
            CpuAllocator(max_bytes=16).allocate(FLOAT32, 5, 0.0)

    def test_negative_limit_rejected(self):
        """max_bytes cannot be negative."""
        with pytest.raises(ValueError):
            CpuAllocator(max_bytes=-1)

    def test_out_of_memory_is_wrapped(self):
        """MemoryError from numpy surfaces as a chained AllocationError."""
        with patch("mdarray.infrastructure.cpu.allocator.np.full", side_effect=MemoryError):
            with pytest.raises(AllocationError) as excinfo:
                CpuAllocator().allocate(FLOAT64, 10, 0.0)
        assert isinstance(excinfo.value.__cause__, MemoryError)

    def test_allocation_error_types(self):
        """AllocationError is both an MdarrayError and a MemoryError."""
        assert issubclass(AllocationError, MdarrayError)
        assert issubclass(AllocationError, MemoryError)


class TestTensorWithAllocator:
    """Tests for tensors bound to a non-default allocator."""

    def test_limited_tensor_class(self):
        """Factories use the allocator bound with Tensor.of."""
        allocator = CpuAllocator(max_bytes=64)
        Limited = Tensor.of(np.float32, allocator=allocator)

        assert Limited.allocator == allocator
        assert Limited.zeros([4, 4]).size() == 64
        with pytest.raises(AllocationError):
            Limited.zeros([4, 5])

    def test_default_allocator_unaffected(self):
        """Binding an allocator does not change the default specialisation."""
        Tensor.of(np.float32, allocator=CpuAllocator(max_bytes=0))
        assert Tensor.of(np.float32).zeros([4, 5]).numel() == 20

    def test_same_allocator_same_class(self):
        """Specialisations are cached per element type and allocator."""
        allocator = CpuAllocator(max_bytes=8)
        assert Tensor.of("int32", allocator=allocator) is Tensor.of(np.int32, allocator=allocator)

    def test_equal_allocators_share_class(self):
        """Allocators with the same ceiling map to a single specialisation."""
        before = len(Tensor._specialisations)
        classes = {Tensor.of(np.float32, allocator=CpuAllocator(max_bytes=1024)) for _ in range(50)}
        assert len(classes) == 1
        assert len(Tensor._specialisations) <= before + 1

    def test_default_allocator_gives_alias(self):
        """Passing the default allocator returns the plain specialisation."""
        assert Tensor.of(np.float32, allocator=Tensor.allocator) is FloatTensor
        assert Tensor.of(np.float32, allocator=CpuAllocator()) is FloatTensor

    def test_allocator_equality(self):
        """CpuAllocator compares and hashes by its ceiling."""
        assert CpuAllocator(max_bytes=8) == CpuAllocator(max_bytes=8)
        assert hash(CpuAllocator(max_bytes=8)) == hash(CpuAllocator(max_bytes=8))
        assert CpuAllocator(max_bytes=8) != CpuAllocator(max_bytes=16)
        assert repr(CpuAllocator()) == "CpuAllocator(max_bytes=None)"

    def test_custom_allocator(self):
        """Any Allocator implementation can back a tensor class."""

        class CountingAllocator(Allocator):
            def __init__(self):
                self.calls = 0

            def allocate(self, element_type, numel, value):
                self.calls += 1
                return CpuAllocator().allocate(element_type, numel, value)

        allocator = CountingAllocator()
        Counted = Tensor.of(np.float64, allocator=allocator)
        Counted.ones([2])
        Counted.zeros([2])
        Counted.fill(3.0, [2])
        assert allocator.calls == 3
