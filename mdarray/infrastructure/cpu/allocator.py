"""Buffer allocation in host memory, backed by numpy."""
import logging
from dataclasses import dataclass

import numpy as np

from mdarray.domain.entities.element import ElementType, Numeric
from mdarray.domain.errors import AllocationError
from mdarray.domain.interfaces.allocator import Allocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CpuAllocator(Allocator):
    """
    Allocate filled, contiguous, read-only numpy buffers in host memory.

    Attributes
    ----------
    max_bytes : int | None
        Optional ceiling on the size of a single buffer, in bytes.
        None means no limit beyond what the platform can provide.
        Allocators with the same ceiling compare equal.
    """

    max_bytes: int | None = None

    def __post_init__(self):
        if self.max_bytes is not None and self.max_bytes < 0:
            raise ValueError(f"max_bytes must be non-negative, got {self.max_bytes}")

    def allocate(self, element_type: ElementType, numel: int, value: Numeric) -> np.ndarray:
        nbytes = numel * element_type.itemsize
        if self.max_bytes is not None and nbytes > self.max_bytes:
            raise AllocationError(
                f"Cannot allocate {nbytes} bytes for {numel} {element_type} elements: "
                f"limit is {self.max_bytes} bytes"
            )

        try:
            buffer = np.full(numel, value, dtype=element_type.dtype)
        except MemoryError as exc:
            raise AllocationError(
                f"Out of memory allocating {nbytes} bytes for {numel} {element_type} elements"
            ) from exc

        buffer.flags.writeable = False
        logger.debug(f"Allocated {nbytes} bytes ({numel} x {element_type})")
        return buffer
