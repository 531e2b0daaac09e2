"""Pytest configuration and shared fixtures."""
import numpy as np
import pytest

from mdarray.infrastructure.cpu.tensor import DoubleTensor, FloatTensor, Tensor


@pytest.fixture(params=[FloatTensor, DoubleTensor], ids=["float32", "float64"])
def float_tensor_cls(request):
    """
    Provide each floating-point Tensor specialisation in turn.

    Returns:
        type[Tensor]: FloatTensor, then DoubleTensor.
    """
    return request.param


@pytest.fixture(
    params=[np.float32, np.float64, np.int32, np.uint32, np.int64, np.uint64],
    ids=lambda dtype: np.dtype(dtype).name,
)
def tensor_cls(request):
    """
    Provide a Tensor specialisation for every supported element type.

    Returns:
        type[Tensor]: The class returned by Tensor.of for the parametrised dtype.
    """
    return Tensor.of(request.param)

