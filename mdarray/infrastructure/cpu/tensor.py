"""
Dense tensor stored in host memory.

A Tensor is a flat contiguous numpy buffer tagged with a Shape. The element
type is bound per class, the way a generic type parameter would be:
``Tensor.of(numpy.float32)`` returns the float32 specialisation, and the
aliases at the bottom of this module name the common ones.

Example:
    >>> t = FloatTensor.zeros((4, 16))
    >>> t.numel(), t.size()
    (64, 256)
"""
import logging
import sys
from collections.abc import Iterable
from typing import Any, ClassVar, Self

import numpy as np

from mdarray.domain.entities.element import (
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    UINT32,
    UINT64,
    ElementType,
    Numeric,
    require_numeric,
)
from mdarray.domain.entities.shape import Shape
from mdarray.domain.errors import ShapeOverflowError
from mdarray.domain.interfaces.allocator import Allocator
from mdarray.domain.interfaces.dimension import Dimension
from mdarray.domain.interfaces.factory import Factory
from mdarray.infrastructure.cpu.allocator import CpuAllocator

logger = logging.getLogger(__name__)


class Tensor(Dimension, Factory):
    """
    Dense multi-dimensional array with contiguous storage.

    Instances are created through the factories (`fill`, `zeros`, `ones`)
    of a specialised class and are immutable afterwards: the buffer is
    exclusively owned and read-only.

    Attributes
    ----------
    element_type : ElementType | None
        Element type bound to the class; None on the generic `Tensor`.
    allocator : Allocator
        Component used by the factories to obtain storage.
    """

    element_type: ClassVar[ElementType | None] = None
    allocator: ClassVar[Allocator] = CpuAllocator()

    _specialisations: ClassVar[dict[tuple[ElementType, Allocator | None], type["Tensor"]]] = {}

    def __init__(self, data: np.ndarray, shape: Shape) -> None:
        element_type = self._bound_element_type()
        shape = Shape(shape)
        if data.ndim != 1:
            raise ValueError(f"Buffer must be one-dimensional, got {data.ndim} dimensions")
        if data.size != shape.numel():
            raise ValueError(
                f"Buffer holds {data.size} elements but shape {tuple(shape)} needs {shape.numel()}"
            )
        if data.dtype != element_type.dtype:
            raise TypeError(f"Buffer has dtype {data.dtype} but {type(self).__name__} stores {element_type}")
        data.flags.writeable = False
        self._data = data
        self._shape = shape

    @classmethod
    def of(cls, dtype_like: Any, allocator: Allocator | None = None) -> type[Self]:
        """
        Get the Tensor class specialised for an element type.

        Parameters
        ----------
        dtype_like : Any
            Element type, numpy scalar type, dtype or dtype name.
        allocator : Allocator | None, optional
            Allocator for the specialised class. Defaults to the shared
            CpuAllocator.

        Returns
        -------
        type[Tensor]
            The specialised class. Repeated calls with the same arguments
            return the same class.
        """
        element_type = ElementType.of(dtype_like)
        if allocator == Tensor.allocator:
            allocator = None
        key = (element_type, allocator)
        specialised = Tensor._specialisations.get(key)
        if specialised is None:
            attributes: dict[str, Any] = {"element_type": element_type}
            if allocator is not None:
                attributes["allocator"] = allocator
            specialised = type(f"Tensor[{element_type}]", (Tensor,), attributes)
            Tensor._specialisations[key] = specialised
        return specialised

    @classmethod
    def fill(cls, value: Numeric, shape: Iterable[int] | Shape) -> Self:
        element_type = cls._bound_element_type()
        require_numeric(value)
        shape = Shape(shape)

        numel = shape.numel()
        if numel * element_type.itemsize > sys.maxsize:
            raise ShapeOverflowError(
                f"Shape {tuple(shape)} of {element_type} elements exceeds addressable memory"
            )

        data = cls.allocator.allocate(element_type, numel, value)
        logger.debug(f"Created {cls.__name__} with shape {tuple(shape)}")
        return cls(data, shape)

    @classmethod
    def zeros(cls, shape: Iterable[int] | Shape) -> Self:
        return cls.fill(cls._bound_element_type().zero, shape)

    @classmethod
    def ones(cls, shape: Iterable[int] | Shape) -> Self:
        return cls.fill(cls._bound_element_type().one, shape)

    @classmethod
    def _bound_element_type(cls) -> ElementType:
        if cls.element_type is None:
            raise TypeError(
                f"{cls.__name__} has no element type; use Tensor.of(dtype) or an alias such as FloatTensor"
            )
        return cls.element_type

    @property
    def shape(self) -> Shape:
        return self._shape

    def numel(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return self.numel() * self.element_type.itemsize

    @property
    def data(self) -> np.ndarray:
        """Flat read-only view of the elements, in row-major order."""
        return self._data

    def copy(self) -> Self:
        """Return an independent tensor holding the same elements."""
        return type(self)(self._data.copy(), self._shape)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={tuple(self._shape)}, numel={self.numel()})"


FloatTensor = Tensor.of(FLOAT32)
DoubleTensor = Tensor.of(FLOAT64)
IntTensor = Tensor.of(INT32)
UIntTensor = Tensor.of(UINT32)
LongTensor = Tensor.of(INT64)
ULongTensor = Tensor.of(UINT64)
