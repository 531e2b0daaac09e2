"""Element type entity - numeric contract for the values stored in a tensor."""
import numbers
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Numeric(Protocol):
    """Scalar value supporting the additive and multiplicative structure of a number."""

    def __add__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


@dataclass(frozen=True)
class ElementType:
    """
    Numeric element type of a tensor.

    Wraps a numpy dtype and exposes the two identities the factories need,
    plus the byte width used to compute a tensor's storage footprint.

    Attributes
    ----------
    name : str
        Canonical name of the element type (e.g. "float32").
    dtype : numpy.dtype
        Underlying numpy dtype.
    """

    name: str
    dtype: np.dtype

    def __post_init__(self):
        if self.dtype.kind not in "iufc":
            raise TypeError(f"Element type must be numeric, got dtype {self.dtype}")

    @classmethod
    def of(cls, dtype_like: Any) -> "ElementType":
        """
        Resolve an element type from anything numpy understands as a dtype.

        Parameters
        ----------
        dtype_like : Any
            An ElementType, a numpy scalar type (``numpy.float32``), a dtype
            name (``"float64"``) or a ``numpy.dtype``.

        Returns
        -------
        ElementType
            The matching element type.

        Raises
        ------
        TypeError
            If the dtype is unknown to numpy or is not numeric.
        """
        if isinstance(dtype_like, ElementType):
            return dtype_like
        if dtype_like is None:
            raise TypeError("Element type must be given, got None")
        try:
            dtype = np.dtype(dtype_like)
        except TypeError as exc:
            raise TypeError(f"Unknown element type: {dtype_like!r}") from exc
        return cls(name=dtype.name, dtype=dtype)

    @property
    def zero(self) -> Numeric:
        """Additive identity."""
        return self.dtype.type(0)

    @property
    def one(self) -> Numeric:
        """Multiplicative identity."""
        return self.dtype.type(1)

    @property
    def itemsize(self) -> int:
        """Width of a single element in bytes."""
        return self.dtype.itemsize

    def cast(self, value: Numeric) -> Numeric:
        """Convert `value` to a scalar of this element type."""
        return self.dtype.type(value)

    def __str__(self) -> str:
        return self.name


def require_numeric(value: Any) -> Numeric:
    """
    Check that `value` is a number usable as a tensor element.

    Parameters:
        value (Any): Candidate fill value.

    Returns:
        Numeric: `value`, unchanged.

    Raises:
        TypeError: If `value` is not a Python or numpy number. Strings, bytes,
            sequences and None are rejected.
    """
    if not isinstance(value, (numbers.Number, np.number, np.bool_)):
        raise TypeError(f"Fill value must be a number, got {type(value).__name__}")
    return value


FLOAT32 = ElementType.of(np.float32)
FLOAT64 = ElementType.of(np.float64)
INT32 = ElementType.of(np.int32)
UINT32 = ElementType.of(np.uint32)
INT64 = ElementType.of(np.int64)
UINT64 = ElementType.of(np.uint64)
