"""Shape entity - ordered per-axis extents of a tensor."""
import math
import operator
from collections.abc import Iterable
from typing import SupportsIndex


class Shape(tuple):
    """
    Immutable sequence of non-negative axis extents, outermost axis first.

    A Shape compares equal to the plain tuple of its extents. The empty
    shape describes a single element (empty product); any zero extent
    describes an empty tensor.
    """

    def __new__(cls, extents: Iterable[SupportsIndex] | SupportsIndex = ()):
        """
        Build a shape from an iterable of integral extents.

        Parameters:
            extents (Iterable[SupportsIndex] | SupportsIndex): Axis extents. A single
                integer is treated as a rank-1 shape.

        Raises:
            TypeError: If an extent is not an integer (floats and bools are rejected),
                or if `extents` is a string.
            ValueError: If an extent is negative.
        """
        if isinstance(extents, Shape):
            return extents
        if isinstance(extents, (str, bytes)):
            raise TypeError(f"Shape extents must be integers, got {type(extents).__name__}")
        if not isinstance(extents, Iterable):
            extents = (extents,)
        return super().__new__(cls, (_as_extent(axis, extent) for axis, extent in enumerate(extents)))

    @property
    def ndim(self) -> int:
        """Number of axes."""
        return len(self)

    def numel(self) -> int:
        """Total number of elements described by this shape."""
        return math.prod(self)

    def __repr__(self) -> str:
        return f"Shape({tuple(self)!r})"


def _as_extent(axis: int, extent: SupportsIndex) -> int:
    if isinstance(extent, bool):
        raise TypeError(f"Extent of axis {axis} must be an integer, got bool")
    try:
        value = operator.index(extent)
    except TypeError:
        raise TypeError(
            f"Extent of axis {axis} must be an integer, got {type(extent).__name__}"
        ) from None
    if value < 0:
        raise ValueError(f"Extent of axis {axis} must be non-negative, got {value}")
    return value
