"""Errors raised while constructing tensors."""


class MdarrayError(Exception):
    """Base class for mdarray errors."""


class ShapeOverflowError(MdarrayError, OverflowError):
    """The element count or byte size of a shape exceeds addressable memory."""


class AllocationError(MdarrayError, MemoryError):
    """A tensor buffer could not be allocated."""
