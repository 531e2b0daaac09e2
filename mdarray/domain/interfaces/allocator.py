"""
Allocator Interface.

This module defines the abstract interface for tensor buffer allocation.
The Allocator is responsible for producing the contiguous storage that
backs a tensor, already filled with its initial value.
"""
from abc import ABC, abstractmethod

import numpy as np

from mdarray.domain.entities.element import ElementType, Numeric


class Allocator(ABC):
    """
    Abstract interface for contiguous buffer allocation.

    This interface decouples where and how storage is obtained from the
    tensor type itself, so that limits or alternative backends can be
    plugged in without touching the factories.

    Implementations must either return a buffer of exactly `numel` elements
    or raise; there is no partially filled result.
    """

    @abstractmethod
    def allocate(self, element_type: ElementType, numel: int, value: Numeric) -> np.ndarray:
        """
        Allocate a one-dimensional buffer of `numel` elements set to `value`.

        Parameters
        ----------
        element_type : ElementType
            Element type of the buffer.
        numel : int
            Number of elements to allocate. May be zero.
        value : Numeric
            Value every element is initialised to.

        Returns
        -------
        numpy.ndarray
            Contiguous read-only buffer of length `numel`.

        Raises
        ------
        AllocationError
            If the buffer cannot be allocated.
        """
        pass
