"""
Factory Interface.

This module defines the abstract interface for constructing pre-filled
multi-dimensional arrays. `fill` is the single primitive; `zeros` and
`ones` are expressed in terms of it by implementations.
"""
from abc import ABC, abstractmethod
from typing import Self

from mdarray.domain.entities.element import Numeric
from mdarray.domain.entities.shape import Shape


class Factory(ABC):
    """
    Abstract interface for allocating multi-dimensional arrays.

    All operations are class methods: they are invoked on the concrete array
    type, which carries the element type, and return a new instance.
    """

    @classmethod
    @abstractmethod
    def fill(cls, value: Numeric, shape: Shape) -> Self:
        """
        Allocate a new multi-dimensional array with all elements set to `value`.

        Parameters
        ----------
        value : Numeric
            Value to set for each element of the array.
        shape : Shape
            The shape of the array. Any iterable of non-negative integers is
            accepted.

        Returns
        -------
        Self
            New array whose shape equals `shape` verbatim.
        """
        pass

    @classmethod
    @abstractmethod
    def zeros(cls, shape: Shape) -> Self:
        """
        Allocate a new multi-dimensional array with all elements set to zero.

        Parameters
        ----------
        shape : Shape
            The shape of the array.

        Returns
        -------
        Self
            New array filled with the additive identity of its element type.
        """
        pass

    @classmethod
    @abstractmethod
    def ones(cls, shape: Shape) -> Self:
        """
        Allocate a new multi-dimensional array with all elements set to one.

        Parameters
        ----------
        shape : Shape
            The shape of the array.

        Returns
        -------
        Self
            New array filled with the multiplicative identity of its element type.
        """
        pass
