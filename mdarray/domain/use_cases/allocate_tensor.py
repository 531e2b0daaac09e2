"""
Allocate Tensor Use-Case.

This module provides a use-case for allocating a pre-filled tensor through a
factory and reporting the metrics of the result.
"""
import logging
from dataclasses import dataclass
from typing import Literal

from mdarray.domain.entities.element import Numeric
from mdarray.domain.entities.shape import Shape
from mdarray.domain.interfaces.dimension import Dimension
from mdarray.domain.interfaces.factory import Factory

logger = logging.getLogger(__name__)

FillRule = Literal["zeros", "ones"] | Numeric


@dataclass
class AllocationResult:
    """Allocated tensor together with its dimension metrics."""

    tensor: Dimension
    shape: tuple[int, ...]
    numel: int
    size: int


class AllocateTensor:
    """
    Use-case for allocating a tensor from a shape and a fill rule.

    Attributes
    ----------
    factory : type[Factory]
        Tensor class whose factories perform the allocation. Instances it
        creates must also implement Dimension.
    shape : Shape
        Requested shape.
    fill : FillRule
        "zeros", "ones", or the value every element is set to.
    """

    def __init__(
        self,
        factory: type[Factory],
        shape: Shape,
        fill: FillRule = "zeros",
    ) -> None:
        """
        Initialize the AllocateTensor use-case.

        Parameters
        ----------
        factory : type[Factory]
            Tensor class to allocate with (e.g. FloatTensor).
        shape : Shape
            Requested shape; any iterable of non-negative integers.
        fill : FillRule, optional
            "zeros" (default), "ones", or a numeric fill value.

        Raises
        ------
        ValueError
            If `fill` is a string other than "zeros" or "ones".
        """
        if isinstance(fill, str) and fill not in ("zeros", "ones"):
            raise ValueError(f"Unknown fill rule {fill!r}: expected 'zeros', 'ones' or a number")
        self.factory = factory
        self.shape = Shape(shape)
        self.fill = fill

    def run(self) -> AllocationResult:
        """
        Execute the allocation.

        Returns
        -------
        AllocationResult
            The tensor and its shape, element count and byte size.
        """
        logger.info(f"Allocating {self.factory.__name__} with shape {tuple(self.shape)} ({self.fill})...")
        if isinstance(self.fill, str) and self.fill == "zeros":
            tensor = self.factory.zeros(self.shape)
        elif isinstance(self.fill, str) and self.fill == "ones":
            tensor = self.factory.ones(self.shape)
        else:
            tensor = self.factory.fill(self.fill, self.shape)

        result = AllocationResult(
            tensor=tensor,
            shape=tuple(tensor.shape),
            numel=tensor.numel(),
            size=tensor.size(),
        )
        logger.info(f"Allocated {result.numel} elements ({result.size} bytes).")
        return result
