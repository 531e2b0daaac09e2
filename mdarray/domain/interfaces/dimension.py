from abc import ABC, abstractmethod

from mdarray.domain.entities.shape import Shape


class Dimension(ABC):
    """Abstract interface for read-only shape and size introspection."""

    @property
    @abstractmethod
    def shape(self) -> Shape:
        """
        Get the number of elements on each axis.

        Returns:
            Shape: The axis extents, outermost axis first, exactly as stored.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Get the size in memory used to store the tensor.

        Returns:
            int: Storage footprint in bytes.
        """
        pass

    @abstractmethod
    def numel(self) -> int:
        """
        Get the flattened number of elements contained in the tensor.

        Returns:
            int: Total number of elements.
        """
        pass
