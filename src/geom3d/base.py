from abc import ABC, abstractmethod


class Geometry(ABC):
    @property
    @abstractmethod
    def dim(self) -> int:
        """Dimension of the space the geometry is embedded in."""

    @abstractmethod
    def __hash__(self):
        """Geometry values are hashed by content."""
