"""Common interface for selector nodes."""

from abc import ABC, abstractmethod


class Selector(ABC):
    """A node of a selector tree that can be rendered to CSS text."""

    @abstractmethod
    def stringify(self) -> str:
        """Render the selector to its canonical CSS text."""

    @abstractmethod
    def compound_count(self) -> int:
        """Number of compound selectors in the tree."""

    def __str__(self) -> str:
        return self.stringify()
