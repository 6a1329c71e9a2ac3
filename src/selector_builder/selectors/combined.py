"""Selectors joined by a combinator."""

from dataclasses import dataclass
from enum import Enum

from .base import Selector


class Combinator(str, Enum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def is_canonical(cls, symbol: str) -> bool:
        if isinstance(symbol, cls):
            return True
        return symbol in {member.value for member in cls}


@dataclass(frozen=True)
class CombinedSelector(Selector):
    """Two selector nodes and the combinator between them.

    The combinator is rendered with one space on each side, so the
    descendant combinator shows up as three spaces::

        div + table
        tr:nth-of-type(even)   td:nth-of-type(even)
    """

    left: Selector
    combinator: str
    right: Selector

    def __post_init__(self) -> None:
        if isinstance(self.combinator, Combinator):
            object.__setattr__(self, "combinator", self.combinator.value)

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def compound_count(self) -> int:
        return self.left.compound_count() + self.right.compound_count()
