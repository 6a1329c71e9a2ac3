"""CSS selector nodes and the builder facade."""

from .base import Selector
from .simple import SimpleSelector, SelectorParts, FragmentKind
from .combined import CombinedSelector, Combinator
from .builder import SelectorBuilder, builder

__all__ = [
    "Selector",
    "SimpleSelector",
    "SelectorParts",
    "FragmentKind",
    "CombinedSelector",
    "Combinator",
    "SelectorBuilder",
    "builder",
]
