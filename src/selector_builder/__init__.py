"""Selector Builder - fluent construction of CSS selectors, with an MCP server."""

__version__ = "0.1.0"

from .selectors import (
    Selector,
    SimpleSelector,
    CombinedSelector,
    Combinator,
    FragmentKind,
    SelectorBuilder,
    builder,
)
from .utils.errors import (
    SelectorBuilderError,
    SelectorError,
    DuplicateKindError,
    OrderError,
    CombinatorError,
    SelectorSpecError,
)

__all__ = [
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "FragmentKind",
    "SelectorBuilder",
    "builder",
    "SelectorBuilderError",
    "SelectorError",
    "DuplicateKindError",
    "OrderError",
    "CombinatorError",
    "SelectorSpecError",
    "__version__",
]
