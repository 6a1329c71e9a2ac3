"""Custom error classes for Selector Builder."""

from typing import Optional, Dict, Any


DUPLICATE_KIND_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorBuilderError(Exception):
    """Base exception class for Selector Builder."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SelectorError(SelectorBuilderError):
    """Exception raised when a fragment cannot be added to a selector."""

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        selector: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.kind = kind
        self.selector = selector


class DuplicateKindError(SelectorError):
    """Exception raised when element, id or pseudo-element is given twice."""

    def __init__(
        self,
        kind: Optional[str] = None,
        selector: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(DUPLICATE_KIND_MESSAGE, kind, selector, details)


class OrderError(SelectorError):
    """Exception raised when fragments are added out of order."""

    def __init__(
        self,
        kind: Optional[str] = None,
        selector: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(ORDER_MESSAGE, kind, selector, details)


class CombinatorError(SelectorBuilderError):
    """Exception raised when a strict builder gets an unknown combinator."""

    def __init__(self, combinator: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Unsupported combinator: {combinator!r}", details)
        self.combinator = combinator


class SelectorSpecError(SelectorBuilderError):
    """Exception raised when a declarative selector tree is malformed."""

    pass


class ConfigurationError(SelectorBuilderError):
    """Exception raised when configuration is invalid."""

    pass


class ToolExecutionError(SelectorBuilderError):
    """Exception raised when MCP tool execution fails."""

    def __init__(self, tool_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.tool_name = tool_name


def format_selector_error(error: SelectorError) -> str:
    """Format a selector error into a readable string."""
    parts = []

    if error.kind:
        parts.append(f"Fragment: {error.kind}")

    if error.selector:
        parts.append(f"Selector: {error.selector}")

    location = ", ".join(parts)
    if location:
        return f"{location}: {error.message}"
    return error.message
