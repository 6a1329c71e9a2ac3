"""Utility modules for Selector Builder."""

from .errors import (
    SelectorBuilderError,
    SelectorError,
    DuplicateKindError,
    OrderError,
    CombinatorError,
    SelectorSpecError,
    ConfigurationError,
    ToolExecutionError,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "SelectorBuilderError",
    "SelectorError",
    "DuplicateKindError",
    "OrderError",
    "CombinatorError",
    "SelectorSpecError",
    "ConfigurationError",
    "ToolExecutionError",
    "setup_logging",
    "get_logger",
]
