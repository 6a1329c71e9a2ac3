"""MCP tools for building CSS selectors."""

import time
from typing import Dict, Any, List, Annotated
from pydantic import Field

from ..config import SelectorBuilderConfig
from ..selectors import Combinator, SelectorBuilder
from ..utils.errors import SelectorBuilderError, SelectorError, ToolExecutionError
from ..utils.errors import format_selector_error
from ..utils.logging_config import log_tool_execution, log_tool_completion, get_logger


def _describe_error(error: SelectorBuilderError) -> str:
    if isinstance(error, SelectorError):
        return format_selector_error(error)
    return error.message


def register_builder_tools(mcp: Any, config: SelectorBuilderConfig) -> None:
    """Register all selector building tools with the MCP server."""

    selector_builder = SelectorBuilder(strict_combinators=config.builder.strict_combinators)

    logger = get_logger("builder_tools")

    @mcp.tool()
    async def build_selector(
        fragments: Annotated[
            List[Dict[str, str]],
            Field(
                description="Fragments of one compound selector in the order they are added. Each item has a 'kind' (element, id, class, attribute, pseudo_class, pseudo_element) and a 'value', e.g. {'kind': 'class', 'value': 'active'}.",
                min_length=1,
            ),
        ],
    ) -> Dict[str, Any]:
        """
        Build a compound selector such as ``a#home.link[href]:hover::after``.

        Args:
            fragments: Ordered list of ``{"kind", "value"}`` items

        Returns:
            Dictionary with the selector text and fragment count
        """
        start_time = time.time()
        tool_name = "build_selector"

        try:
            log_tool_execution(tool_name, {"fragment_count": len(fragments)})

            selector = selector_builder.build_simple(fragments)
            response = {
                "selector": selector.stringify(),
                "fragment_count": len(fragments),
            }

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except SelectorBuilderError as e:
            duration = time.time() - start_time
            error_msg = f"Selector build failed: {_describe_error(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg, details=e.details)

    @mcp.tool()
    async def build_selector_tree(
        tree: Annotated[
            Dict[str, Any],
            Field(
                description="Selector tree. A compound node is {'fragments': [{'kind': ..., 'value': ...}]}; a combined node is {'left': node, 'combinator': one of ' ', '>', '+', '~', 'right': node}.",
            ),
        ],
    ) -> Dict[str, Any]:
        """
        Build a selector from a tree of compound selectors and combinators.

        Args:
            tree: Declarative selector tree

        Returns:
            Dictionary with the selector text and number of compound selectors
        """
        start_time = time.time()
        tool_name = "build_selector_tree"

        try:
            log_tool_execution(tool_name, {"root_keys": sorted(tree)})

            selector = selector_builder.build(tree)
            response = {
                "selector": selector.stringify(),
                "compound_count": selector.compound_count(),
            }

            duration = time.time() - start_time
            log_tool_completion(tool_name, True, duration)

            return response

        except SelectorBuilderError as e:
            duration = time.time() - start_time
            error_msg = f"Selector tree build failed: {_describe_error(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg, details=e.details)

    @mcp.tool()
    async def list_combinators() -> Dict[str, Any]:
        """
        List the CSS combinators accepted by the builder.

        Returns:
            Dictionary with combinator names and symbols
        """
        logger.debug("Listing combinators")
        return {
            "combinators": [
                {"name": member.name.lower(), "symbol": member.value} for member in Combinator
            ],
            "strict": selector_builder.strict_combinators,
        }
