"""Facade for creating selector nodes."""

from typing import Any, Dict, Mapping, Tuple, Union

from .base import Selector
from .combined import CombinedSelector, Combinator
from .simple import FragmentKind, SimpleSelector
from ..utils.errors import CombinatorError, SelectorSpecError
from ..utils.logging_config import get_logger


# Names accepted for fragment kinds in declarative trees
FRAGMENT_ALIASES: Dict[str, FragmentKind] = {
    **{kind.value: kind for kind in FragmentKind},
    "class_name": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
}


logger = get_logger("builder")


class SelectorBuilder:
    """Stateless factory for selector nodes.

    Every call returns a new node, so one builder can be shared freely::

        builder.id("main").class_("container").stringify()
        # '#main.container'
        builder.combine(builder.element("div"), "+", builder.element("table")).stringify()
        # 'div + table'
    """

    def __init__(self, strict_combinators: bool = False) -> None:
        self.strict_combinators = strict_combinators

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_name(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_name(value)

    class_ = class_name

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, selector1: Selector, combinator: Union[str, Combinator], selector2: Selector
    ) -> CombinedSelector:
        """Join two selectors with a combinator.

        Args:
            selector1: Left-hand selector
            combinator: One of ``' '``, ``'+'``, ``'~'``, ``'>'``; other strings
                are accepted as-is unless the builder is strict
            selector2: Right-hand selector

        Returns:
            CombinedSelector owning both selectors
        """
        if self.strict_combinators and not Combinator.is_canonical(combinator):
            raise CombinatorError(combinator)
        return CombinedSelector(selector1, combinator, selector2)

    def build(self, tree: Mapping[str, Any]) -> Selector:
        """
        Build a selector from plain data.

        A compound selector is ``{"fragments": [{"kind": ..., "value": ...}]}``
        and a combined one is ``{"left": ..., "combinator": ..., "right": ...}``.

        Args:
            tree: Declarative selector description, e.g. decoded JSON

        Returns:
            The selector node described by ``tree``

        Raises:
            SelectorSpecError: If the description is malformed
            SelectorError: If fragments break ordering or repeat a singleton
        """
        if not isinstance(tree, Mapping):
            raise SelectorSpecError(
                f"Selector node must be a mapping, got {type(tree).__name__}"
            )

        if "fragments" in tree:
            return self.build_simple(tree["fragments"])

        missing = [key for key in ("left", "combinator", "right") if key not in tree]
        if missing:
            raise SelectorSpecError(
                "Selector node needs either 'fragments' or 'left', 'combinator' and 'right'",
                details={"missing": missing},
            )

        combinator = tree["combinator"]
        if not isinstance(combinator, str):
            raise SelectorSpecError(
                f"Combinator must be a string, got {type(combinator).__name__}"
            )
        return self.combine(self.build(tree["left"]), combinator, self.build(tree["right"]))

    def build_simple(self, fragments: Any) -> SimpleSelector:
        """Build a compound selector from a list of ``{"kind", "value"}`` items."""
        if not isinstance(fragments, list) or not fragments:
            raise SelectorSpecError("'fragments' must be a non-empty list")

        selector = SimpleSelector()
        for index, fragment in enumerate(fragments):
            kind, value = self._parse_fragment(index, fragment)
            selector.add(kind, value)

        logger.debug(f"Built compound selector '{selector.stringify()}'")
        return selector

    def _parse_fragment(self, index: int, fragment: Any) -> Tuple[FragmentKind, str]:
        if not isinstance(fragment, Mapping):
            raise SelectorSpecError(
                f"Fragment {index} must be a mapping with 'kind' and 'value'"
            )

        kind_name = fragment.get("kind")
        kind = FRAGMENT_ALIASES.get(kind_name) if isinstance(kind_name, str) else None
        if kind is None:
            raise SelectorSpecError(
                f"Fragment {index} has unknown kind {kind_name!r}",
                details={"allowed": sorted(FRAGMENT_ALIASES)},
            )

        value = fragment.get("value")
        if not isinstance(value, str):
            raise SelectorSpecError(f"Fragment {index} value must be a string")

        return kind, value


builder = SelectorBuilder()
