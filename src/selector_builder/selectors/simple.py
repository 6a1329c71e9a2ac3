"""Compound selector accumulating fragments in CSS order.

A compound selector has the shape::

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element occur at most once. Classes, attributes and
pseudo-classes may repeat and keep the order they were added in.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, NoReturn, Optional, Type

from .base import Selector
from ..utils.errors import DuplicateKindError, OrderError, SelectorError
from ..utils.logging_config import log_fragment_rejected


class FragmentKind(Enum):
    """Fragment categories in the order they must appear."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_singleton(self) -> bool:
        return self in (FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT)


_RANKS = {kind: index for index, kind in enumerate(FragmentKind)}


@dataclass
class SelectorParts:
    """Fragments of one compound selector, one field per category."""

    element: Optional[str] = None
    id: Optional[str] = None
    class_names: List[str] = field(default_factory=list)
    attributes: List[str] = field(default_factory=list)
    pseudo_classes: List[str] = field(default_factory=list)
    pseudo_element: Optional[str] = None

    def has(self, kind: FragmentKind) -> bool:
        """Check whether any fragment of ``kind`` is present."""
        if kind is FragmentKind.ELEMENT:
            return self.element is not None
        if kind is FragmentKind.ID:
            return self.id is not None
        if kind is FragmentKind.CLASS:
            return bool(self.class_names)
        if kind is FragmentKind.ATTRIBUTE:
            return bool(self.attributes)
        if kind is FragmentKind.PSEUDO_CLASS:
            return bool(self.pseudo_classes)
        return self.pseudo_element is not None

    def highest_kind(self) -> Optional[FragmentKind]:
        """The latest category present, or None for an empty selector."""
        present = [kind for kind in FragmentKind if self.has(kind)]
        return present[-1] if present else None

    def copy(self) -> "SelectorParts":
        return replace(
            self,
            class_names=list(self.class_names),
            attributes=list(self.attributes),
            pseudo_classes=list(self.pseudo_classes),
        )


class SimpleSelector(Selector):
    """Mutable compound selector built through chained fragment calls."""

    def __init__(self) -> None:
        self._parts = SelectorParts()

    @property
    def parts(self) -> SelectorParts:
        """A copy of the accumulated fragments."""
        return self._parts.copy()

    def element(self, value: str) -> "SimpleSelector":
        # Element must come first, so any other fragment is an ordering error
        highest = self._parts.highest_kind()
        if highest is not None and highest is not FragmentKind.ELEMENT:
            self._reject(OrderError, FragmentKind.ELEMENT)
        if self._parts.element is not None:
            self._reject(DuplicateKindError, FragmentKind.ELEMENT)
        self._parts.element = value
        return self

    def id(self, value: str) -> "SimpleSelector":
        self._check(FragmentKind.ID)
        self._parts.id = value
        return self

    def class_name(self, value: str) -> "SimpleSelector":
        self._check(FragmentKind.CLASS)
        self._parts.class_names.append(value)
        return self

    class_ = class_name

    def attr(self, value: str) -> "SimpleSelector":
        self._check(FragmentKind.ATTRIBUTE)
        self._parts.attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> "SimpleSelector":
        self._check(FragmentKind.PSEUDO_CLASS)
        self._parts.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> "SimpleSelector":
        self._check(FragmentKind.PSEUDO_ELEMENT)
        self._parts.pseudo_element = value
        return self

    def add(self, kind: FragmentKind, value: str) -> "SimpleSelector":
        """Add a fragment of the given kind."""
        adders = {
            FragmentKind.ELEMENT: self.element,
            FragmentKind.ID: self.id,
            FragmentKind.CLASS: self.class_name,
            FragmentKind.ATTRIBUTE: self.attr,
            FragmentKind.PSEUDO_CLASS: self.pseudo_class,
            FragmentKind.PSEUDO_ELEMENT: self.pseudo_element,
        }
        return adders[kind](value)

    def stringify(self) -> str:
        parts = self._parts
        result = parts.element or ""
        if parts.id is not None:
            result += f"#{parts.id}"
        result += "".join(f".{class_name}" for class_name in parts.class_names)
        result += "".join(f"[{attribute}]" for attribute in parts.attributes)
        result += "".join(f":{pseudo_class}" for pseudo_class in parts.pseudo_classes)
        if parts.pseudo_element is not None:
            result += f"::{parts.pseudo_element}"
        return result

    def compound_count(self) -> int:
        return 1

    def _check(self, kind: FragmentKind) -> None:
        """Validate adding ``kind``; duplicates are reported before ordering."""
        if kind.is_singleton and self._parts.has(kind):
            self._reject(DuplicateKindError, kind)

        highest = self._parts.highest_kind()
        if highest is not None and highest.rank > kind.rank:
            self._reject(OrderError, kind)

    def _reject(self, error_cls: Type[SelectorError], kind: FragmentKind) -> NoReturn:
        selector = self.stringify()
        log_fragment_rejected(kind.value, selector, error_cls.__name__)
        raise error_cls(kind=kind.value, selector=selector)

    def __repr__(self) -> str:
        return f"SimpleSelector({self.stringify()!r})"
