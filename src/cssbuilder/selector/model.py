"""Selector model: SimpleSelector, CombinedSelector, and Combinator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from cssbuilder.errors import DuplicateFragmentError, OrderViolationError

log = logging.getLogger(__name__)

# Fragment kinds in the order they must appear inside a simple selector.
KIND_ORDER: tuple[str, ...] = (
    "element",
    "id",
    "class",
    "attribute",
    "pseudo-class",
    "pseudo-element",
)


class Combinator(str, Enum):
    """Relational tokens joining two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


class SelectorNode(Protocol):
    """Anything that can render itself as selector text."""

    def stringify(self) -> str: ...


@dataclass
class SimpleSelector:
    """A compound selector built one fragment at a time.

    Layout of the rendered text::

        element#id.class[attr]:pseudo-class::pseudo-element

    Element, id and pseudo-element occur at most once.  Classes, attributes
    and pseudo-classes may repeat and keep their call order.  Once a part
    has been added, no part that precedes it in that layout may follow.

    Every builder method returns the selector itself so calls can be chained.
    """

    element_name: str | None = None
    id_name: str | None = None
    class_names: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None

    # --- builder methods ------------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        self._check_order("element")
        self._check_unique("element")
        self.element_name = value
        return self

    def id(self, value: str) -> SimpleSelector:
        self._check_order("id")
        self._check_unique("id")
        self.id_name = value
        return self

    def class_(self, value: str) -> SimpleSelector:
        self._check_order("class")
        self.class_names.append(value)
        return self

    def attr(self, value: str) -> SimpleSelector:
        """Append a raw attribute expression such as ``href$=".png"``."""
        self._check_order("attribute")
        self.attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> SimpleSelector:
        self._check_order("pseudo-class")
        self.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SimpleSelector:
        self._check_unique("pseudo-element")
        self.pseudo_element_name = value
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector; absent parts contribute nothing."""
        parts: list[str] = []
        if self.element_name:
            parts.append(self.element_name)
        if self.id_name:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.class_names)
        parts.extend(f"[{expr}]" for expr in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    # --- validation -----------------------------------------------------------

    def has(self, kind: str) -> bool:
        """Return True if a fragment of *kind* is present."""
        if kind == "element":
            return bool(self.element_name)
        if kind == "id":
            return bool(self.id_name)
        if kind == "class":
            return bool(self.class_names)
        if kind == "attribute":
            return bool(self.attributes)
        if kind == "pseudo-class":
            return bool(self.pseudo_classes)
        if kind == "pseudo-element":
            return bool(self.pseudo_element_name)
        raise ValueError(f"Unknown fragment kind: {kind!r}")

    def _check_order(self, kind: str) -> None:
        later = KIND_ORDER[KIND_ORDER.index(kind) + 1 :]
        blocking = [k for k in later if self.has(k)]
        if blocking:
            log.debug("Rejected %s after %s", kind, ", ".join(blocking))
            raise OrderViolationError(kind)

    def _check_unique(self, kind: str) -> None:
        if self.has(kind):
            log.debug("Rejected second %s fragment", kind)
            raise DuplicateFragmentError(kind)


@dataclass(frozen=True, eq=False)
class CombinedSelector:
    """Two selectors joined by a combinator.

    The combinator is always padded with one space on each side, so the
    descendant combinator renders as three consecutive spaces.
    """

    left: SelectorNode
    combinator: str
    right: SelectorNode

    def __post_init__(self) -> None:
        if isinstance(self.combinator, Combinator):
            object.__setattr__(self, "combinator", self.combinator.value)

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
