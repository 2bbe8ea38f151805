"""Facade creating selectors one fragment kind at a time."""

from __future__ import annotations

import logging

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import InvalidCombinatorError
from cssbuilder.selector.model import (
    CombinedSelector,
    Combinator,
    SelectorNode,
    SimpleSelector,
)

log = logging.getLogger(__name__)

_COMBINATOR_TOKENS = frozenset(c.value for c in Combinator)


class CssSelectorBuilder:
    """Entry points for building CSS selectors.

    Each fragment method starts a fresh :class:`SimpleSelector` with that
    fragment applied, so it raises exactly what the selector method would::

        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'

    :meth:`combine` joins two finished selectors of either kind, allowing
    arbitrarily deep nesting.
    """

    def __init__(self, config: CssBuilderConfig | None = None) -> None:
        self.config = config or CssBuilderConfig()

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self,
        left: SelectorNode,
        combinator: str | Combinator,
        right: SelectorNode,
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator*.

        The combinator is emitted verbatim.  It is only checked against the
        four CSS combinators when ``config.strict_combinators`` is set.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        if self.config.strict_combinators and token not in _COMBINATOR_TOKENS:
            raise InvalidCombinatorError(token)
        log.debug("Combining selectors with %r", token)
        return CombinedSelector(left=left, combinator=token, right=right)


css_selector_builder = CssSelectorBuilder()
