from cssbuilder.selector.builder import CssSelectorBuilder, css_selector_builder
from cssbuilder.selector.model import (
    KIND_ORDER,
    CombinedSelector,
    Combinator,
    SelectorNode,
    SimpleSelector,
)

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "KIND_ORDER",
    "CombinedSelector",
    "Combinator",
    "SelectorNode",
    "SimpleSelector",
]
