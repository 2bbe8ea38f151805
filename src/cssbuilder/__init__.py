"""cssbuilder -- fluent CSS selector builder plus small object helpers."""

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    ParseError,
    SelectorError,
)
from cssbuilder.objects import Rectangle, decode, encode, make_rectangle
from cssbuilder.selector import (
    CombinedSelector,
    Combinator,
    CssSelectorBuilder,
    SelectorNode,
    SimpleSelector,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "CssBuilderConfig",
    # errors
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "ParseError",
    # selectors
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "SelectorNode",
    "CssSelectorBuilder",
    "css_selector_builder",
    # objects
    "Rectangle",
    "make_rectangle",
    "encode",
    "decode",
]
