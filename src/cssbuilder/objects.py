"""Small object helpers: a rectangle factory and JSON encode/decode."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any, Callable, TypeVar

from cssbuilder.errors import ParseError

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width=width, height=height)


def _default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode(value: Any, indent: int | None = None) -> str:
    """Serialise *value* to JSON text.

    Output is compact unless *indent* is given, and mapping keys keep their
    insertion order.  Dataclass instances are written as their field mapping.
    """
    if indent is None:
        return json.dumps(value, separators=(",", ":"), default=_default)
    return json.dumps(value, indent=indent, default=_default)


def decode(factory: Callable[..., T], text: str) -> T:
    """Build an object from JSON text by calling *factory* positionally.

    The values of a parsed object are passed in document order, so
    ``decode(Rectangle, '{"width": 10, "height": 20}')`` calls
    ``Rectangle(10, 20)``.  A parsed array passes its elements the same
    way.  Keeping the value count in line with the factory's signature is
    up to the caller.

    Raises:
        ParseError: *text* is not valid JSON.
        TypeError: *text* holds a scalar rather than an object or array.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(text, exc.msg, line=exc.lineno, column=exc.colno) from exc
    if isinstance(data, dict):
        values = list(data.values())
    elif isinstance(data, list):
        values = data
    else:
        raise TypeError(f"Cannot spread a JSON {type(data).__name__} into arguments")
    return factory(*values)
