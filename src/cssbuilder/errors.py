"""Error hierarchy for the selector builder and JSON helpers."""

from __future__ import annotations


class SelectorError(Exception):
    """Base error for selector construction mistakes."""

    def __init__(self, message: str, *, kind: str = "") -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was set twice."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind=kind,
        )


class OrderViolationError(SelectorError):
    """A part was added after a part that must follow it."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )


class InvalidCombinatorError(SelectorError):
    """Raised in strict mode when a combinator is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: str) -> None:
        super().__init__(f"Invalid combinator: {combinator!r}", kind="combinator")
        self.combinator = combinator


class ParseError(Exception):
    """Raised when text handed to ``decode`` is not valid JSON.

    Keeps the rejected *text* and the 1-based position the JSON decoder
    stopped at.
    """

    def __init__(self, text: str, reason: str, *, line: int, column: int) -> None:
        super().__init__(f"Invalid JSON at line {line}, column {column}: {reason}")
        self.text = text
        self.reason = reason
        self.line = line
        self.column = column
