from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    strict_combinators: bool = False  # reject combinators other than ' ', '+', '~', '>'
    log_level: str = "WARNING"
