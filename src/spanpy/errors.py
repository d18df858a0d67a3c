from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .spans import Span


class ErrorKind(str, Enum):
    TAG = "tag"
    TAKE = "take"
    TAKE_WHILE1 = "take_while1"
    ALPHA = "alpha"
    DIGIT = "digit"
    ALPHANUMERIC = "alphanumeric"
    SPACE = "space"
    MULTISPACE = "multispace"
    ALT = "alt"
    MANY0 = "many0"
    MANY1 = "many1"
    EOF = "eof"


@dataclass(slots=True)
class Incomplete(Exception):
    """Streaming input ran out before a decision could be made.

    `needed` is the minimum number of extra elements the caller should supply
    before retrying. At true end of input, retry in complete mode instead.
    """

    needed: int = 1

    def __str__(self) -> str:
        return f"incomplete input: need at least {self.needed} more element(s)"


@dataclass(slots=True)
class ParseError(Exception):
    """Definitive failure at `span`, tagged with the rule that rejected it."""

    kind: ErrorKind
    span: Span[Any]

    def __str__(self) -> str:
        start, end = self.span.bounds()
        return f"{self.kind.value} error at {start}..{end}: {self.span.materialize()!r}"
