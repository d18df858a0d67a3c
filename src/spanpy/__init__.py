from __future__ import annotations

from .errors import ErrorKind, Incomplete, ParseError
from .sequence import CompareResult
from .spans import Mode, Position, Span

__all__ = [
    "CompareResult",
    "ErrorKind",
    "Incomplete",
    "Mode",
    "ParseError",
    "Position",
    "Span",
]
