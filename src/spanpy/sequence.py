"""Carrier capability helpers.

A carrier is any `collections.abc.Sequence` (`str`, `bytes`, `tuple`, ...):
something with a length, slice access and element iteration. Everything a
span needs from its carrier goes through the functions here, so the span
logic itself is written once for text, byte buffers and token arrays.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, TypeVar


E = TypeVar("E")


class CompareResult(str, Enum):
    MATCH = "match"
    INCOMPLETE = "incomplete"
    NO_MATCH = "no_match"


def window(carrier: Sequence[E], start: int, end: int) -> Sequence[E]:
    """Content of `[start, min(end, len(carrier)))`; empty when start is past the end."""
    stop = min(end, len(carrier))
    if start >= stop:
        return carrier[0:0]
    return carrier[start:stop]


def position(content: Sequence[E], predicate: Callable[[E], bool]) -> int | None:
    for i, item in enumerate(content):
        if predicate(item):
            return i
    return None


def _fold_text(item: Any) -> Any:
    if isinstance(item, str):
        return item.lower()
    return item


def _fold_ascii(item: int) -> int:
    # bytes iterate as ints; only ASCII letters have a case there.
    if 0x41 <= item <= 0x5A:
        return item + 0x20
    return item


def _compare(content: Sequence[Any], literal: Sequence[Any], key: Callable[[Any], Any] | None) -> CompareResult:
    for a, b in zip(content, literal):
        if key is not None:
            a, b = key(a), key(b)
        if a != b:
            return CompareResult.NO_MATCH
    if len(content) < len(literal):
        return CompareResult.INCOMPLETE
    return CompareResult.MATCH


def as_literal(content: Sequence[Any], literal: Sequence[Any]) -> Sequence[Any]:
    # text literals against byte content compare by their UTF-8 encoding
    if isinstance(content, (bytes, bytearray)) and isinstance(literal, str):
        return literal.encode("utf-8")
    return literal


def compare(content: Sequence[Any], literal: Sequence[Any]) -> CompareResult:
    return _compare(content, as_literal(content, literal), None)


def compare_no_case(content: Sequence[Any], literal: Sequence[Any]) -> CompareResult:
    if isinstance(content, (bytes, bytearray)):
        return _compare(content, as_literal(content, literal), _fold_ascii)
    return _compare(content, literal, _fold_text)
