from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from . import sequence
from .errors import ErrorKind, Incomplete, ParseError
from .sequence import CompareResult


T = TypeVar("T", bound=Sequence[Any])

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class Mode(str, Enum):
    """Whether more input may still arrive after the current span."""

    STREAMING = "streaming"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based; line/column are 1-based for user-facing messages.
    """

    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span(Generic[T]):
    """Half-open span [start, end) over a shared, immutable carrier.

    Spans never copy the carrier. Every derived span (slices, splits,
    `between`, `to`) holds the same carrier reference with new offsets, so
    absolute positions survive any number of splits.
    """

    carrier: T
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"span offsets must be non-negative, got {self.start}..{self.end}")

    # construction

    @classmethod
    def whole(cls, carrier: T) -> Span[T]:
        return cls(carrier, 0, len(carrier))

    @classmethod
    def end_of(cls, carrier: T) -> Span[T]:
        """Zero-length span at the end of `carrier`, usable as an end-of-input marker."""
        n = len(carrier)
        return cls(carrier, n, n)

    @classmethod
    def between(cls, first: Span[T], second: Span[T]) -> Span[T]:
        """From the start of `first` up to (not including) the start of `second`."""
        return cls(first.carrier, first.start, second.start)

    @classmethod
    def to(cls, first: Span[T], second: Span[T]) -> Span[T]:
        """Covers `first`, `second` and everything in between."""
        return cls(first.carrier, first.start, second.end)

    # raw access

    def materialize(self) -> T:
        return sequence.window(self.carrier, self.start, self.end)  # type: ignore[return-value]

    def bounds(self) -> tuple[int, int]:
        return (self.start, self.end)

    def __len__(self) -> int:
        return max(0, min(self.end, len(self.carrier)) - self.start)

    def value_int(self) -> int:
        """Integer value of the content.

        Only call this on content a grammar rule already matched as an
        optionally signed run of digits; anything else is a bug upstream.
        """
        content: Any = self.materialize()
        if isinstance(content, (bytes, bytearray)):
            content = content.decode("ascii", errors="replace")
        if not isinstance(content, str) or _INT_RE.fullmatch(content) is None:
            raise RuntimeError(f"{self!r} failed to parse to int")
        value = int(content)
        if not _INT_MIN <= value <= _INT_MAX:
            raise RuntimeError(f"{self!r} is out of range for a 64-bit integer")
        return value

    def location(self) -> Position:
        carrier: Any = self.carrier
        if isinstance(carrier, str):
            newline: Any = "\n"
        elif isinstance(carrier, (bytes, bytearray)):
            newline = b"\n"
        else:
            raise TypeError(f"line/column positions need a text or bytes carrier, not {type(carrier).__name__}")
        pos = min(self.start, len(carrier))
        line = carrier.count(newline, 0, pos) + 1
        # rfind() gives -1 on the first line, which makes the column pos + 1
        column = pos - carrier.rfind(newline, 0, pos)
        return Position(offset=pos, line=line, column=column)

    # slicing

    def __getitem__(self, key: slice | int) -> Any:
        if not isinstance(key, slice):
            return self.materialize()[key]
        if key.step is not None:
            raise ValueError("span slices do not support a step")
        if key.start is None and key.stop is None:
            return self
        lo = 0 if key.start is None else key.start
        if lo < 0 or (key.stop is not None and key.stop < 0):
            raise ValueError(f"span slices take non-negative relative offsets, got {key.start}:{key.stop}")
        end = self.end if key.stop is None else self.start + key.stop
        return Span(self.carrier, self.start + lo, end)

    # consumption

    def take(self, count: int) -> Span[T]:
        return self[:count]

    def take_split(self, count: int) -> tuple[Span[T], Span[T]]:
        """Returns (remainder, taken)."""
        return (self[count:], self[:count])

    def split_at_position(self, predicate: Callable[[Any], bool]) -> tuple[Span[T], Span[T]]:
        n = self.position(predicate)
        if n is None:
            raise Incomplete(1)
        return self.take_split(n)

    def split_at_position_complete(self, predicate: Callable[[Any], bool]) -> tuple[Span[T], Span[T]]:
        try:
            return self.split_at_position(predicate)
        except Incomplete:
            return self.take_split(len(self))

    def split_at_position1(self, predicate: Callable[[Any], bool], kind: ErrorKind) -> tuple[Span[T], Span[T]]:
        n = self.position(predicate)
        if n == 0:
            raise ParseError(kind, self)
        if n is None:
            raise Incomplete(1)
        return self.take_split(n)

    def split_at_position1_complete(self, predicate: Callable[[Any], bool], kind: ErrorKind) -> tuple[Span[T], Span[T]]:
        n = self.position(predicate)
        if n == 0:
            raise ParseError(kind, self)
        if n is not None:
            return self.take_split(n)
        if len(self) == 0:
            raise ParseError(kind, self)
        return self.take_split(len(self))

    def split_at(
        self,
        predicate: Callable[[Any], bool],
        *,
        mode: Mode,
        kind: ErrorKind | None = None,
    ) -> tuple[Span[T], Span[T]]:
        """Split before the first element matching `predicate`.

        `kind=None` allows an empty taken part; with a kind, at least one
        element must be taken or `ParseError(kind)` is raised.
        """
        if mode is Mode.STREAMING:
            if kind is None:
                return self.split_at_position(predicate)
            return self.split_at_position1(predicate, kind)
        if mode is Mode.COMPLETE:
            if kind is None:
                return self.split_at_position_complete(predicate)
            return self.split_at_position1_complete(predicate, kind)
        raise ValueError(f"unknown mode: {mode!r}")

    # iteration and comparison

    def __iter__(self) -> Iterator[Any]:
        return self.iter_elements()

    def iter_elements(self) -> Iterator[Any]:
        return iter(self.materialize())

    def iter_indices(self) -> Iterator[tuple[int, Any]]:
        return enumerate(self.materialize())

    def position(self, predicate: Callable[[Any], bool]) -> int | None:
        return sequence.position(self.materialize(), predicate)

    def slice_index(self, count: int) -> int:
        n = len(self)
        if count > n:
            raise Incomplete(count - n)
        return count

    def compare(self, literal: Sequence[Any] | Span[Any]) -> CompareResult:
        if isinstance(literal, Span):
            literal = literal.materialize()
        return sequence.compare(self.materialize(), literal)

    def compare_no_case(self, literal: Sequence[Any] | Span[Any]) -> CompareResult:
        if isinstance(literal, Span):
            literal = literal.materialize()
        return sequence.compare_no_case(self.materialize(), literal)

    # offsets and diagnostics

    def offset(self, other: Span[T]) -> int:
        """Elements from this span's start to `other`'s start, never negative."""
        return max(0, other.start - self.start)

    def __repr__(self) -> str:
        return f"Span({self.materialize()!r}, {self.start}, {self.end})"
