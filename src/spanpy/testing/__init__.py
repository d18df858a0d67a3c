from __future__ import annotations

from .combinators import (
    Parser,
    is_alpha,
    is_alphanumeric,
    is_digit,
    is_multispace,
    is_space,
    alpha0,
    alpha1,
    alphanumeric1,
    alt,
    digit1,
    eof,
    many0,
    multispace0,
    pair,
    preceded,
    recognize,
    space0,
    tag,
    tag_no_case,
    take,
    take_while,
    take_while1,
)

__all__ = [
    "Parser",
    "is_alpha",
    "is_alphanumeric",
    "is_digit",
    "is_multispace",
    "is_space",
    "alpha0",
    "alpha1",
    "alphanumeric1",
    "alt",
    "digit1",
    "eof",
    "many0",
    "multispace0",
    "pair",
    "preceded",
    "recognize",
    "space0",
    "tag",
    "tag_no_case",
    "take",
    "take_while",
    "take_while1",
]
