"""Character classification and terminal display width."""

from __future__ import annotations

import string
from enum import Enum

import wcwidth as _wcwidth

_ASCII_PUNCTUATION = frozenset(string.punctuation)


class CharKind(Enum):
    """Word-boundary class of a single character."""

    SPACE = "space"
    PUNCT = "punct"
    WORD = "word"

    @classmethod
    def of(cls, char: str) -> "CharKind":
        if char.isspace():
            return cls.SPACE
        if char in _ASCII_PUNCTUATION:
            return cls.PUNCT
        return cls.WORD


def char_width(char: str) -> int:
    """Columns occupied by ``char``; control characters count as zero."""

    return max(_wcwidth.wcwidth(char), 0)


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)


__all__ = ["CharKind", "char_width", "display_width"]
