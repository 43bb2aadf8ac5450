"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    NUMBER = auto()  # 12, .5, 3.2e-5
    OPERATOR = auto()  # + - * / ^ % =
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    FUNCTION = auto()  # sin, log, nroot, ...
    CONSTANT = auto()  # pi, e
    VARIABLE = auto()  # x, y, z
    INVALID = auto()  # unknown identifier or unsupported character


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its exact source text."""

    kind: TokenKind
    text: str
    span: Span

    @property
    def pair(self) -> tuple[TokenKind, str]:
        return self.kind, self.text


# C-locale classes: only ASCII characters carry meaning
_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_SPACES = frozenset(" \t\n\r\v\f")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_letter(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return ch in _LETTERS


def is_space(ch: str) -> bool:
    return ch in _SPACES
