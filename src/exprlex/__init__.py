"""Lexical analysis for math expressions."""

from __future__ import annotations

from exprlex.errors import LexicalError, NumberFault
from exprlex.lexer import Lexer, tokenize
from exprlex.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "Lexer",
    "LexicalError",
    "NumberFault",
    "Token",
    "TokenKind",
    "tokenize",
]
