"""Static lookup tables — functions, arities, constants, and variables."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from exprlex.tokens import TokenKind


@dataclass(frozen=True, slots=True)
class FunctionDef:
    """A recognized function and the number of arguments it expects."""

    name: str
    arity: int


def _make_functions() -> dict[str, FunctionDef]:
    defs: dict[str, FunctionDef] = {}

    def d(name: str, arity: int = 1) -> None:
        defs[name] = FunctionDef(name, arity)

    # Trigonometric
    for name in ("sin", "cos", "tan", "sec", "csc", "cot"):
        d(name)
        d("a" + name)

    # Logarithms and roots
    d("log")
    d("ln")
    d("log_base", 2)
    d("sqrt")
    d("nroot", 2)

    d("abs")

    # Binary power, the function form of the ^ operator
    d("^", 2)

    return defs


FUNCTIONS: Mapping[str, FunctionDef] = MappingProxyType(_make_functions())

FUNCTION_NAMES: frozenset[str] = frozenset(FUNCTIONS)

FUNCTION_ARITY: Mapping[str, int] = MappingProxyType(
    {name: fn.arity for name, fn in FUNCTIONS.items()}
)

CONSTANTS: Mapping[str, float] = MappingProxyType(
    {
        "pi": 3.141592653589793,
        "e": 2.718281828459045,
    }
)

VARIABLES: frozenset[str] = frozenset({"x", "y", "z"})

OPERATORS: frozenset[str] = frozenset("+-*/^%=")


def arity(name: str) -> int:
    """Return the expected argument count for a function name."""
    return FUNCTION_ARITY[name]


def classify_word(word: str) -> TokenKind:
    """Classify a run of letters as a function, constant, variable, or invalid."""
    if word in FUNCTION_NAMES:
        return TokenKind.FUNCTION
    if word in CONSTANTS:
        return TokenKind.CONSTANT
    if word in VARIABLES and len(word) == 1:
        return TokenKind.VARIABLE
    return TokenKind.INVALID
