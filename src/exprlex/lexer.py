"""Expression lexer — converts an expression string into a flat token list."""

from __future__ import annotations

from exprlex.errors import LexicalError, NumberFault
from exprlex.tables import OPERATORS, classify_word
from exprlex.tokens import Position, Span, Token, TokenKind, is_digit, is_letter, is_space


class Lexer:
    """Tokenize a math expression into a list of Token objects.

    Malformed numeric literals raise LexicalError immediately. Unknown
    identifiers and unsupported characters become INVALID tokens so that a
    later stage can decide how to report them.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while not self._at_end():
            self._lex_one()
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, kind: TokenKind, text: str, start: Position) -> Token:
        tok = Token(kind, text, Span(start, self._current_pos()))
        self._tokens.append(tok)
        return tok

    def _error(self, fault: NumberFault, chars: list[str]) -> LexicalError:
        return LexicalError(fault, self._current_pos(), self._source, "".join(chars))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_one(self) -> None:
        ch = self._peek()

        if is_space(ch):
            self._advance()
            return

        if is_digit(ch) or (ch == "." and is_digit(self._peek(1))):
            self._lex_number()
            return

        if is_letter(ch):
            self._lex_word()
            return

        start = self._current_pos()
        self._advance()

        if ch == "(":
            self._emit(TokenKind.LEFT_PAREN, ch, start)
        elif ch == ")":
            self._emit(TokenKind.RIGHT_PAREN, ch, start)
        elif ch in OPERATORS:
            self._emit(TokenKind.OPERATOR, ch, start)
        else:
            self._emit(TokenKind.INVALID, ch, start)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def _lex_number(self) -> None:
        start = self._current_pos()
        chars = [self._advance()]
        seen_dot = chars[0] == "."
        seen_exp = False

        while not self._at_end():
            ch = self._peek()

            if is_digit(ch):
                chars.append(self._advance())
            elif ch == ".":
                if seen_dot or seen_exp:
                    raise self._error(NumberFault.MULTIPLE_DECIMAL_POINTS, chars)
                # A dot ends the literal unless a digit, dot or exponent follows
                if not (is_digit(self._peek(1)) or self._peek(1) in (".", "e", "E")):
                    break
                chars.append(self._advance())
                seen_dot = True
            elif ch in "eE":
                if seen_exp:
                    raise self._error(NumberFault.MULTIPLE_EXPONENTS, chars)
                chars.append(self._advance())
                seen_exp = True
                self._lex_exponent(chars)
                # The literal always ends after the exponent digits
                break
            else:
                break

        self._emit(TokenKind.NUMBER, "".join(chars), start)

    def _lex_exponent(self, chars: list[str]) -> None:
        """Consume an optional sign and the exponent digits after 'e' or 'E'."""
        if self._at_end():
            raise self._error(NumberFault.INCOMPLETE_EXPONENT, chars)

        ch = self._peek()
        if ch in "+-":
            chars.append(self._advance())
            if not is_digit(self._peek()):
                raise self._error(NumberFault.EXPONENT_SIGN_WITHOUT_DIGIT, chars)
        elif not is_digit(ch):
            raise self._error(NumberFault.EXPONENT_WITHOUT_DIGIT, chars)

        while is_digit(self._peek()):
            chars.append(self._advance())

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    def _lex_word(self) -> None:
        start = self._current_pos()
        chars = []
        while is_letter(self._peek()):
            chars.append(self._advance())
        word = "".join(chars)
        self._emit(classify_word(word), word, start)


def tokenize(expression: str) -> list[Token]:
    """Convenience function: tokenize an expression and return the token list."""
    return Lexer(expression).tokenize()
