"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum

from exprlex.tokens import Position


class NumberFault(Enum):
    """Ways a numeric literal can be malformed."""

    MULTIPLE_DECIMAL_POINTS = "malformed number: multiple decimal points"
    MULTIPLE_EXPONENTS = "malformed number: multiple exponents"
    INCOMPLETE_EXPONENT = "malformed number: incomplete exponent"
    EXPONENT_SIGN_WITHOUT_DIGIT = "malformed number: exponent sign not followed by digit"
    EXPONENT_WITHOUT_DIGIT = "malformed number: exponent not followed by digit"


class LexicalError(Exception):
    """Raised on the first malformed number, with position and source context."""

    def __init__(
        self,
        fault: NumberFault,
        position: Position,
        source: str,
        literal: str = "",
    ) -> None:
        self.fault = fault
        self.message = fault.value
        self.position = position
        self.source = source
        self.literal = literal
        super().__init__(self.format())

    def format(self, filename: str = "<expr>") -> str:
        lines = self.source.split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)
        carets = "^"

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        result = (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
        if self.literal:
            result += f"\n  in literal: {self.literal}"
        return result
