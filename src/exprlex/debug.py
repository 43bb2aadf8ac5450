"""Token dumps for the command line."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from exprlex.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr, positions: bool = False) -> None:
    """Print one line per token to *file*."""
    width = max((len(t.kind.name) for t in tokens), default=0)
    for tok in tokens:
        line = f"{tok.kind.name:<{width}} {tok.text}"
        if positions:
            start = tok.span.start
            line = f"{start.line}:{start.column}\t{line}"
        file.write(line + "\n")


def tokens_to_json(tokens: list[Token], *, positions: bool = False) -> list[dict[str, Any]]:
    """Convert tokens to plain dicts suitable for json.dumps."""
    result: list[dict[str, Any]] = []
    for tok in tokens:
        item: dict[str, Any] = {"kind": tok.kind.name, "text": tok.text}
        if positions:
            item["start"] = {
                "line": tok.span.start.line,
                "column": tok.span.start.column,
                "offset": tok.span.start.offset,
            }
            item["end"] = {
                "line": tok.span.end.line,
                "column": tok.span.end.column,
                "offset": tok.span.end.offset,
            }
        result.append(item)
    return result
