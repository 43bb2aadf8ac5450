"""Minimal LSP server for math expressions — diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from exprlex.errors import LexicalError
from exprlex.lexer import tokenize
from exprlex.tokens import Token, TokenKind, is_letter

server = LanguageServer("exprlex-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _invalid_message(tok: Token) -> str:
    if is_letter(tok.text[0]):
        return f"unknown identifier '{tok.text}'"
    return f"unsupported character '{tok.text}'"


def _invalid_diagnostic(tok: Token) -> Diagnostic:
    start = tok.span.start
    end = tok.span.end
    return Diagnostic(
        range=Range(
            start=Position(line=start.line - 1, character=start.column - 1),
            end=Position(line=end.line - 1, character=end.column - 1),
        ),
        message=_invalid_message(tok),
        severity=DiagnosticSeverity.Warning,
        source="exprlex",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        tokens = tokenize(doc.source)
    except LexicalError as exc:
        line = exc.position.line - 1
        col = exc.position.column - 1
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="exprlex",
            )
        )
    else:
        for tok in tokens:
            if tok.kind == TokenKind.INVALID:
                diagnostics.append(_invalid_diagnostic(tok))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
