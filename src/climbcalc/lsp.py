"""Minimal LSP server for expression files, diagnostics only."""

from __future__ import annotations

import re

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

from climbcalc import __version__
from climbcalc.errors import ExpressionError
from climbcalc.parser import parse

# LSP line terminators only
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

server = LanguageServer(
    "climbcalc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(exc: ExpressionError, line: int) -> Diagnostic:
    # Each line is evaluated on its own, so span columns are line-relative
    start_col = exc.span.start.column - 1
    end_col = max(start_col + 1, exc.span.end.column - 1)
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=start_col),
            end=Position(line=line, character=end_col),
        ),
        message=exc.message,
        severity=DiagnosticSeverity.Error,
        source="climbcalc",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Evaluate every non-blank line and publish diagnostics for failures."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for idx, text in enumerate(_LINE_BREAK.split(doc.source)):
        if not text.strip():
            continue
        try:
            parse(text)
        except ExpressionError as exc:
            diagnostics.append(_diagnostic(exc, idx))

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
