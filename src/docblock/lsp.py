"""Minimal LSP server for docblock, diagnostics only."""

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

from docblock import __version__
from docblock.errors import ParseError
from docblock.parser import parse
from docblock.scan import Comment, find_comments
from docblock.tokens import position_at

server = LanguageServer(
    "docblock-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(source: str, comment: Comment, exc: ParseError) -> Diagnostic:
    """Build a diagnostic spanning the offending text within the file."""
    relative = exc.offset if exc.offset is not None else 0
    relative = min(relative, len(comment.text))
    start = comment.offset + relative
    end = min(start + max(1, len(exc.value)), comment.offset + len(comment.text))
    end = max(end, start)

    start_pos = position_at(source, start)
    end_pos = position_at(source, end)
    return Diagnostic(
        range=Range(
            start=Position(line=start_pos.line - 1, character=start_pos.column - 1),
            end=Position(line=end_pos.line - 1, character=end_pos.column - 1),
        ),
        message=exc.message,
        severity=DiagnosticSeverity.Error,
        source="docblock",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse every doc-block of the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    for comment in find_comments(source):
        try:
            parse(comment.text)
        except ParseError as exc:
            diagnostics.append(_diagnostic(source, comment, exc))

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
