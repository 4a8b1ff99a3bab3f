"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from docblock.lexer import tokenize
from docblock.parser import Parser, parse
from docblock.screener import Screener, screen
from docblock.tags import Document
from docblock.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes text and returns tokens (excluding END)."""

    def _lex(source: str) -> list[Token]:
        return [t for t in tokenize(source) if t.type != TokenType.END]

    return _lex


@pytest.fixture
def scr():
    """Return a helper that screens text and returns tokens (excluding END)."""

    def _screen(source: str) -> list[Token]:
        return [t for t in screen(source) if t.type != TokenType.END]

    return _screen


@pytest.fixture
def grammar():
    """Return a helper building a Parser over a fragment closed by `` */``.

    Grammar fragments stop on whitespace or the outro, so the trailing
    outro gives every fragment a terminator.
    """

    def _grammar(fragment: str) -> Parser:
        comment = fragment + " */"
        return Parser(Screener(comment), comment)

    return _grammar


@pytest.fixture
def doc():
    """Return a helper that wraps text in a one-line doc-block and parses it."""

    def _doc(body: str) -> Document:
        return parse(f"/** {body} */")

    return _doc
