"""Doc-block lexer: converts comment text into a flat stream of primitive tokens."""

from __future__ import annotations

from collections.abc import Iterator

from docblock.tokens import NEWLINES, PUNCTUATION, Token, TokenType, is_letter


class Lexer:
    """Tokenize a doc comment lazily, with a resettable cursor.

    Tokens are produced on demand and cached, so the cursor can be moved
    back to any earlier index. The stream always ends with one END token;
    past it, ``token`` is None.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._scanner = self._scan()
        self._exhausted = False
        self._position = 0

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    @property
    def token(self) -> Token | None:
        """The token under the cursor, or None past the end of the stream."""
        return self._fetch(self._position)

    @property
    def position(self) -> int:
        return self._position

    def move_next(self) -> bool:
        """Advance the cursor; return True if a token exists at the new position."""
        if self._fetch(self._position) is not None:
            self._position += 1
        return self._fetch(self._position) is not None

    def reset_position(self, position: int) -> None:
        self._position = max(0, position)

    def reset(self) -> None:
        self._position = 0

    def tokenize(self) -> list[Token]:
        """Scan the full source and return the token list."""
        while self._fetch(len(self._tokens)) is not None:
            pass
        return list(self._tokens)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _fetch(self, index: int) -> Token | None:
        while index >= len(self._tokens) and not self._exhausted:
            try:
                self._tokens.append(next(self._scanner))
            except StopIteration:
                self._exhausted = True
        if index < len(self._tokens):
            return self._tokens[index]
        return None

    def _scan(self) -> Iterator[Token]:
        source = self._source
        pos = 0
        while pos < len(source):
            ch = source[pos]

            if is_letter(ch):
                start = pos
                while pos < len(source) and is_letter(source[pos]):
                    pos += 1
                yield Token(TokenType.STRING, source[start:pos], start)
                continue

            newline = _match_newline(source, pos)
            if newline:
                yield Token(TokenType.NEWLINE, newline, pos)
                pos += len(newline)
                continue

            # A lone \r falls through here and joins the surrounding whitespace
            if ch.isspace():
                yield Token(TokenType.WHITESPACE, ch, pos)
            else:
                yield Token(PUNCTUATION.get(ch, TokenType.STRING), ch, pos)
            pos += 1

        yield Token(TokenType.END, "", len(source))


def _match_newline(source: str, pos: int) -> str:
    for newline in NEWLINES:
        if source.startswith(newline, pos):
            return newline
    return ""


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize comment text and return the token list."""
    return Lexer(source).tokenize()
