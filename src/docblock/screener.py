"""Doc-block screener: a normalizing, backtrackable cursor over the lexer's tokens."""

from __future__ import annotations

from collections.abc import Iterable

from docblock.errors import UnexpectedEndError, UnexpectedTokenError
from docblock.lexer import Lexer
from docblock.tokens import TAG_NAMES, Token, TokenType


class Screener:
    """Buffer of normalized tokens with a main cursor and an independent peek cursor.

    Raw tokens are pulled from the lexer only when a position beyond the
    buffer is requested. Normalization merges whitespace and string runs,
    strips the leading ``*`` of every comment line, and recognizes the
    comment delimiters and ``@tag`` names. A buffered token never changes,
    so backtracking is just ``set_position``.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._lexer = Lexer(source)
        self._tokens: list[Token] = []
        self._position = 0
        self._peek = 0

    # ------------------------------------------------------------------
    # Main cursor
    # ------------------------------------------------------------------

    @property
    def token(self) -> Token | None:
        """The token under the cursor, or None past the end of the stream."""
        return self._fetch(self._position)

    def get_token(self) -> Token | None:
        return self._fetch(self._position)

    def move_next(self) -> bool:
        """Advance the cursor; return True if a token exists at the new position."""
        if self._fetch(self._position) is not None:
            self._position += 1
        self._peek = self._position
        return self._fetch(self._position) is not None

    def get_position(self) -> int:
        return self._position

    def set_position(self, position: int) -> None:
        self._position = position
        self._peek = position

    def is_token(self, tt: TokenType) -> bool:
        token = self.token
        return token is not None and token.type == tt

    def is_token_any(self, types: Iterable[TokenType]) -> bool:
        token = self.token
        return token is not None and token.type in types

    def skip_while(self, tt: TokenType) -> None:
        while self.is_token(tt):
            self.move_next()

    def skip_until(self, tt: TokenType) -> None:
        while self.token is not None and not self.is_token(tt):
            self.move_next()

    # ------------------------------------------------------------------
    # Peek cursor
    # ------------------------------------------------------------------

    def peek(self) -> Token | None:
        """Advance the peek cursor by one and return the token there."""
        if self._fetch(self._peek) is not None:
            self._peek += 1
        return self._fetch(self._peek)

    def reset_peek(self) -> None:
        self._peek = self._position

    def get_peek(self) -> int:
        return self._peek

    def set_peek(self, peek: int) -> None:
        self._peek = peek

    def peek_while_any(self, types: Iterable[TokenType]) -> Token | None:
        """Peek past tokens of the given types; return the first other token."""
        types = frozenset(types)
        token = self.peek()
        while token is not None and token.type in types:
            token = self.peek()
        return token

    def peek_until_any(self, types: Iterable[TokenType]) -> Token | None:
        """Peek until a token of one of the given types; return it."""
        types = frozenset(types)
        token = self.peek()
        while token is not None and token.type not in types:
            token = self.peek()
        return token

    def tokens(self) -> list[Token]:
        """Screen the full source and return the normalized token list."""
        while self._fetch(len(self._tokens)) is not None:
            pass
        return list(self._tokens)

    # ------------------------------------------------------------------
    # Buffer filling
    # ------------------------------------------------------------------

    def _fetch(self, index: int) -> Token | None:
        while index >= len(self._tokens):
            token = self._read()
            if token is None:
                return None

            if token.type == TokenType.WHITESPACE:
                self._merge_whitespace(token)
            elif token.type == TokenType.STRING:
                self._merge_strings(token)
            elif token.type == TokenType.NEWLINE:
                self._fetch_line_start(token)
            elif token.type == TokenType.AT:
                self._fetch_tag(token)
            elif token.type == TokenType.SLASH:
                self._fetch_intro(token)
            elif token.type == TokenType.STAR:
                self._fetch_outro(token)
            else:
                self._tokens.append(token)

        return self._tokens[index]

    def _read(self) -> Token | None:
        token = self._lexer.token
        self._lexer.move_next()
        return token

    def _unread(self, count: int = 1) -> None:
        self._lexer.reset_position(self._lexer.position - count)

    def _merge_whitespace(self, token: Token) -> None:
        value = token.value
        nxt = self._read()
        while nxt is not None and nxt.type == TokenType.WHITESPACE:
            value += nxt.value
            nxt = self._read()
        if nxt is not None:
            self._unread()
        self._tokens.append(Token(TokenType.WHITESPACE, value, token.offset))

    def _merge_strings(self, token: Token) -> None:
        value = token.value
        nxt = self._read()
        while nxt is not None and nxt.type == TokenType.STRING:
            value += nxt.value
            nxt = self._read()
        if nxt is not None:
            self._unread()
        self._tokens.append(Token(TokenType.STRING, value, token.offset))

    def _fetch_line_start(self, newline: Token) -> None:
        nxt = self._read()
        while nxt is not None and nxt.type == TokenType.WHITESPACE:
            nxt = self._read()

        if nxt is None:
            return

        if nxt.type == TokenType.SLASH:
            self._expect(self._read(), TokenType.STAR)
            self._expect(self._read(), TokenType.STAR)
            self._skip_stars()
            self._tokens.append(Token(TokenType.INTRO, "/**", nxt.offset))
            return

        if nxt.type == TokenType.STAR:
            after = self._read()
            if after is None:
                raise UnexpectedEndError(self._source)
            if after.type == TokenType.WHITESPACE:
                # "* " is the line prefix, dropped along with one space
                self._tokens.append(Token(TokenType.WHITESPACE, "\n", nxt.offset))
                return
            if after.type in (TokenType.SLASH, TokenType.STAR):
                while after is not None and after.type == TokenType.STAR:
                    after = self._read()
                self._expect(after, TokenType.SLASH)
                self._tokens.append(Token(TokenType.OUTRO, "*/", nxt.offset))
                return
            self._unread()
            self._tokens.append(Token(TokenType.WHITESPACE, "\n", nxt.offset))
            return

        if nxt.type == TokenType.END:
            self._tokens.append(nxt)
            return

        # A line without a leading star keeps its line break
        self._unread()
        self._tokens.append(Token(TokenType.WHITESPACE, "\n", newline.offset))

    def _fetch_intro(self, slash: Token) -> None:
        first = self._read()
        second = self._read()
        if (
            first is not None
            and second is not None
            and first.type == TokenType.STAR
            and second.type == TokenType.STAR
        ):
            self._skip_stars()
            self._tokens.append(Token(TokenType.INTRO, "/**", slash.offset))
            return
        self._tokens.append(Token(TokenType.STRING, slash.value, slash.offset))
        self._unread(sum(1 for t in (first, second) if t is not None))

    def _fetch_outro(self, star: Token) -> None:
        count = 1
        nxt = self._read()
        while nxt is not None and nxt.type == TokenType.STAR:
            count += 1
            nxt = self._read()
        if nxt is not None and nxt.type == TokenType.SLASH:
            self._tokens.append(Token(TokenType.OUTRO, "*/", star.offset))
            return
        if nxt is not None:
            self._unread()
        self._tokens.append(Token(TokenType.STRING, "*" * count, star.offset))

    def _fetch_tag(self, at: Token) -> None:
        name_token = self._read()
        if name_token is None:
            self._tokens.append(Token(TokenType.STRING, at.value, at.offset))
            return

        name = name_token.value.strip().lower()
        if name_token.type != TokenType.STRING or name not in TAG_NAMES:
            self._tokens.append(Token(TokenType.STRING, at.value, at.offset))
            self._unread()
            return

        tt = TAG_NAMES[name]
        if tt == TokenType.PROPERTY:
            tt, name = self._fetch_property_suffix(name)
        elif tt == TokenType.USED_BY:
            tt, name = self._fetch_used_by_suffix(name)

        self._tokens.append(Token(tt, "@" + name, at.offset))

    def _fetch_property_suffix(self, name: str) -> tuple[TokenType, str]:
        minus = self._read()
        if minus is None:
            return TokenType.PROPERTY, name
        if minus.type != TokenType.MINUS:
            self._unread()
            return TokenType.PROPERTY, name

        suffix = self._read()
        if suffix is None:
            self._unread()
            return TokenType.PROPERTY, name
        direction = suffix.value.strip().lower()
        if direction == "read":
            return TokenType.PROPERTY_READ, name + "-read"
        if direction == "write":
            return TokenType.PROPERTY_WRITE, name + "-write"
        self._unread(2)
        return TokenType.PROPERTY, name

    def _fetch_used_by_suffix(self, name: str) -> tuple[TokenType, str]:
        # Unlike "property", a near miss does not keep the base tag: "@used"
        # and "@used-" (plus whatever follows) become plain text.
        minus = self._read()
        if minus is None or minus.type != TokenType.MINUS:
            if minus is not None:
                self._unread()
            return TokenType.STRING, name

        suffix = self._read()
        if suffix is None:
            return TokenType.STRING, name + minus.value
        if suffix.value.strip().lower() != "by":
            self._unread()
            return TokenType.STRING, name + minus.value
        return TokenType.USED_BY, name + "-by"

    def _skip_stars(self) -> None:
        nxt = self._read()
        while nxt is not None and nxt.type == TokenType.STAR:
            nxt = self._read()
        if nxt is not None:
            self._unread()

    def _expect(self, token: Token | None, tt: TokenType) -> None:
        if token is None:
            raise UnexpectedEndError(self._source)
        if token.type != tt:
            raise UnexpectedTokenError(token, self._source)


def screen(source: str) -> list[Token]:
    """Convenience function: screen comment text and return the normalized tokens."""
    return Screener(source).tokens()
