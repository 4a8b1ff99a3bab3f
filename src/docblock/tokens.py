"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Punctuation (single-character)
    STAR = auto()  # *
    SLASH = auto()  # /
    AT = auto()  # @
    DOLLAR = auto()  # $
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LANGLE = auto()  # <
    RANGLE = auto()  # >
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    DOT = auto()  # .
    MINUS = auto()  # -
    PIPE = auto()  # |
    BACKSLASH = auto()  # \
    COLON = auto()  # :
    AMP = auto()  # &
    COMMA = auto()  # ,

    # Content
    STRING = auto()  # run of letters, or any other single character
    WHITESPACE = auto()  # one whitespace character (merged by the screener)
    NEWLINE = auto()  # \n, \r\n or \n\r

    # Comment delimiters (produced by the screener)
    INTRO = auto()  # /**
    OUTRO = auto()  # */

    # Tag names (produced by the screener)
    API = auto()
    AUTHOR = auto()
    COPYRIGHT = auto()
    DEPRECATED = auto()
    INHERITDOC = auto()
    INTERNAL = auto()
    LINK = auto()
    METHOD = auto()
    PACKAGE = auto()
    PARAM = auto()
    PROPERTY = auto()
    PROPERTY_READ = auto()
    PROPERTY_WRITE = auto()
    RETURN = auto()
    SEE = auto()
    SINCE = auto()
    THROWS = auto()
    TODO = auto()
    USES = auto()
    USED_BY = auto()
    VAR = auto()
    VERSION = auto()

    END = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single token with its text and the offset of its first character.

    Offsets count characters of the str, not bytes of an encoding.
    """

    type: TokenType
    value: str
    offset: int


PUNCTUATION: dict[str, TokenType] = {
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "@": TokenType.AT,
    "$": TokenType.DOLLAR,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "<": TokenType.LANGLE,
    ">": TokenType.RANGLE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "|": TokenType.PIPE,
    "\\": TokenType.BACKSLASH,
    ":": TokenType.COLON,
    "&": TokenType.AMP,
    ",": TokenType.COMMA,
}

# Base tag names as written after "@" (lowercased). "used" only ever forms
# the compound "used-by"; "property" may be extended by "-read"/"-write".
TAG_NAMES: dict[str, TokenType] = {
    "api": TokenType.API,
    "author": TokenType.AUTHOR,
    "copyright": TokenType.COPYRIGHT,
    "deprecated": TokenType.DEPRECATED,
    "inheritdoc": TokenType.INHERITDOC,
    "internal": TokenType.INTERNAL,
    "link": TokenType.LINK,
    "method": TokenType.METHOD,
    "package": TokenType.PACKAGE,
    "param": TokenType.PARAM,
    "property": TokenType.PROPERTY,
    "return": TokenType.RETURN,
    "see": TokenType.SEE,
    "since": TokenType.SINCE,
    "throws": TokenType.THROWS,
    "todo": TokenType.TODO,
    "uses": TokenType.USES,
    "used": TokenType.USED_BY,
    "var": TokenType.VAR,
    "version": TokenType.VERSION,
}

TAG_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.API,
        TokenType.AUTHOR,
        TokenType.COPYRIGHT,
        TokenType.DEPRECATED,
        TokenType.INHERITDOC,
        TokenType.INTERNAL,
        TokenType.LINK,
        TokenType.METHOD,
        TokenType.PACKAGE,
        TokenType.PARAM,
        TokenType.PROPERTY,
        TokenType.PROPERTY_READ,
        TokenType.PROPERTY_WRITE,
        TokenType.RETURN,
        TokenType.SEE,
        TokenType.SINCE,
        TokenType.THROWS,
        TokenType.TODO,
        TokenType.USES,
        TokenType.USED_BY,
        TokenType.VAR,
        TokenType.VERSION,
    }
)

NEWLINES = ("\r\n", "\n\r", "\n")


def is_letter(ch: str) -> bool:
    """Return True if ch is a Unicode letter."""
    return ch.isalpha()


def position_at(source: str, offset: int) -> Position:
    """Return the line/column position of a character offset in source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)
