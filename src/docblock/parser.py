"""Doc-block parser: converts a screened token stream into a Document."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from docblock.errors import (
    InvalidElementError,
    InvalidEmailError,
    InvalidFileError,
    InvalidLinkError,
    InvalidMethodError,
    InvalidTypeError,
    InvalidVariableError,
    InvalidVersionError,
    ParseError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from docblock.screener import Screener
from docblock.tags import (
    ApiTag,
    Argument,
    AuthorTag,
    CopyrightTag,
    DeprecatedTag,
    Direction,
    Document,
    InheritDocTag,
    InternalTag,
    LinkTag,
    MethodTag,
    PackageTag,
    ParamTag,
    PropertyTag,
    ReturnTag,
    SeeTag,
    SinceTag,
    Tag,
    ThrowsTag,
    TodoTag,
    UsedByTag,
    UsesTag,
    VarTag,
    VersionTag,
)
from docblock.tokens import TAG_TYPES, Token, TokenType


@dataclass(slots=True)
class _DocumentBuilder:
    """Mutable accumulator for the block tags of one comment."""

    description: str = ""
    inline_tags: list[Tag] = field(default_factory=list)
    api: ApiTag | None = None
    deprecated: DeprecatedTag | None = None
    inherit_doc: InheritDocTag | None = None
    package: PackageTag | None = None
    returns: ReturnTag | None = None
    var: VarTag | None = None
    authors: list[AuthorTag] = field(default_factory=list)
    copyrights: list[CopyrightTag] = field(default_factory=list)
    internals: list[InternalTag] = field(default_factory=list)
    links: list[LinkTag] = field(default_factory=list)
    methods: list[MethodTag] = field(default_factory=list)
    params: list[ParamTag] = field(default_factory=list)
    properties: list[PropertyTag] = field(default_factory=list)
    see: list[SeeTag] = field(default_factory=list)
    since: list[SinceTag] = field(default_factory=list)
    throws: list[ThrowsTag] = field(default_factory=list)
    todos: list[TodoTag] = field(default_factory=list)
    used_by: list[UsedByTag] = field(default_factory=list)
    uses: list[UsesTag] = field(default_factory=list)
    versions: list[VersionTag] = field(default_factory=list)

    def build(self) -> Document:
        return Document(
            description=self.description.strip(),
            inline_tags=tuple(self.inline_tags),
            api=self.api,
            deprecated=self.deprecated,
            inherit_doc=self.inherit_doc,
            package=self.package,
            returns=self.returns,
            var=self.var,
            authors=tuple(self.authors),
            copyrights=tuple(self.copyrights),
            internals=tuple(self.internals),
            links=tuple(self.links),
            methods=tuple(self.methods),
            params=tuple(self.params),
            properties=tuple(self.properties),
            see=tuple(self.see),
            since=tuple(self.since),
            throws=tuple(self.throws),
            todos=tuple(self.todos),
            used_by=tuple(self.used_by),
            uses=tuple(self.uses),
            versions=tuple(self.versions),
        )


class Parser:
    """Recursive descent parser for doc-block comments.

    The parser drives a Screener. Optional grammar elements are parsed
    speculatively: the caller records the screener position, and on a
    ParseError restores it and falls back to a default.
    """

    def __init__(self, screener: Screener, comment: str) -> None:
        self._screener = screener
        self._comment = comment

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _skip_ws(self) -> None:
        self._screener.skip_while(TokenType.WHITESPACE)

    def match(self, tt: TokenType) -> Token:
        """Consume and return the current token if it has type tt."""
        token = self._screener.token
        if token is None:
            raise UnexpectedEndError(self._comment)
        if token.type != tt:
            raise UnexpectedTokenError(token, self._comment)
        self._screener.move_next()
        return token

    def _attempt(self, parse: Callable[[], str], default: str) -> str:
        """Run a speculative parse; on failure rewind and return default."""
        position = self._screener.get_position()
        try:
            return parse()
        except ParseError:
            self._screener.set_position(position)
            return default

    def _collect(self, stop: frozenset[TokenType]) -> tuple[str, int]:
        """Concatenate token text up to a token of a stop type.

        Returns the text and the offset of its first token.
        """
        parts: list[str] = []
        start = self._current_offset()
        while (token := self._screener.token) is not None:
            if token.type in stop:
                break
            parts.append(token.value)
            self._screener.move_next()
        return "".join(parts), start

    def _current_offset(self) -> int:
        token = self._screener.token
        return token.offset if token is not None else len(self._comment)

    # ------------------------------------------------------------------
    # Document level
    # ------------------------------------------------------------------

    def parse(self) -> Document:
        builder = _DocumentBuilder()

        self._skip_ws()
        self.match(TokenType.INTRO)
        self._skip_ws()

        builder.description = self._parse_description(builder.inline_tags, False)
        self._parse_tags(builder)

        self.match(TokenType.OUTRO)
        self._skip_ws()
        self.match(TokenType.END)
        return builder.build()

    def _parse_tags(self, builder: _DocumentBuilder) -> None:
        while (token := self._screener.token) is not None and token.type in TAG_TYPES:
            tt = token.type
            if tt == TokenType.API:
                builder.api = self._parse_api_tag()
            elif tt == TokenType.AUTHOR:
                builder.authors.append(self._parse_author_tag())
            elif tt == TokenType.COPYRIGHT:
                builder.copyrights.append(self._parse_copyright_tag())
            elif tt == TokenType.DEPRECATED:
                builder.deprecated = self._parse_deprecated_tag()
            elif tt == TokenType.INHERITDOC:
                builder.inherit_doc = self._parse_inherit_doc_tag(False)
            elif tt == TokenType.INTERNAL:
                builder.internals.append(self._parse_internal_tag(False))
            elif tt == TokenType.LINK:
                builder.links.append(self._parse_link_tag(False))
            elif tt == TokenType.METHOD:
                builder.methods.append(self._parse_method_tag())
            elif tt == TokenType.PACKAGE:
                builder.package = self._parse_package_tag()
            elif tt == TokenType.PARAM:
                builder.params.append(self._parse_param_tag())
            elif tt in _PROPERTY_DIRECTIONS:
                builder.properties.append(self._parse_property_tag())
            elif tt == TokenType.RETURN:
                builder.returns = self._parse_return_tag()
            elif tt == TokenType.SEE:
                builder.see.append(self._parse_see_tag())
            elif tt == TokenType.SINCE:
                builder.since.append(self._parse_since_tag())
            elif tt == TokenType.THROWS:
                builder.throws.append(self._parse_throws_tag())
            elif tt == TokenType.TODO:
                builder.todos.append(self._parse_todo_tag())
            elif tt == TokenType.USES:
                builder.uses.append(self._parse_uses_tag())
            elif tt == TokenType.USED_BY:
                builder.used_by.append(self._parse_used_by_tag())
            elif tt == TokenType.VAR:
                builder.var = self._parse_var_tag()
            elif tt == TokenType.VERSION:
                builder.versions.append(self._parse_version_tag())
            else:
                raise UnexpectedTokenError(token, self._comment)
            self._skip_ws()

    # ------------------------------------------------------------------
    # Descriptions
    # ------------------------------------------------------------------

    def _parse_description(self, inline_tags: list[Tag], is_inline: bool) -> str:
        """Collect description text up to the next tag, the outro, or (inline) a '}'.

        Inline tags found on the way are appended to inline_tags and
        replaced by placeholders.
        """
        parts: list[str] = []
        while (token := self._screener.token) is not None:
            tt = token.type
            if tt in TAG_TYPES or tt == TokenType.OUTRO or (is_inline and tt == TokenType.RBRACE):
                return "".join(parts)

            if tt == TokenType.LBRACE:
                self._screener.reset_peek()
                nxt = self._screener.peek_while_any([TokenType.WHITESPACE])
                inline = self._parse_inline_tag(nxt.type) if nxt is not None else None
                if inline is not None:
                    parts.append(f"{{{{{{{{{len(inline_tags)}}}}}}}}}")
                    inline_tags.append(inline)
                    continue

            parts.append(token.value)
            self._screener.move_next()

        raise UnexpectedEndError(self._comment)

    def _parse_inline_tag(self, tt: TokenType) -> Tag | None:
        if tt == TokenType.INHERITDOC:
            return self._parse_inherit_doc_tag(True)
        if tt == TokenType.INTERNAL:
            return self._parse_internal_tag(True)
        if tt == TokenType.LINK:
            return self._parse_link_tag(True)
        return None

    def _parse_trailing_description(self) -> tuple[str, tuple[Tag, ...]]:
        inline_tags: list[Tag] = []
        description = self._parse_description(inline_tags, False)
        return description.strip(), tuple(inline_tags)

    # ------------------------------------------------------------------
    # Block tags
    # ------------------------------------------------------------------

    def _parse_api_tag(self) -> ApiTag:
        self.match(TokenType.API)
        return ApiTag()

    def _parse_author_tag(self) -> AuthorTag:
        self.match(TokenType.AUTHOR)
        self._skip_ws()
        name, _ = self._collect(_STOP_AUTHOR)

        email = ""
        if self._screener.is_token(TokenType.LANGLE):
            self.match(TokenType.LANGLE)
            email, offset = self._collect(_STOP_EMAIL)
            email = email.strip()
            if self._screener.token is None:
                raise UnexpectedEndError(self._comment)
            if not is_valid_email(email):
                raise InvalidEmailError(email, self._comment, offset)
            self.match(TokenType.RANGLE)

        return AuthorTag(name.strip(), email)

    def _parse_copyright_tag(self) -> CopyrightTag:
        self.match(TokenType.COPYRIGHT)
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return CopyrightTag(description, inline_tags)

    def _parse_deprecated_tag(self) -> DeprecatedTag:
        self.match(TokenType.DEPRECATED)
        self._skip_ws()
        version = self._attempt(self.parse_version, "")
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return DeprecatedTag(version, description, inline_tags)

    def _parse_inherit_doc_tag(self, is_inline: bool) -> InheritDocTag:
        if is_inline:
            self.match(TokenType.LBRACE)
        self._skip_ws()
        self.match(TokenType.INHERITDOC)
        self._skip_ws()
        if is_inline:
            self.match(TokenType.RBRACE)
        return InheritDocTag()

    def _parse_internal_tag(self, is_inline: bool) -> InternalTag:
        if is_inline:
            self.match(TokenType.LBRACE)
        self._skip_ws()
        self.match(TokenType.INTERNAL)
        self._skip_ws()
        inline_tags: list[Tag] = []
        description = self._parse_description(inline_tags, is_inline)
        if is_inline:
            self.match(TokenType.RBRACE)
        return InternalTag(description.strip(), tuple(inline_tags))

    def _parse_link_tag(self, is_inline: bool) -> LinkTag:
        if is_inline:
            self.match(TokenType.LBRACE)
            self._skip_ws()
        self.match(TokenType.LINK)
        self._skip_ws()
        link = self.parse_link()
        self._skip_ws()
        inline_tags: list[Tag] = []
        description = self._parse_description(inline_tags, is_inline)
        if is_inline:
            self.match(TokenType.RBRACE)
        return LinkTag(link, description.strip(), tuple(inline_tags))

    def _parse_method_tag(self) -> MethodTag:
        self.match(TokenType.METHOD)
        self._skip_ws()
        return_type = self._attempt(self._parse_leading_type, "void")

        name, offset = self._collect(_STOP_LPAREN)
        if self._screener.is_token(TokenType.LPAREN):
            self.match(TokenType.LPAREN)
        if not _METHOD_RE.fullmatch(name):
            raise InvalidMethodError(name, self._comment, offset)

        self._skip_ws()
        arguments: list[Argument] = []
        while not self._screener.is_token(TokenType.RPAREN) and self._screener.token is not None:
            arg_type = self._attempt(self.parse_type, "mixed")
            self._skip_ws()
            arguments.append(Argument(arg_type, self.parse_variable()))
            self._skip_ws()
            if not self._screener.is_token(TokenType.COMMA):
                break
            self.match(TokenType.COMMA)
            self._skip_ws()
        self.match(TokenType.RPAREN)

        description, inline_tags = self._parse_trailing_description()
        return MethodTag(return_type, name, tuple(arguments), description, inline_tags)

    def _parse_package_tag(self) -> PackageTag:
        self.match(TokenType.PACKAGE)
        self._skip_ws()
        # Namespaces share the syntax of qualified class names
        return PackageTag(self.parse_class_name())

    def _parse_param_tag(self) -> ParamTag:
        self.match(TokenType.PARAM)
        self._skip_ws()
        param_type = self._attempt(self._parse_leading_type, "mixed")

        name = ""
        if self._screener.is_token(TokenType.DOLLAR):
            name = self.parse_variable()
            self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return ParamTag(param_type, name, description, inline_tags)

    def _parse_property_tag(self) -> PropertyTag:
        token = self._screener.token
        if token is None:
            raise UnexpectedEndError(self._comment)
        direction = _PROPERTY_DIRECTIONS.get(token.type)
        if direction is None:
            raise UnexpectedTokenError(token, self._comment)
        self._screener.move_next()
        self._skip_ws()

        property_type = self._attempt(self._parse_leading_type, "mixed")
        name = self.parse_variable()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return PropertyTag(direction, property_type, name, description, inline_tags)

    def _parse_return_tag(self) -> ReturnTag:
        self.match(TokenType.RETURN)
        self._skip_ws()
        return_type = self.parse_type()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return ReturnTag(return_type, description, inline_tags)

    def _parse_see_tag(self) -> SeeTag:
        self.match(TokenType.SEE)
        self._skip_ws()
        position = self._screener.get_position()
        try:
            reference = self.parse_link()
        except ParseError:
            self._screener.set_position(position)
            reference = self.parse_element()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return SeeTag(reference, description, inline_tags)

    def _parse_since_tag(self) -> SinceTag:
        self.match(TokenType.SINCE)
        self._skip_ws()
        version = self.parse_version()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return SinceTag(version, description, inline_tags)

    def _parse_throws_tag(self) -> ThrowsTag:
        self.match(TokenType.THROWS)
        self._skip_ws()
        throws_type = self.parse_class_name()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return ThrowsTag(throws_type, description, inline_tags)

    def _parse_todo_tag(self) -> TodoTag:
        self.match(TokenType.TODO)
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return TodoTag(description, inline_tags)

    def _parse_uses_tag(self) -> UsesTag:
        self.match(TokenType.USES)
        self._skip_ws()
        reference = self._parse_usage_reference()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return UsesTag(reference, description, inline_tags)

    def _parse_used_by_tag(self) -> UsedByTag:
        self.match(TokenType.USED_BY)
        self._skip_ws()
        reference = self._parse_usage_reference()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return UsedByTag(reference, description, inline_tags)

    def _parse_usage_reference(self) -> str:
        """A URI, an element name, or a file path, tried in that order."""
        position = self._screener.get_position()
        try:
            return self.parse_link()
        except ParseError:
            self._screener.set_position(position)
        try:
            return self.parse_element()
        except ParseError:
            self._screener.set_position(position)

        path, offset = self._collect(_STOP_WS)
        if not _FILE_RE.fullmatch(path):
            raise InvalidFileError(path, self._comment, offset)
        return path

    def _parse_var_tag(self) -> VarTag:
        self.match(TokenType.VAR)
        self._skip_ws()
        var_type = self._attempt(self._parse_leading_type, "mixed")

        name = ""
        if self._screener.is_token(TokenType.DOLLAR):
            name = self.parse_variable()
            self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return VarTag(var_type, name, description, inline_tags)

    def _parse_version_tag(self) -> VersionTag:
        self.match(TokenType.VERSION)
        self._skip_ws()
        version = self.parse_version()
        self._skip_ws()
        description, inline_tags = self._parse_trailing_description()
        return VersionTag(version, description, inline_tags)

    def _parse_leading_type(self) -> str:
        type_name = self.parse_type()
        self._skip_ws()
        return type_name

    # ------------------------------------------------------------------
    # Sub-grammars
    # ------------------------------------------------------------------

    def parse_type(self, recursive: bool = False) -> str:
        """Parse a type expression such as ``(int|string)[]&\\Foo\\Bar``.

        At top level the expression ends at whitespace or the outro; inside
        parentheses only the matching ``)`` ends it.
        """
        if recursive:
            self.match(TokenType.LPAREN)

        parts: list[str] = []
        while (token := self._screener.token) is not None:
            tt = token.type
            if tt in _STOP_WORD:
                if recursive or not parts or parts[-1] in ("&", "|"):
                    raise UnexpectedTokenError(token, self._comment)
                break
            if tt == TokenType.LPAREN:
                parts.append(self.parse_type(True))
            elif tt == TokenType.DOLLAR:
                self.match(TokenType.DOLLAR)
                nxt = self._screener.token
                if nxt is None:
                    raise UnexpectedEndError(self._comment)
                if nxt.value != "this":
                    raise UnexpectedTokenError(nxt, self._comment)
                parts.append("$this")
                self._screener.move_next()
            elif tt in (TokenType.BACKSLASH, TokenType.STRING):
                parts.append(self.parse_class_name())
            else:
                raise UnexpectedTokenError(token, self._comment)

            while self._screener.is_token(TokenType.LBRACKET):
                self.match(TokenType.LBRACKET)
                self.match(TokenType.RBRACKET)
                parts.append("[]")

            nxt = self._screener.token
            if (
                nxt is None
                or nxt.type in _STOP_WORD
                or (recursive and nxt.type == TokenType.RPAREN)
            ):
                break
            if nxt.type not in (TokenType.AMP, TokenType.PIPE):
                raise UnexpectedTokenError(nxt, self._comment)
            parts.append(nxt.value)
            self._screener.move_next()

        if not parts or parts[-1] in ("&", "|"):
            raise UnexpectedEndError(self._comment)
        type_name = "".join(parts)
        if recursive:
            self.match(TokenType.RPAREN)
            type_name = f"({type_name})"
        return type_name

    def parse_class_name(self) -> str:
        """Parse a possibly namespaced class name like ``\\Foo\\Bar``."""
        name, offset = self._collect_while(_CLASS_NAME_TOKENS)
        if not _CLASS_NAME_RE.fullmatch(name):
            raise InvalidTypeError(name, self._comment, offset)
        return name

    def parse_variable(self) -> str:
        """Parse a variable name like ``$foo``."""
        start = self.match(TokenType.DOLLAR)
        rest, _ = self._collect_while(frozenset({TokenType.STRING}))
        name = "$" + rest
        if not _VARIABLE_RE.fullmatch(name):
            raise InvalidVariableError(name, self._comment, start.offset)
        return name

    def parse_version(self) -> str:
        """Parse a version: ``1.2.3``, ``v1.0``, ``@name@``, ``$name$`` or ``vcs: $id$``."""
        version, offset = self._collect(_STOP_WORD)
        if not _VERSION_RE.fullmatch(version):
            raise InvalidVersionError(version, self._comment, offset)

        if version.endswith(":"):
            self._skip_ws()
            self.match(TokenType.DOLLAR)
            parts = [version, " $"]
            while (token := self._screener.token) is not None:
                parts.append(token.value)
                if token.type == TokenType.DOLLAR:
                    self.match(TokenType.DOLLAR)
                    break
                self._screener.move_next()
            if token is None:
                raise UnexpectedEndError(self._comment)
            version = "".join(parts)
        return version

    def parse_link(self) -> str:
        """Parse an absolute URI."""
        link, offset = self._collect(_STOP_LINK)
        if not is_valid_url(link):
            raise InvalidLinkError(link, self._comment, offset)
        return link

    def parse_element(self) -> str:
        """Parse a reference to a class, function, method, property or constant."""
        name, offset = self._collect(_STOP_WORD)
        if not _ELEMENT_RE.fullmatch(name):
            raise InvalidElementError(name, self._comment, offset)
        return name

    def _collect_while(self, accept: frozenset[TokenType]) -> tuple[str, int]:
        parts: list[str] = []
        start = self._current_offset()
        while (token := self._screener.token) is not None and token.type in accept:
            parts.append(token.value)
            self._screener.move_next()
        return "".join(parts), start


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------

_IDENT = r"[a-z_][a-z0-9_]*"
_QUALIFIED = rf"\\?{_IDENT}(?:\\{_IDENT})*"

_CLASS_NAME_RE = re.compile(_QUALIFIED, re.IGNORECASE | re.ASCII)
_VARIABLE_RE = re.compile(rf"\${_IDENT}", re.IGNORECASE | re.ASCII)
_METHOD_RE = re.compile(_IDENT, re.IGNORECASE | re.ASCII)
_FILE_RE = re.compile(r"[a-z0-9./_\-]*", re.IGNORECASE | re.ASCII)
_VERSION_RE = re.compile(
    r"v?[0-9]+[a-z0-9.\-_]+|@[a-z0-9.\-_]+@|\$[a-z0-9.\-_]+\$|[a-z0-9.\-_]+:",
    re.IGNORECASE | re.ASCII,
)
_ELEMENT_RE = re.compile(
    rf"(?:{_QUALIFIED}::)?(?:\$?{_IDENT}|{_IDENT}\(\))|{_QUALIFIED}(?:\(\))?",
    re.IGNORECASE | re.ASCII,
)

_URL_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_HOSTNAME_RE = re.compile(
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?)*\.?"
)
_OPAQUE_SCHEMES = frozenset({"mailto", "news", "tel", "urn"})

_EMAIL_LOCAL_RE = re.compile(r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~\-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~\-]+)*")


def is_valid_url(link: str) -> bool:
    """Return True if link is a well-formed absolute URI."""
    if not _URL_CHARS_RE.fullmatch(link):
        return False
    try:
        parts = urlsplit(link)
        port = parts.port
    except ValueError:
        return False
    if not _SCHEME_RE.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in _OPAQUE_SCHEMES:
        return bool(parts.path or parts.netloc)
    # "file:///path" has an empty authority
    if parts.scheme.lower() == "file" and not parts.netloc:
        return parts.path.startswith("/")
    host = parts.hostname
    if not host or (port is None and parts.netloc.endswith(":")):
        return False
    if ":" in host:
        return _is_ip_address(host)
    return bool(_HOSTNAME_RE.fullmatch(host))


def is_valid_email(email: str) -> bool:
    """Return True if email looks like ``local@domain`` with a qualified domain."""
    local, sep, domain = email.rpartition("@")
    if not sep or not local or not domain or len(local) > 64:
        return False
    if not _EMAIL_LOCAL_RE.fullmatch(local):
        return False
    if domain.startswith("[") and domain.endswith("]"):
        return _is_ip_address(domain[1:-1].removeprefix("IPv6:"))
    return "." in domain.strip(".") and bool(_HOSTNAME_RE.fullmatch(domain))


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


# ----------------------------------------------------------------------
# Module-level constants
# ----------------------------------------------------------------------

_PROPERTY_DIRECTIONS: dict[TokenType, Direction] = {
    TokenType.PROPERTY: Direction.READ | Direction.WRITE,
    TokenType.PROPERTY_READ: Direction.READ,
    TokenType.PROPERTY_WRITE: Direction.WRITE,
}

_STOP_WORD: frozenset[TokenType] = frozenset({TokenType.WHITESPACE, TokenType.OUTRO})
_STOP_WS: frozenset[TokenType] = frozenset({TokenType.WHITESPACE})
_STOP_LINK: frozenset[TokenType] = frozenset(
    {TokenType.WHITESPACE, TokenType.OUTRO, TokenType.RBRACE}
)
_STOP_LPAREN: frozenset[TokenType] = frozenset({TokenType.LPAREN})
_STOP_AUTHOR: frozenset[TokenType] = TAG_TYPES | {TokenType.LANGLE, TokenType.OUTRO}
_STOP_EMAIL: frozenset[TokenType] = frozenset({TokenType.RANGLE})
_CLASS_NAME_TOKENS: frozenset[TokenType] = frozenset({TokenType.STRING, TokenType.BACKSLASH})


def parse(comment: str) -> Document:
    """Convenience function: parse one doc-block comment and return its Document.

    An empty (or all-whitespace) comment yields an empty Document.
    """
    comment = comment.strip()
    if not comment:
        return Document()
    return Parser(Screener(comment), comment).parse()
