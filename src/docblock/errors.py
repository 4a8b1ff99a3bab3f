"""Error types with formatted source context."""

from __future__ import annotations

from docblock.tokens import Position, Token, position_at


class ParseError(Exception):
    """Raised on the first parse error, with the offending text and the full comment."""

    def __init__(self, message: str, value: str, comment: str, offset: int | None = None) -> None:
        self.message = message
        self.value = value
        self.comment = comment
        self.offset = offset
        super().__init__(self.format())

    @property
    def position(self) -> Position | None:
        if self.offset is None:
            return None
        return position_at(self.comment, self.offset)

    def format(self, filename: str = "<comment>", origin: Position | None = None) -> str:
        """Render the error with a source excerpt.

        origin is the position of the comment within a larger file; when
        given, the reported line and column are file-relative.
        """
        position = self.position
        if position is None:
            return f"error: {self.message}\n  --> {filename}"

        lines = self.comment.splitlines(keepends=True)
        line_idx = position.line - 1
        col = position.column

        shown_line, shown_col = position.line, col
        if origin is not None:
            shown_line += origin.line - 1
            if position.line == 1:
                shown_col += origin.column - 1

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the offending text, but stay within the line
        underline_len = max(1, min(len(self.value), len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(shown_line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{shown_line}:{shown_col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class UnexpectedTokenError(ParseError):
    """A token of the wrong type where the grammar requires something else."""

    def __init__(self, token: Token, comment: str) -> None:
        self.token = token
        super().__init__(f'unexpected token "{token.value}"', token.value, comment, token.offset)


class UnexpectedEndError(ParseError):
    """The comment ended where more input was required."""

    def __init__(self, comment: str) -> None:
        super().__init__("unexpected end of comment", "", comment, len(comment))


class InvalidEmailError(ParseError):
    def __init__(self, email: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid email "{email}"', email, comment, offset)


class InvalidLinkError(ParseError):
    def __init__(self, link: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid link "{link}"', link, comment, offset)


class InvalidTypeError(ParseError):
    def __init__(self, type_name: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid type "{type_name}"', type_name, comment, offset)


class InvalidVariableError(ParseError):
    def __init__(self, variable: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid variable "{variable}"', variable, comment, offset)


class InvalidVersionError(ParseError):
    def __init__(self, version: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid version "{version}"', version, comment, offset)


class InvalidMethodError(ParseError):
    def __init__(self, method: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid method name "{method}"', method, comment, offset)


class InvalidElementError(ParseError):
    def __init__(self, element: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid element name "{element}"', element, comment, offset)


class InvalidFileError(ParseError):
    def __init__(self, file: str, comment: str, offset: int | None = None) -> None:
        super().__init__(f'invalid file name "{file}"', file, comment, offset)


class InternalElementError(Exception):
    """Raised when asked to parse the documentation of a built-in declaration."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'cannot parse internal element "{name}"')
