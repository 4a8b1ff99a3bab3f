"""Developer dumps of tokens and parsed documents."""

from __future__ import annotations

import sys
from dataclasses import fields
from typing import Any, TextIO

from docblock.tags import (
    ApiTag,
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
from docblock.tokens import Token

TAG_KEYWORDS: dict[type, str] = {
    ApiTag: "api",
    AuthorTag: "author",
    CopyrightTag: "copyright",
    DeprecatedTag: "deprecated",
    InheritDocTag: "inheritdoc",
    InternalTag: "internal",
    LinkTag: "link",
    MethodTag: "method",
    PackageTag: "package",
    ParamTag: "param",
    PropertyTag: "property",
    ReturnTag: "return",
    SeeTag: "see",
    SinceTag: "since",
    ThrowsTag: "throws",
    TodoTag: "todo",
    UsedByTag: "used-by",
    UsesTag: "uses",
    VarTag: "var",
    VersionTag: "version",
}


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: offset, type and value."""
    for token in tokens:
        file.write(f"{token.offset:>5} {token.type.name:<15} {token.value!r}\n")


def dump_document(doc: Document, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable tree of a Document to *file*."""
    file.write("Document\n")
    _dump_field("description", doc.description, 1, file)
    for i, tag in enumerate(doc.inline_tags):
        _dump_tag(f"inline[{i}]", tag, 1, file)
    for f in fields(doc):
        if f.name in ("description", "inline_tags"):
            continue
        value = getattr(doc, f.name)
        if value is None:
            continue
        tags = value if isinstance(value, tuple) else (value,)
        for tag in tags:
            _dump_tag(f.name, tag, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_field(name: str, value: Any, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{name}: {value!r}\n")


def _dump_tag(label: str, tag: Tag, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}{label} {type(tag).__name__}\n")
    for field in fields(tag):
        value = getattr(tag, field.name)
        if field.name == "inline_tags":
            for i, inline in enumerate(value):
                _dump_tag(f"inline[{i}]", inline, depth + 1, f)
        elif field.name == "arguments":
            for arg in value:
                f.write(f"{_indent(depth + 1)}argument {arg.type} {arg.name}\n")
        elif isinstance(value, Direction):
            _dump_field(field.name, _direction_names(value), depth + 1, f)
        elif value:
            _dump_field(field.name, value, depth + 1, f)


# ---------------------------------------------------------------------------
# JSON-able form
# ---------------------------------------------------------------------------


def document_to_dict(doc: Document) -> dict[str, Any]:
    """Convert a Document to plain dicts and lists, omitting empty slots."""
    result: dict[str, Any] = {"description": doc.description}
    for f in fields(doc):
        if f.name == "description":
            continue
        value = getattr(doc, f.name)
        if value is None or value == ():
            continue
        if isinstance(value, tuple):
            result[f.name] = [tag_to_dict(tag) for tag in value]
        else:
            result[f.name] = tag_to_dict(value)
    return result


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    result: dict[str, Any] = {"tag": TAG_KEYWORDS[type(tag)]}
    for f in fields(tag):
        value = getattr(tag, f.name)
        if f.name == "inline_tags":
            if value:
                result[f.name] = [tag_to_dict(inline) for inline in value]
        elif f.name == "arguments":
            result[f.name] = [{"type": arg.type, "name": arg.name} for arg in value]
        elif isinstance(value, Direction):
            result[f.name] = _direction_names(value)
        else:
            result[f.name] = value
    return result


def _direction_names(direction: Direction) -> list[str]:
    return [d.name.lower() for d in Direction if d in direction]
