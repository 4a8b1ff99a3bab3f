"""Declaration metadata and visibility filtering for documented elements.

The parser itself only sees comment strings. This module decides, for a
declaration described by its kind and visibility, whether its comment
should be parsed at all, and pairs each parsed comment with its
declaration.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, IntFlag, auto

from docblock.errors import InternalElementError
from docblock.parser import parse
from docblock.tags import Document


class DeclarationKind(Enum):
    CLASS = auto()
    INTERFACE = auto()
    FUNCTION = auto()
    METHOD = auto()
    PROPERTY = auto()
    CONSTANT = auto()


class Visibility(Enum):
    PUBLIC = auto()
    PROTECTED = auto()
    PRIVATE = auto()


class Filter(IntFlag):
    """Selects class members by kind and visibility."""

    METHODS_PUBLIC = 1
    METHODS_PROTECTED = 2
    METHODS_PRIVATE = 4
    METHODS_ALL = 7
    PROPERTIES_PUBLIC = 8
    PROPERTIES_PROTECTED = 16
    PROPERTIES_PRIVATE = 32
    PROPERTIES_ALL = 56
    CONSTANTS_PUBLIC = 64
    CONSTANTS_PROTECTED = 128
    CONSTANTS_PRIVATE = 256
    CONSTANTS_ALL = 448
    ALL = 511


@dataclass(frozen=True, slots=True)
class Declaration:
    """A program element together with its raw doc comment."""

    kind: DeclarationKind
    name: str
    comment: str = ""
    visibility: Visibility = Visibility.PUBLIC
    internal: bool = False


@dataclass(frozen=True, slots=True)
class DocumentedDeclaration:
    declaration: Declaration
    document: Document


_MEMBER_FILTERS: dict[tuple[DeclarationKind, Visibility], Filter] = {
    (DeclarationKind.METHOD, Visibility.PUBLIC): Filter.METHODS_PUBLIC,
    (DeclarationKind.METHOD, Visibility.PROTECTED): Filter.METHODS_PROTECTED,
    (DeclarationKind.METHOD, Visibility.PRIVATE): Filter.METHODS_PRIVATE,
    (DeclarationKind.PROPERTY, Visibility.PUBLIC): Filter.PROPERTIES_PUBLIC,
    (DeclarationKind.PROPERTY, Visibility.PROTECTED): Filter.PROPERTIES_PROTECTED,
    (DeclarationKind.PROPERTY, Visibility.PRIVATE): Filter.PROPERTIES_PRIVATE,
    (DeclarationKind.CONSTANT, Visibility.PUBLIC): Filter.CONSTANTS_PUBLIC,
    (DeclarationKind.CONSTANT, Visibility.PROTECTED): Filter.CONSTANTS_PROTECTED,
    (DeclarationKind.CONSTANT, Visibility.PRIVATE): Filter.CONSTANTS_PRIVATE,
}


def is_selected(declaration: Declaration, filter: Filter = Filter.ALL) -> bool:
    """Return True if the filter admits the declaration.

    Classes, interfaces and functions are never filtered out.
    """
    bit = _MEMBER_FILTERS.get((declaration.kind, declaration.visibility))
    if bit is None:
        return True
    return bool(filter & bit)


def parse_declaration(declaration: Declaration) -> Document:
    """Parse the doc comment of a user-defined declaration."""
    if declaration.internal:
        raise InternalElementError(declaration.name)
    return parse(declaration.comment)


def parse_declarations(
    declarations: Iterable[Declaration], filter: Filter = Filter.ALL
) -> list[DocumentedDeclaration]:
    """Parse the selected, non-internal declarations, keeping their order."""
    return [
        DocumentedDeclaration(declaration, parse_declaration(declaration))
        for declaration in declarations
        if not declaration.internal and is_selected(declaration, filter)
    ]
