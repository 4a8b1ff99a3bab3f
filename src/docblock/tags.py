"""Tag and document types produced by the doc-block parser.

Every tag carries its own description and the inline tags referenced from
it. Inline tag ``i`` appears in the description as the placeholder
``{{{{i}}}}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, auto


class Direction(Flag):
    """Access direction of a ``@property`` tag."""

    READ = auto()
    WRITE = auto()


@dataclass(frozen=True, slots=True)
class ApiTag:
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class AuthorTag:
    name: str
    email: str = ""
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class CopyrightTag:
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class DeprecatedTag:
    version: str = ""
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class InheritDocTag:
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class InternalTag:
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class LinkTag:
    link: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class Argument:
    """One ``type $name`` pair of a ``@method`` signature."""

    type: str
    name: str


@dataclass(frozen=True, slots=True)
class MethodTag:
    return_type: str
    name: str
    arguments: tuple[Argument, ...] = ()
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class PackageTag:
    name: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class ParamTag:
    type: str
    name: str = ""
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class PropertyTag:
    direction: Direction
    type: str
    name: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()

    @property
    def readable(self) -> bool:
        return Direction.READ in self.direction

    @property
    def writable(self) -> bool:
        return Direction.WRITE in self.direction


@dataclass(frozen=True, slots=True)
class ReturnTag:
    type: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class SeeTag:
    reference: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class SinceTag:
    version: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class ThrowsTag:
    type: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class TodoTag:
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class UsedByTag:
    reference: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class UsesTag:
    reference: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class VarTag:
    type: str
    name: str = ""
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, slots=True)
class VersionTag:
    version: str
    description: str = ""
    inline_tags: tuple[Tag, ...] = ()


Tag = (
    ApiTag
    | AuthorTag
    | CopyrightTag
    | DeprecatedTag
    | InheritDocTag
    | InternalTag
    | LinkTag
    | MethodTag
    | PackageTag
    | ParamTag
    | PropertyTag
    | ReturnTag
    | SeeTag
    | SinceTag
    | ThrowsTag
    | TodoTag
    | UsedByTag
    | UsesTag
    | VarTag
    | VersionTag
)


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed doc-block: description, inline tags, and the block tags by kind."""

    description: str = ""
    inline_tags: tuple[Tag, ...] = ()
    api: ApiTag | None = None
    deprecated: DeprecatedTag | None = None
    inherit_doc: InheritDocTag | None = None
    package: PackageTag | None = None
    returns: ReturnTag | None = None
    var: VarTag | None = None
    authors: tuple[AuthorTag, ...] = ()
    copyrights: tuple[CopyrightTag, ...] = ()
    internals: tuple[InternalTag, ...] = ()
    links: tuple[LinkTag, ...] = ()
    methods: tuple[MethodTag, ...] = ()
    params: tuple[ParamTag, ...] = ()
    properties: tuple[PropertyTag, ...] = ()
    see: tuple[SeeTag, ...] = ()
    since: tuple[SinceTag, ...] = ()
    throws: tuple[ThrowsTag, ...] = ()
    todos: tuple[TodoTag, ...] = ()
    used_by: tuple[UsedByTag, ...] = ()
    uses: tuple[UsesTag, ...] = ()
    versions: tuple[VersionTag, ...] = ()
