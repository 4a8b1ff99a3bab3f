"""Locate doc-block comments inside a source file."""

from __future__ import annotations

import re
from dataclasses import dataclass

from docblock.tokens import Position, position_at

# "/**/" and "/***/" are ordinary comments, not doc-blocks
_DOC_BLOCK_RE = re.compile(r"/\*\*(?!\*?/).*?\*/", re.DOTALL)


@dataclass(frozen=True, slots=True)
class Comment:
    """A doc-block found in a file, with the offset of its opening ``/``."""

    text: str
    offset: int

    def position(self, source: str) -> Position:
        return position_at(source, self.offset)


def find_comments(source: str) -> list[Comment]:
    """Return every ``/** ... */`` block in source, in order of appearance."""
    return [Comment(m.group(), m.start()) for m in _DOC_BLOCK_RE.finditer(source)]
