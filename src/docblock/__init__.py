"""Parser for PHPDoc-style documentation comments."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docblock.tags import Document

__version__ = "0.1.0"


def parse(comment: str) -> Document:
    """Parse one ``/** ... */`` comment into a Document."""
    from docblock.parser import parse as _parse

    return _parse(comment)
