"""Conversion between key paths and their string form."""

from __future__ import annotations

from collections.abc import Sequence

from treeconf.common import KeyPath

__all__ = ["format_path", "parse_path", "to_key_path"]


def format_path(path: KeyPath, separator: str = ".") -> str:
    return separator.join(path)


def parse_path(text: str, separator: str = ".") -> KeyPath:
    """Split a dotted path into keys. Empty segments are ignored, so ``""`` is the root."""
    return tuple(segment for segment in text.strip().split(separator) if segment)


def to_key_path(path: str | Sequence[str], separator: str = ".") -> KeyPath:
    if isinstance(path, str):
        return parse_path(path, separator)
    return tuple(path)
