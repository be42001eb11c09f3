"""Filtering a user's file selection down to JPEG images."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .errors import EmptySelectionError
from .files import FileHandle

JPEG_MIME_TYPES = frozenset({"image/jpeg", "image/jpg"})


@dataclass(frozen=True)
class Selection:
    """An ordered, immutable set of JPEG file handles."""

    files: tuple[FileHandle, ...]

    @property
    def count(self) -> int:
        return len(self.files)

    def summary(self) -> str:
        return f"{self.count} JPG file(s) selected."


def is_jpeg(handle: FileHandle) -> bool:
    """Return True if the handle declares one of the JPEG MIME types."""
    return handle.mime_type in JPEG_MIME_TYPES


def select_jpegs(files: Iterable[FileHandle]) -> Selection:
    """Keep only the JPEG handles from *files*, preserving their order.

    Each call produces a fresh :class:`Selection`; nothing is merged with
    an earlier selection.

    Raises:
        EmptySelectionError: If no handle declares a JPEG MIME type.
    """
    kept = tuple(f for f in files if is_jpeg(f))
    if not kept:
        raise EmptySelectionError("Please select one or more JPG files.")
    return Selection(files=kept)
