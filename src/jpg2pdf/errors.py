"""Exceptions raised while selecting and converting JPEG files."""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for jpg2pdf errors."""


class EmptySelectionError(ConversionError):
    """Raised when there are no JPEG files to convert."""


class ReadError(ConversionError):
    """Raised when a file's bytes cannot be retrieved."""

    def __init__(self, name: str, cause: BaseException | None = None) -> None:
        super().__init__(f"Failed to read file {name}")
        self.name = name
        self.cause = cause


class EmbedError(ConversionError):
    """Raised when a file's bytes are not a decodable JPEG image."""

    def __init__(self, name: str, cause: BaseException | str) -> None:
        super().__init__(f"Failed to embed {name}: {cause}")
        self.name = name
        self.cause = cause


class SerializationError(ConversionError):
    """Raised when the finished document cannot be written out as PDF."""

    def __init__(self, cause: BaseException | str) -> None:
        super().__init__(f"Failed to write PDF: {cause}")
        self.cause = cause
