"""jpg2pdf: Combine JPEG images into a PDF, one centered page per image."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .assembler import ConversionResult, assemble_pdf
from .composer import Document, EmbeddedImage, Page, convert
from .errors import (
    ConversionError,
    EmbedError,
    EmptySelectionError,
    ReadError,
    SerializationError,
)
from .files import FileHandle, LocalFile, MemoryFile, RemoteFile, open_handle
from .geometry import (
    A4,
    DEFAULT_PAGE_SIZE,
    LEGAL,
    LETTER,
    PAGE_SIZES,
    Placement,
    fit_image,
)
from .selection import JPEG_MIME_TYPES, Selection, select_jpegs

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "A4",
    "DEFAULT_PAGE_SIZE",
    "JPEG_MIME_TYPES",
    "LEGAL",
    "LETTER",
    "PAGE_SIZES",
    "ConversionError",
    "ConversionResult",
    "Document",
    "EmbedError",
    "EmbeddedImage",
    "EmptySelectionError",
    "FileHandle",
    "LocalFile",
    "MemoryFile",
    "Page",
    "Placement",
    "ReadError",
    "RemoteFile",
    "Selection",
    "SerializationError",
    "assemble_pdf",
    "convert",
    "convert_files",
    "fit_image",
    "open_handle",
    "select_jpegs",
]

DEFAULT_PDF_NAME = "converted.pdf"


def _resolve_pdf_path(*, output: Path | str | None) -> Path:
    """Resolve the output PDF file path.

    Rules:
        - ``None`` → ``{cwd}/converted.pdf``
        - Ends in ``.pdf`` → treated as literal file path
        - Otherwise → treated as directory: ``{path}/converted.pdf``
    """
    if output is None:
        return Path(DEFAULT_PDF_NAME).resolve()

    output = Path(output)
    if output.suffix.lower() == ".pdf":
        return output.resolve()

    return (output / DEFAULT_PDF_NAME).resolve()


async def convert_files(
    sources: Iterable[Path | str],
    output: Path | str | None = None,
    *,
    page_size: tuple[float, float] = DEFAULT_PAGE_SIZE,
) -> ConversionResult:
    """Convert JPEG files into a single PDF file.

    This is the high-level convenience function that combines selection,
    conversion and writing into a single call. Sources that are not JPEG
    files (by extension) are skipped; ``http(s)://`` URLs are fetched.

    Args:
        sources: Local paths or URLs, in page order.
        output: Output path. Omit for ``converted.pdf`` in the CWD, pass a
            ``.pdf`` path to use it literally, or pass a directory to save
            ``converted.pdf`` inside it.
        page_size: ``(width, height)`` of every page in points.

    Returns:
        A :class:`ConversionResult` summarizing the outcome.

    Raises:
        EmptySelectionError: If none of the sources is a JPEG file.
        ReadError: If a file cannot be read.
        EmbedError: If a file is not a valid JPEG.
        SerializationError: If the PDF cannot be written.

    Example::

        import asyncio
        from jpg2pdf import convert_files

        result = asyncio.run(convert_files(["a.jpg", "b.jpg"], "album.pdf"))
        print(f"Saved {result.page_count} pages to {result.output_path}")
    """
    selection = select_jpegs(open_handle(source) for source in sources)
    return await assemble_pdf(
        selection=selection,
        output_path=_resolve_pdf_path(output=output),
        page_size=page_size,
    )
