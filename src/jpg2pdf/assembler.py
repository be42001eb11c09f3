"""Assemble selected JPEG files into a PDF file on disk."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .composer import Page, convert
from .geometry import DEFAULT_PAGE_SIZE
from .selection import Selection


@dataclass
class ConversionResult:
    """Result of converting a selection into a PDF file."""

    page_count: int
    total_bytes: int
    output_path: Path


async def assemble_pdf(
    *,
    selection: Selection,
    output_path: Path,
    page_size: tuple[float, float] = DEFAULT_PAGE_SIZE,
    on_page: Callable[[Page], None] | None = None,
) -> ConversionResult:
    """Convert a selection and write the PDF to *output_path*.

    Nothing is written unless every file converts.

    Args:
        selection: The JPEG files to convert, in page order.
        output_path: Path to write the output PDF.
        page_size: ``(width, height)`` of every page in points.
        on_page: Called with each page once it is placed.

    Returns:
        A :class:`ConversionResult` for the written file.

    Raises:
        ConversionError: If any file fails to read or embed, or the
            document cannot be serialized.
    """
    pdf_bytes = await convert(selection, page_size=page_size, on_page=on_page)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(pdf_bytes)

    return ConversionResult(
        page_count=selection.count,
        total_bytes=len(pdf_bytes),
        output_path=output_path,
    )
