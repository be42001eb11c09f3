"""Compose JPEG images into a PDF, one centered page per image."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import img2pdf
from PIL import Image

from .errors import (
    ConversionError,
    EmbedError,
    EmptySelectionError,
    ReadError,
    SerializationError,
)
from .files import FileHandle
from .geometry import DEFAULT_PAGE_SIZE, Placement, fit_image, layout_for
from .selection import Selection

logger = logging.getLogger(__name__)

JPEG_FORMATS = frozenset({"JPEG", "MPO"})


@dataclass(frozen=True)
class EmbeddedImage:
    """A decoded JPEG registered with a :class:`Document`."""

    name: str
    data: bytes
    width: int
    height: int


@dataclass(frozen=True)
class Page:
    """A page holding a single image at its computed placement."""

    number: int
    image: EmbeddedImage
    placement: Placement


class Document:
    """An in-memory PDF under construction.

    Pages are appended in order and the document is finalized once with
    :meth:`save`. JPEG data is embedded as-is, without re-encoding.
    """

    def __init__(self, page_size: tuple[float, float] = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size
        self._pages: list[Page] = []

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(self._pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def embed_jpeg(self, name: str, data: bytes) -> EmbeddedImage:
        """Decode *data* as a JPEG image.

        Raises:
            EmbedError: If the bytes are not a decodable JPEG image.
        """
        try:
            with Image.open(io.BytesIO(data)) as image:
                image_format = image.format
                image.load()
                width, height = image.size
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise EmbedError(name, exc) from exc

        # MPO: JPEG carrying a multi-picture APP2 segment.
        if image_format not in JPEG_FORMATS:
            raise EmbedError(name, f"expected JPEG data, found {image_format}")

        return EmbeddedImage(name=name, data=data, width=width, height=height)

    def add_page(self, image: EmbeddedImage) -> Page:
        """Append a page showing *image* scaled to fit and centered."""
        page = Page(
            number=len(self._pages) + 1,
            image=image,
            placement=fit_image(image.width, image.height, self.page_size),
        )
        self._pages.append(page)
        return page

    def save(self) -> bytes:
        """Serialize the document to PDF bytes.

        Raises:
            SerializationError: If the document is empty or img2pdf fails.
        """
        if not self._pages:
            raise SerializationError("document has no pages")

        try:
            return img2pdf.convert(
                [page.image.data for page in self._pages],
                layout_fun=layout_for(self.page_size),
                rotation=img2pdf.Rotation.none,
                first_frame_only=True,
            )
        except Exception as exc:
            raise SerializationError(exc) from exc


async def convert(
    files: Selection | Iterable[FileHandle],
    *,
    page_size: tuple[float, float] = DEFAULT_PAGE_SIZE,
    on_page: Callable[[Page], None] | None = None,
) -> bytes:
    """Convert JPEG files into a single PDF with one page per file.

    Files are read and embedded one at a time, in order. The first file
    that cannot be read or embedded aborts the whole run; no partial
    document is produced.

    Args:
        files: A :class:`Selection` or an ordered iterable of file handles.
        page_size: ``(width, height)`` of every page in points.
        on_page: Called with each :class:`Page` once it is placed.

    Returns:
        The PDF document as bytes.

    Raises:
        EmptySelectionError: If there are no files to convert.
        ReadError: If a file cannot be read.
        EmbedError: If a file is not a valid JPEG.
        SerializationError: If the finished document cannot be written.

    Example::

        import asyncio
        from jpg2pdf import LocalFile, convert, select_jpegs

        selection = select_jpegs([LocalFile("a.jpg"), LocalFile("b.jpg")])
        pdf_bytes = asyncio.run(convert(selection))
    """
    handles = list(files.files if isinstance(files, Selection) else files)
    if not handles:
        raise EmptySelectionError("No JPG files selected for conversion.")

    document = Document(page_size=page_size)

    try:
        for handle in handles:
            try:
                data = await handle.read()
            except OSError as exc:
                raise ReadError(handle.name, exc) from exc
            image = document.embed_jpeg(handle.name, data)
            page = document.add_page(image)
            logger.debug(
                "Page %d: %s (%dx%d) at x=%.2f y=%.2f scale=%.4f",
                page.number, image.name, image.width, image.height,
                page.placement.x, page.placement.y, page.placement.scale,
            )
            if on_page is not None:
                on_page(page)

        pdf_bytes = document.save()
    except ConversionError as exc:
        logger.error("PDF conversion failed: %s", exc)
        raise

    logger.debug("Created %d-page PDF (%d bytes)", document.page_count, len(pdf_bytes))
    return pdf_bytes
