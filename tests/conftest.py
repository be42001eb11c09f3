from __future__ import annotations

import io
from collections.abc import Callable

import pikepdf
import pytest
from PIL import Image


def _jpeg_bytes(width: int, height: int, color: str = "red") -> bytes:
    """Encode a solid-color RGB JPEG of the given pixel size."""
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="JPEG")
    return buf.getvalue()


def _png_bytes(width: int, height: int) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), "blue").save(buf, format="PNG")
    return buf.getvalue()


def _pdf_placements(pdf_bytes: bytes) -> list[tuple[float, ...]]:
    """Return ``(page_w, page_h, img_w, img_h, x, y)`` for every page."""
    placements = []
    with pikepdf.open(io.BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            _, _, page_w, page_h = (float(v) for v in page.MediaBox)
            for operands, operator in pikepdf.parse_content_stream(page):
                if str(operator) == "cm":
                    a, _, _, d, e, f = (float(v) for v in operands)
                    placements.append((page_w, page_h, a, d, e, f))
    return placements


@pytest.fixture
def make_jpeg() -> Callable[..., bytes]:
    return _jpeg_bytes


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    return _png_bytes


@pytest.fixture
def pdf_placements() -> Callable[[bytes], list[tuple[float, ...]]]:
    return _pdf_placements
