"""Unit tests for writing the assembled PDF — no network required."""

from __future__ import annotations

from pathlib import Path

import pytest

from jpg2pdf import convert_files
from jpg2pdf.assembler import assemble_pdf
from jpg2pdf.errors import EmbedError, EmptySelectionError
from jpg2pdf.files import LocalFile, MemoryFile
from jpg2pdf.selection import select_jpegs


def _write_jpegs(tmp_path: Path, make_jpeg, count: int) -> list[Path]:
    paths = []
    for i in range(count):
        path = tmp_path / f"photo_{i + 1:02d}.jpg"
        path.write_bytes(make_jpeg(120 + i * 40, 90))
        paths.append(path)
    return paths


class TestAssemblePdf:
    @pytest.mark.asyncio
    async def test_single_image(self, tmp_path: Path, make_jpeg):
        [img] = _write_jpegs(tmp_path, make_jpeg, 1)
        out = tmp_path / "output.pdf"

        result = await assemble_pdf(
            selection=select_jpegs([LocalFile(img)]),
            output_path=out,
        )

        assert out.exists()
        assert result.page_count == 1
        assert result.total_bytes == out.stat().st_size
        assert out.read_bytes()[:5] == b"%PDF-"

    @pytest.mark.asyncio
    async def test_multiple_images(self, tmp_path: Path, make_jpeg, pdf_placements):
        images = _write_jpegs(tmp_path, make_jpeg, 3)
        out = tmp_path / "output.pdf"

        result = await assemble_pdf(
            selection=select_jpegs([LocalFile(p) for p in images]),
            output_path=out,
        )

        assert result.page_count == 3
        assert len(pdf_placements(out.read_bytes())) == 3

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path: Path, make_jpeg):
        [img] = _write_jpegs(tmp_path, make_jpeg, 1)
        out = tmp_path / "nested" / "deep" / "output.pdf"

        await assemble_pdf(selection=select_jpegs([LocalFile(img)]), output_path=out)

        assert out.exists()

    @pytest.mark.asyncio
    async def test_failure_writes_nothing(self, tmp_path: Path, make_jpeg):
        out = tmp_path / "output.pdf"
        selection = select_jpegs([
            MemoryFile(name="ok.jpg", data=make_jpeg(10, 10)),
            MemoryFile(name="bad.jpg", data=b"nope"),
        ])

        with pytest.raises(EmbedError, match="bad.jpg"):
            await assemble_pdf(selection=selection, output_path=out)

        assert not out.exists()


class TestConvertFiles:
    @pytest.mark.asyncio
    async def test_skips_non_jpeg_sources(self, tmp_path: Path, make_jpeg):
        images = _write_jpegs(tmp_path, make_jpeg, 2)
        notes = tmp_path / "notes.txt"
        notes.write_text("not an image")

        result = await convert_files(
            [images[0], notes, images[1]],
            tmp_path / "album.pdf",
        )

        assert result.page_count == 2
        assert result.output_path == (tmp_path / "album.pdf").resolve()

    @pytest.mark.asyncio
    async def test_directory_output(self, tmp_path: Path, make_jpeg):
        images = _write_jpegs(tmp_path, make_jpeg, 1)

        result = await convert_files(images, tmp_path / "out")

        assert result.output_path == (tmp_path / "out" / "converted.pdf").resolve()
        assert result.output_path.exists()

    @pytest.mark.asyncio
    async def test_no_jpeg_sources_raises(self, tmp_path: Path):
        with pytest.raises(EmptySelectionError):
            await convert_files([tmp_path / "a.png"], tmp_path / "out.pdf")
