"""Unit tests for PDF path resolution logic — no network required."""

from __future__ import annotations

from pathlib import Path

from jpg2pdf import _resolve_pdf_path


class TestResolvePdfPath:
    def test_none_uses_cwd_default_name(self):
        result = _resolve_pdf_path(output=None)
        assert result.name == "converted.pdf"
        assert result.is_absolute()

    def test_pdf_suffix_treated_as_file(self, tmp_path: Path):
        result = _resolve_pdf_path(output=str(tmp_path / "custom.pdf"))
        assert result == (tmp_path / "custom.pdf").resolve()

    def test_directory_gets_default_name_appended(self, tmp_path: Path):
        result = _resolve_pdf_path(output=str(tmp_path))
        assert result == (tmp_path / "converted.pdf").resolve()

    def test_pdf_suffix_case_insensitive(self, tmp_path: Path):
        result = _resolve_pdf_path(output=str(tmp_path / "custom.PDF"))
        assert result == (tmp_path / "custom.PDF").resolve()

    def test_path_output_accepted(self, tmp_path: Path):
        result = _resolve_pdf_path(output=tmp_path / "out")
        assert result == (tmp_path / "out" / "converted.pdf").resolve()

    def test_nested_directory_with_pdf_filename(self, tmp_path: Path):
        result = _resolve_pdf_path(output=str(tmp_path / "subdir" / "report.pdf"))
        assert result == (tmp_path / "subdir" / "report.pdf").resolve()
