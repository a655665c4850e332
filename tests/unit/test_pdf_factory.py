from unittest.mock import MagicMock

import pytest

from statement_splitter.pdf.factory import PdfReaderFactory
from statement_splitter.pdf.pdfplumber_adapter import PdfPlumberAdapter
from statement_splitter.pdf.pymupdf_adapter import PyMuPdfAdapter


def _make_settings(pdf_engine: str) -> MagicMock:
    return MagicMock(pdf_engine=pdf_engine)


class TestPdfReaderFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        assert isinstance(PdfReaderFactory.create(_make_settings("pdfplumber")), PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        assert isinstance(PdfReaderFactory.create(_make_settings("pymupdf")), PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        assert isinstance(PdfReaderFactory.create(_make_settings(" PyMuPDF ")), PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfReaderFactory.create(_make_settings("unknown"))
