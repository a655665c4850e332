import io

import pdfplumber
from pypdf import PdfReader, PdfWriter

from statement_splitter.pdf.base import BasePdfDocument, BasePdfReader, flatten_page_text
from statement_splitter.pdf.exceptions import PdfExtractionError, PdfOpenError


class PdfPlumberDocument(BasePdfDocument):
    """Reads page text with pdfplumber and copies pages with pypdf.

    pdfplumber has no writer, so the single-page copies come from a pypdf
    reader opened over the same bytes.
    """

    def __init__(self, plumber_pdf: pdfplumber.PDF, reader: PdfReader) -> None:
        self._pdf = plumber_pdf
        self._reader = reader

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def page_text(self, index: int) -> str:
        try:
            return flatten_page_text(self._pdf.pages[index].extract_text() or "")
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber text extraction failed: {exc}") from exc

    def extract_page(self, index: int) -> bytes:
        try:
            writer = PdfWriter()
            writer.add_page(self._reader.pages[index])
            buf = io.BytesIO()
            writer.write(buf)
            return buf.getvalue()
        except Exception as exc:
            raise PdfExtractionError(f"pypdf page copy failed: {exc}") from exc

    def close(self) -> None:
        self._pdf.close()


class PdfPlumberAdapter(BasePdfReader):
    """Opens PDFs with pdfplumber (text) and pypdf (page copies)."""

    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        plumber_pdf = None
        try:
            plumber_pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
            # Page tree is parsed lazily; touch it so decode errors surface here.
            _ = len(plumber_pdf.pages)
            reader = PdfReader(io.BytesIO(pdf_bytes))
            if len(reader.pages) != len(plumber_pdf.pages):
                raise PdfOpenError("pdfplumber and pypdf disagree on page count")
        except PdfOpenError:
            if plumber_pdf is not None:
                plumber_pdf.close()
            raise
        except Exception as exc:
            if plumber_pdf is not None:
                plumber_pdf.close()
            raise PdfOpenError(f"pdfplumber could not open document: {exc}") from exc
        return PdfPlumberDocument(plumber_pdf, reader)
