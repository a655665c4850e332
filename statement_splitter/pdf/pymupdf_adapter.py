import pymupdf

from statement_splitter.pdf.base import BasePdfDocument, BasePdfReader, flatten_page_text
from statement_splitter.pdf.exceptions import PdfExtractionError, PdfOpenError


class PyMuPdfDocument(BasePdfDocument):
    """Page text and page copies both served by PyMuPDF."""

    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def page_text(self, index: int) -> str:
        try:
            return flatten_page_text(self._doc[index].get_text())
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf text extraction failed: {exc}") from exc

    def extract_page(self, index: int) -> bytes:
        try:
            with pymupdf.open() as single:  # type: ignore[no-untyped-call]
                single.insert_pdf(self._doc, from_page=index, to_page=index)
                return single.tobytes()
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf page copy failed: {exc}") from exc

    def close(self) -> None:
        self._doc.close()


class PyMuPdfAdapter(BasePdfReader):
    """Opens PDFs with PyMuPDF."""

    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfOpenError(f"pymupdf could not open document: {exc}") from exc
        return PyMuPdfDocument(doc)
