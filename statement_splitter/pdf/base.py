from abc import ABC, abstractmethod
from types import TracebackType


def flatten_page_text(text: str) -> str:
    """Collapse line breaks and whitespace runs into single spaces."""
    return " ".join(text.split())


class BasePdfDocument(ABC):
    """An opened PDF that can be read page by page."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages in the document."""

    @abstractmethod
    def page_text(self, index: int) -> str:
        """Return the flattened plain text of page *index* (0-based).

        Raises:
            PdfExtractionError: if the page text cannot be read.
        """

    @abstractmethod
    def extract_page(self, index: int) -> bytes:
        """Copy page *index* (0-based) into a new single-page PDF.

        Raises:
            PdfExtractionError: if the page cannot be copied.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying library handles."""

    def __enter__(self) -> "BasePdfDocument":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BasePdfReader(ABC):
    """Contract for all PDF reader adapters."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> BasePdfDocument:
        """Open PDF bytes for page-level reading.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            An opened document; callers close it (it is a context manager).

        Raises:
            PdfOpenError: if the bytes cannot be decoded as a PDF.
        """
