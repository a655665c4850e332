class PdfExtractionError(Exception):
    """Raised when text or a page cannot be read from a PDF."""


class PdfOpenError(PdfExtractionError):
    """Raised when the source bytes cannot be opened as a PDF at all."""
