class SplitterError(Exception):
    """Base exception for splitting errors."""


class PageExtractionError(SplitterError):
    """Raised when a page is missing its account id and/or customer name."""
