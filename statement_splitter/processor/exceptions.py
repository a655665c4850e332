class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class SourceFileError(ProcessorError):
    """Raised when the source PDF cannot be read from disk."""


class SplitFailedError(ProcessorError):
    """Raised when the source document could not be split at all."""
