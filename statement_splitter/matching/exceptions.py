class MatchingError(Exception):
    """Base exception for contact import errors."""


class ContactsImportError(MatchingError):
    """Raised when a contacts file cannot be read at all."""


class ArchiveImportError(MatchingError):
    """Raised when an artifact archive cannot be opened."""
