class StoreError(Exception):
    """Base exception for batch store errors."""


class SettingsPersistenceError(StoreError):
    """Raised when cleanup settings cannot be written."""


class ExportError(StoreError):
    """Raised when a batch cannot be exported."""
