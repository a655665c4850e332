from collections.abc import Sequence
from pathlib import Path

from statement_splitter.processor.exceptions import SourceFileError


class FileLoader:
    """Reads an input file (a statement PDF by default) from disk."""

    def __init__(self, allowed_suffixes: Sequence[str] = (".pdf",), kind: str = "PDF") -> None:
        self._allowed_suffixes = tuple(s.lower() for s in allowed_suffixes)
        self._kind = kind

    def load(self, path: Path) -> bytes:
        """Read the file bytes.

        Raises:
            FileNotFoundError: if nothing exists at *path*.
            SourceFileError: if the suffix is not allowed or the file cannot be read.
        """
        if path.suffix.lower() not in self._allowed_suffixes:
            raise SourceFileError(f"'{path.name}' is not a {self._kind} file")
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise SourceFileError(f"Failed to read {path}: {exc}") from exc
