import json
from abc import ABC, abstractmethod
from dataclasses import asdict
from pathlib import Path

from statement_splitter.logging.logger import Log
from statement_splitter.store.exceptions import SettingsPersistenceError
from statement_splitter.store.models import CleanupSettings


class BaseCleanupSettingsRepository(ABC):
    """Contract for cleanup settings persistence."""

    @abstractmethod
    def load(self) -> CleanupSettings | None:
        """Return stored settings, or None when nothing was saved yet."""

    @abstractmethod
    def save(self, settings: CleanupSettings) -> None:
        """Persist *settings*, replacing what was stored."""


class InMemoryCleanupSettingsRepository(BaseCleanupSettingsRepository):
    """Session-lifetime storage: settings live as long as the process."""

    def __init__(self) -> None:
        self._settings: CleanupSettings | None = None

    def load(self) -> CleanupSettings | None:
        return self._settings

    def save(self, settings: CleanupSettings) -> None:
        self._settings = settings


class JsonFileCleanupSettingsRepository(BaseCleanupSettingsRepository):
    """Stores settings as a JSON object; unknown keys in the file are ignored."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> CleanupSettings | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            known = CleanupSettings.field_names()
            values: dict[str, bool] = {}
            for key, value in data.items():
                if key not in known:
                    continue
                if not isinstance(value, bool):
                    Log.warning(f"Ignoring non-boolean cleanup setting {key}={value!r}")
                    continue
                values[key] = value
            return CleanupSettings(**values)
        except (OSError, ValueError, AttributeError) as exc:
            Log.warning(f"Ignoring unreadable cleanup settings at {self._path}: {exc}")
            return None

    def save(self, settings: CleanupSettings) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
        except OSError as exc:
            raise SettingsPersistenceError(f"Failed to save cleanup settings: {exc}") from exc


def build_settings_repository(path: Path | None) -> BaseCleanupSettingsRepository:
    if path is None:
        return InMemoryCleanupSettingsRepository()
    return JsonFileCleanupSettingsRepository(path)
