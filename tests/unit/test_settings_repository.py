import json
from pathlib import Path

import pytest

from statement_splitter.store.exceptions import SettingsPersistenceError
from statement_splitter.store.models import CleanupSettings
from statement_splitter.store.settings_repository import (
    InMemoryCleanupSettingsRepository,
    JsonFileCleanupSettingsRepository,
    build_settings_repository,
)


class TestJsonFileRepository:
    def test_missing_file_loads_none(self, tmp_path: Path) -> None:
        repo = JsonFileCleanupSettingsRepository(tmp_path / "cleanup.json")
        assert repo.load() is None

    def test_saved_settings_are_loaded_back(self, tmp_path: Path) -> None:
        repo = JsonFileCleanupSettingsRepository(tmp_path / "nested" / "cleanup.json")
        settings = CleanupSettings(auto_clear_after_download=True, show_usage=False)

        repo.save(settings)

        assert repo.load() == settings

    def test_partial_file_is_merged_with_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "cleanup.json"
        path.write_text(json.dumps({"confirm_before_delete": False, "theme": "dark"}))

        loaded = JsonFileCleanupSettingsRepository(path).load()

        assert loaded == CleanupSettings(confirm_before_delete=False)

    def test_corrupt_file_loads_none(self, tmp_path: Path) -> None:
        path = tmp_path / "cleanup.json"
        path.write_text("{not json")
        assert JsonFileCleanupSettingsRepository(path).load() is None

    def test_non_boolean_values_are_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "cleanup.json"
        path.write_text(
            json.dumps({"auto_clear_after_download": "false", "show_usage": False})
        )

        loaded = JsonFileCleanupSettingsRepository(path).load()

        assert loaded == CleanupSettings(show_usage=False)
        assert loaded.auto_clear_after_download is False

    def test_save_failure_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")
        repo = JsonFileCleanupSettingsRepository(blocker / "cleanup.json")
        with pytest.raises(SettingsPersistenceError):
            repo.save(CleanupSettings())


class TestBuildSettingsRepository:
    def test_in_memory_without_path(self) -> None:
        assert isinstance(build_settings_repository(None), InMemoryCleanupSettingsRepository)

    def test_json_file_with_path(self, tmp_path: Path) -> None:
        repo = build_settings_repository(tmp_path / "cleanup.json")
        assert isinstance(repo, JsonFileCleanupSettingsRepository)
