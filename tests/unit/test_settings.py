from pathlib import Path

import pytest
from pydantic import ValidationError

from statement_splitter.config.settings import Settings


class TestSettingsDefaults:
    def test_default_pdf_engine(self) -> None:
        assert Settings().pdf_engine == "pdfplumber"

    def test_default_paths_are_unset(self) -> None:
        s = Settings()
        assert s.patterns_path is None
        assert s.cleanup_settings_path is None
        assert s.export_dir is None
        assert s.log_file is None

    def test_has_no_environment_name_field(self) -> None:
        assert "app_env" not in Settings.model_fields

    def test_dedupe_enabled_by_default(self) -> None:
        assert Settings().dedupe_file_names is True


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_loads_pdf_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_ENGINE", "pymupdf")
        assert Settings().pdf_engine == "pymupdf"

    def test_loads_paths(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATTERNS_PATH", "/etc/splitter/patterns.json")
        monkeypatch.setenv("EXPORT_DIR", "/tmp/out")
        s = Settings()
        assert s.patterns_path == Path("/etc/splitter/patterns.json")
        assert s.export_dir == Path("/tmp/out")

    def test_loads_period_label(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_PERIOD_LABEL", "May 2025")
        assert Settings().default_period_label == "May 2025"

    def test_loads_dedupe_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEDUPE_FILE_NAMES", "false")
        assert Settings().dedupe_file_names is False


class TestSettingsValidation:
    def test_invalid_dedupe_flag_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEDUPE_FILE_NAMES", "sometimes")
        with pytest.raises(ValidationError):
            Settings()
