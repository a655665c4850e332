from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_file: Path | None = None

    pdf_engine: str = "pdfplumber"

    patterns_path: Path | None = None
    cleanup_settings_path: Path | None = None

    dedupe_file_names: bool = True
    default_period_label: str = ""
    export_dir: Path | None = None
