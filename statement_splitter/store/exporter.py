import io
import re
import zipfile
from pathlib import Path

from statement_splitter.logging.logger import Log
from statement_splitter.store.batch_store import BatchStore
from statement_splitter.store.exceptions import ExportError

DEFAULT_ARCHIVE_NAME = "statements.zip"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_LEADING_MONTH_RE = re.compile(r"^(0[1-9]|1[0-2])")


def compact_period(period_label: str) -> str:
    """Squash a period label: "January 2024" -> "January2024", "01_2024" -> "Jan2024"."""
    compact = re.sub(r"[_\s]+", "", period_label)
    return _LEADING_MONTH_RE.sub(lambda m: _MONTHS[int(m.group(1)) - 1], compact)


def archive_name(account_id: str, period_label: str) -> str:
    """{first 7 chars of the account, upper-cased}_{compact period}.zip."""
    prefix = account_id[:7].upper()
    period = compact_period(period_label)
    if prefix and period:
        return f"{prefix}_{period}.zip"
    return DEFAULT_ARCHIVE_NAME


class BatchExporter:
    """Bundles a stored batch into a ZIP archive for download."""

    def __init__(self, store: BatchStore) -> None:
        self._store = store

    def build_archive(self, batch_id: str) -> bytes:
        artifacts = self._store.get_artifacts(batch_id)
        if not artifacts:
            raise ExportError(f"Batch {batch_id} is empty or unknown")
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for artifact in artifacts:
                archive.writestr(artifact.file_name, artifact.content)
        return buf.getvalue()

    def export(self, batch_id: str, target_dir: Path, period_label: str = "") -> Path:
        """Write the batch archive into *target_dir* and signal download completion."""
        artifacts = self._store.get_artifacts(batch_id)
        if not artifacts:
            raise ExportError(f"Batch {batch_id} is empty or unknown")
        path = target_dir / archive_name(artifacts[0].account_id, period_label)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.build_archive(batch_id))
        except OSError as exc:
            raise ExportError(f"Failed to write {path}: {exc}") from exc
        Log.info(f"Exported {len(artifacts)} files from batch {batch_id} to {path}")
        self._store.on_download_complete(batch_id)
        return path
