import secrets
import threading
import time
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone
from types import TracebackType

from statement_splitter.logging.logger import Log
from statement_splitter.splitter.models import Artifact
from statement_splitter.store.formatting import format_bytes
from statement_splitter.store.models import Batch, BatchInfo, CleanupSettings, UsageSnapshot
from statement_splitter.store.settings_repository import (
    BaseCleanupSettingsRepository,
    InMemoryCleanupSettingsRepository,
)

_BATCH_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def new_batch_id() -> str:
    """batch_{epoch_ms}_{9 random base36 chars}."""
    suffix = "".join(secrets.choice(_BATCH_ID_ALPHABET) for _ in range(9))
    return f"batch_{int(time.time() * 1000)}_{suffix}"


class BatchStore:
    """In-process table of artifact batches keyed by batch id.

    The store owns artifact bytes once a batch is created; callers re-fetch
    through it instead of keeping their own copies. Construct one per session
    and close it (or use it as a context manager) at teardown. Every operation
    runs under one re-entrant lock, so reads see a consistent snapshot.
    """

    def __init__(self, settings_repo: BaseCleanupSettingsRepository | None = None) -> None:
        self._settings_repo = settings_repo or InMemoryCleanupSettingsRepository()
        self._settings = self._settings_repo.load() or CleanupSettings()
        self._batches: dict[str, Batch] = {}
        self._lock = threading.RLock()

    def __enter__(self) -> "BatchStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def create_batch(self, artifacts: Sequence[Artifact]) -> str:
        if not artifacts:
            raise ValueError("Cannot create a batch without artifacts")
        with self._lock:
            batch_id = new_batch_id()
            while batch_id in self._batches:
                batch_id = new_batch_id()
            self._batches[batch_id] = Batch(
                batch_id=batch_id,
                artifacts=tuple(artifacts),
                created_at=datetime.now(timezone.utc),
            )
        Log.info(f"Stored {len(artifacts)} files in batch {batch_id}")
        self._log_usage()
        return batch_id

    def has_batch(self, batch_id: str) -> bool:
        with self._lock:
            return batch_id in self._batches

    def list_batch_ids(self) -> list[str]:
        with self._lock:
            return list(self._batches)

    def get_batch(self, batch_id: str) -> Batch | None:
        with self._lock:
            return self._batches.get(batch_id)

    def get_artifacts(self, batch_id: str) -> list[Artifact]:
        with self._lock:
            batch = self._batches.get(batch_id)
            return list(batch.artifacts) if batch is not None else []

    def get_all_artifacts(self) -> list[Artifact]:
        with self._lock:
            return [a for batch in self._batches.values() for a in batch.artifacts]

    def get_batch_info(self, batch_id: str) -> BatchInfo | None:
        with self._lock:
            batch = self._batches.get(batch_id)
            if batch is None:
                return None
            return BatchInfo(count=len(batch.artifacts), size_label=format_bytes(batch.total_bytes))

    def get_usage(self) -> UsageSnapshot:
        with self._lock:
            file_count = sum(len(batch.artifacts) for batch in self._batches.values())
            total_bytes = sum(batch.total_bytes for batch in self._batches.values())
        return UsageSnapshot(
            file_count=file_count,
            total_bytes=total_bytes,
            human_readable_size=format_bytes(total_bytes),
            computed_at=datetime.now(timezone.utc),
        )

    # ------------------------------------------------------------------
    # Eviction
    # ------------------------------------------------------------------

    def clear_batch(self, batch_id: str) -> bool:
        """Drop a whole batch. Unknown ids are a no-op returning False."""
        with self._lock:
            removed = self._batches.pop(batch_id, None)
        if removed is None:
            Log.debug(f"clear_batch: no batch {batch_id}")
            return False
        Log.info(f"Cleared batch {batch_id}")
        self._log_usage()
        return True

    def clear_all(self) -> bool:
        with self._lock:
            self._batches.clear()
        Log.info("Cleared all batches from memory")
        self._log_usage()
        return True

    def on_download_complete(self, batch_id: str) -> None:
        if self.get_settings().auto_clear_after_download:
            Log.info(f"Auto-clearing batch after download: {batch_id}")
            self.clear_batch(batch_id)

    def requires_delete_confirmation(self, batch_id: str | None = None) -> bool:
        """Whether a manual delete of *batch_id* (or everything) should be confirmed."""
        if not self.get_settings().confirm_before_delete:
            return False
        if batch_id is None:
            return self.get_usage().file_count > 0
        return bool(self.get_artifacts(batch_id))

    @property
    def manual_delete_enabled(self) -> bool:
        return self.get_settings().manual_delete_enabled

    @property
    def show_usage(self) -> bool:
        return self.get_settings().show_usage

    def close(self) -> None:
        """Teardown: warn about unsaved artifacts when enabled, then drop everything."""
        usage = self.get_usage()
        if usage.file_count and self.get_settings().session_warnings:
            Log.warning(
                f"Discarding {usage.file_count} processed files "
                f"({usage.human_readable_size}) held in memory"
            )
        with self._lock:
            self._batches.clear()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def get_settings(self) -> CleanupSettings:
        with self._lock:
            return self._settings

    def update_settings(self, **changes: bool) -> CleanupSettings:
        unknown = set(changes) - CleanupSettings.field_names()
        if unknown:
            raise ValueError(f"Unknown cleanup settings: {sorted(unknown)}")
        with self._lock:
            self._settings = replace(self._settings, **changes)
            self._settings_repo.save(self._settings)
            return self._settings

    def _log_usage(self) -> None:
        usage = self.get_usage()
        Log.debug(f"Memory usage: {usage.file_count} files, {usage.human_readable_size}")
