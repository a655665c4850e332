from dataclasses import dataclass, fields
from datetime import datetime

from statement_splitter.splitter.models import Artifact


@dataclass(frozen=True)
class Batch:
    """Artifacts from one splitting run, in page order."""

    batch_id: str
    artifacts: tuple[Artifact, ...]
    created_at: datetime

    @property
    def total_bytes(self) -> int:
        return sum(artifact.size_bytes for artifact in self.artifacts)


@dataclass(frozen=True)
class UsageSnapshot:
    """Store usage computed on demand, never cached."""

    file_count: int
    total_bytes: int
    human_readable_size: str
    computed_at: datetime


@dataclass(frozen=True)
class BatchInfo:
    count: int
    size_label: str


@dataclass(frozen=True)
class CleanupSettings:
    """User toggles deciding which eviction actions the store offers or triggers."""

    auto_clear_after_download: bool = False
    show_usage: bool = True
    session_warnings: bool = True
    manual_delete_enabled: bool = True
    confirm_before_delete: bool = True

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}
