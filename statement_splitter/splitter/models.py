from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Artifact:
    """One single-page PDF cut from a source document."""

    account_id: str
    customer_name: str  # raw captured form, not normalized
    file_name: str
    page_index: int  # 0-based position in the source document
    content: bytes = field(repr=False)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class SplitStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass
class SplitResult:
    """Outcome of one splitting run."""

    artifacts: list[Artifact] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    status: SplitStatus = SplitStatus.COMPLETED
    page_count: int = 0

    @property
    def is_completed(self) -> bool:
        return self.status is SplitStatus.COMPLETED
