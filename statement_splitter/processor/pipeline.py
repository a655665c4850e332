from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from statement_splitter.matching.models import ContactRecord, MatchResult
from statement_splitter.splitter.cancellation import CancellationToken
from statement_splitter.splitter.models import SplitResult


@dataclass(slots=True)
class PipelineContext:
    source_path: Path
    period_label: str = ""
    contacts_path: Path | None = None
    export_dir: Path | None = None
    cancel_token: CancellationToken | None = None
    raw_bytes: bytes = b""
    split_result: SplitResult | None = None
    batch_id: str | None = None
    loaded_count: int = 0
    contacts: list[ContactRecord] = field(default_factory=list)
    contact_errors: list[str] = field(default_factory=list)
    match_result: MatchResult | None = None
    archive_path: Path | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
