from collections.abc import Sequence

from statement_splitter.config.settings import Settings
from statement_splitter.extraction.pattern_repository import PatternRepository
from statement_splitter.logging.logger import Log
from statement_splitter.matching.account_matcher import AccountMatcher
from statement_splitter.matching.archive_loader import ArchiveLoader
from statement_splitter.matching.contacts_loader import ContactsCsvLoader
from statement_splitter.pdf.factory import PdfReaderFactory
from statement_splitter.processor.file_loader import FileLoader
from statement_splitter.processor.pipeline import PipelineContext, PipelineStep
from statement_splitter.processor.steps import (
    ExportBatchStep,
    LoadArchiveStep,
    LoadContactsStep,
    LoadDocumentStep,
    LogFailureStep,
    MatchContactsStep,
    ReportUsageStep,
    SplitDocumentStep,
    StoreBatchStep,
)
from statement_splitter.splitter.engine import SplittingEngine
from statement_splitter.store.batch_store import BatchStore
from statement_splitter.store.exporter import BatchExporter


class Processor:
    """Runs one split-store-match-export pass over a source document.

    Pipeline: load -> split -> store -> load contacts -> match -> export -> usage.
    Archive re-imports replace the first three steps with a single load.
    """

    def __init__(self, steps: Sequence[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    def process(self, context: PipelineContext) -> PipelineContext:
        Log.info(f"Processing {context.source_path}")
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        return context


def _match_and_export_steps(store: BatchStore) -> list[PipelineStep]:
    return [
        LoadContactsStep(ContactsCsvLoader()),
        MatchContactsStep(AccountMatcher(), store),
        ExportBatchStep(BatchExporter(store)),
        ReportUsageStep(store),
    ]


def build_processor(settings: Settings, store: BatchStore) -> Processor:
    """Build a Processor with all adapters configured from settings."""
    engine = SplittingEngine(
        PdfReaderFactory.create(settings),
        dedupe_file_names=settings.dedupe_file_names,
    )
    steps: list[PipelineStep] = [
        LoadDocumentStep(FileLoader()),
        SplitDocumentStep(engine, PatternRepository(settings.patterns_path)),
        StoreBatchStep(store),
        *_match_and_export_steps(store),
    ]
    return Processor(steps=steps, failed_step=LogFailureStep())


def build_archive_processor(store: BatchStore) -> Processor:
    """Build a Processor that re-imports an archive of already split PDFs."""
    steps: list[PipelineStep] = [
        LoadArchiveStep(FileLoader((".zip",), kind="ZIP"), ArchiveLoader(), store),
        *_match_and_export_steps(store),
    ]
    return Processor(steps=steps, failed_step=LogFailureStep())
