from statement_splitter.extraction.pattern_repository import PatternRepository
from statement_splitter.logging.logger import Log
from statement_splitter.matching.account_matcher import AccountMatcher
from statement_splitter.matching.archive_loader import ArchiveLoader
from statement_splitter.matching.contacts_loader import ContactsCsvLoader
from statement_splitter.matching.exceptions import ArchiveImportError
from statement_splitter.processor.exceptions import SplitFailedError
from statement_splitter.processor.file_loader import FileLoader
from statement_splitter.processor.pipeline import PipelineContext, PipelineStep
from statement_splitter.splitter.engine import SplittingEngine
from statement_splitter.splitter.models import SplitStatus
from statement_splitter.store.batch_store import BatchStore
from statement_splitter.store.exporter import BatchExporter


class LogFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(f"Run for {context.source_path.name} failed: {context.error_message}")
        return context


class LoadDocumentStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._file_loader.load(context.source_path)
        Log.info(f"Loaded {len(context.raw_bytes)} bytes from {context.source_path}")
        return context


class SplitDocumentStep(PipelineStep):
    def __init__(self, engine: SplittingEngine, pattern_repo: PatternRepository) -> None:
        self._engine = engine
        self._pattern_repo = pattern_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        patterns = self._pattern_repo.patterns
        result = self._engine.split(
            context.raw_bytes,
            patterns.account_rules,
            patterns.name_rules,
            period_label=context.period_label,
            on_progress=lambda pct: Log.debug(f"Split progress: {pct:.0f}%"),
            cancel_token=context.cancel_token,
        )
        context.split_result = result
        if result.status is SplitStatus.FAILED:
            raise SplitFailedError(result.errors[0])
        for error in result.errors:
            Log.warning(error)
        return context


class StoreBatchStep(PipelineStep):
    def __init__(self, store: BatchStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        result = context.split_result
        if result is None:
            raise ValueError("PipelineContext.split_result must be set before storing")
        if not result.is_completed:
            Log.warning(f"Split {result.status.value}; nothing stored")
            return context
        if not result.artifacts:
            Log.warning(f"No pages of {context.source_path.name} could be split")
            return context
        context.batch_id = self._store.create_batch(result.artifacts)
        return context


class LoadArchiveStep(PipelineStep):
    """Stores the PDFs of a previously split ZIP as a batch, skipping the split."""

    def __init__(
        self, file_loader: FileLoader, archive_loader: ArchiveLoader, store: BatchStore
    ) -> None:
        self._file_loader = file_loader
        self._archive_loader = archive_loader
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._file_loader.load(context.source_path)
        artifacts = self._archive_loader.load(context.raw_bytes)
        if not artifacts:
            raise ArchiveImportError(f"{context.source_path.name} contains no PDF files")
        context.batch_id = self._store.create_batch(artifacts)
        context.loaded_count = len(artifacts)
        return context


class LoadContactsStep(PipelineStep):
    def __init__(self, contacts_loader: ContactsCsvLoader) -> None:
        self._contacts_loader = contacts_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.contacts_path is None:
            return context
        loaded = self._contacts_loader.load(context.contacts_path)
        context.contacts = loaded.contacts
        context.contact_errors = loaded.errors
        for error in loaded.errors:
            Log.warning(f"{context.contacts_path.name}: {error}")
        return context


class MatchContactsStep(PipelineStep):
    def __init__(self, matcher: AccountMatcher, store: BatchStore) -> None:
        self._matcher = matcher
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.batch_id is None or not context.contacts:
            return context
        artifacts = self._store.get_artifacts(context.batch_id)
        context.match_result = self._matcher.match(artifacts, context.contacts)
        return context


class ExportBatchStep(PipelineStep):
    def __init__(self, exporter: BatchExporter) -> None:
        self._exporter = exporter

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.export_dir is None or context.batch_id is None:
            return context
        context.archive_path = self._exporter.export(
            context.batch_id, context.export_dir, context.period_label
        )
        return context


class ReportUsageStep(PipelineStep):
    def __init__(self, store: BatchStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        if self._store.show_usage:
            usage = self._store.get_usage()
            Log.info(
                f"Memory usage: {usage.file_count} files, {usage.human_readable_size}"
            )
        return context
