"""Splits a bulk statement PDF into one artifact per customer page.

Processing flow:
1. Open the source document; a decode failure ends the run with one error.
2. For every page in order: read text, resolve account id and name through
   the pattern cascade, derive the file name, copy the page.
3. Page-level failures are recorded as "Page N: ..." strings and the loop
   moves on, so one bad page never discards the rest of the batch.
4. A cancellation token is checked before each page.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace

from statement_splitter.extraction.matcher import PatternCascadeMatcher
from statement_splitter.extraction.naming import (
    build_file_name,
    disambiguate_file_name,
    normalize_customer_name,
)
from statement_splitter.extraction.patterns import PatternRule
from statement_splitter.logging.logger import Log
from statement_splitter.pdf.base import BasePdfDocument, BasePdfReader
from statement_splitter.splitter.cancellation import CancellationToken
from statement_splitter.splitter.exceptions import PageExtractionError
from statement_splitter.splitter.models import Artifact, SplitResult, SplitStatus

ProgressCallback = Callable[[float], None]


class SplittingEngine:
    """Drives one sequential pass over all pages of a source PDF."""

    def __init__(self, pdf_reader: BasePdfReader, dedupe_file_names: bool = True) -> None:
        self._pdf_reader = pdf_reader
        self._dedupe_file_names = dedupe_file_names

    def split(
        self,
        source: bytes,
        account_rules: Sequence[PatternRule],
        name_rules: Sequence[PatternRule],
        period_label: str = "",
        on_progress: ProgressCallback | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> SplitResult:
        """Split *source* into single-page artifacts.

        Args:
            source: Raw bytes of the bulk PDF.
            account_rules: Ordered account id rules, most specific first.
            name_rules: Ordered customer name rules, most specific first.
            period_label: Optional period appended to file names ("May 2025").
            on_progress: Called with 0-100; 100 only once the loop finished.
            cancel_token: Checked before each page.

        Returns:
            SplitResult. For a completed run,
            len(artifacts) + len(errors) == page_count.
        """
        report = on_progress or (lambda _pct: None)
        try:
            document = self._pdf_reader.open(source)
        except Exception as exc:
            Log.error(f"Could not open source document: {exc}")
            return SplitResult(errors=[f"Processing failed: {exc}"], status=SplitStatus.FAILED)

        matcher = PatternCascadeMatcher(account_rules, name_rules)
        with document:
            result = self._run(document, matcher, period_label, report, cancel_token)

        Log.info(
            f"Split {result.page_count} pages: {len(result.artifacts)} artifacts, "
            f"{len(result.errors)} errors ({result.status.value})"
        )
        return result

    def _run(
        self,
        document: BasePdfDocument,
        matcher: PatternCascadeMatcher,
        period_label: str,
        report: ProgressCallback,
        cancel_token: CancellationToken | None,
    ) -> SplitResult:
        page_count = document.page_count
        result = SplitResult(page_count=page_count)
        seen_names: set[str] = set()

        for index in range(page_count):
            if cancel_token is not None and cancel_token.is_cancelled:
                Log.warning(f"Split cancelled before page {index + 1} of {page_count}")
                result.status = SplitStatus.CANCELLED
                return result

            report(index * 100 / page_count)
            try:
                artifact = self._split_page(document, index, matcher, period_label)
            except Exception as exc:
                Log.warning(f"Page {index + 1}: {exc}")
                result.errors.append(f"Page {index + 1}: {exc}")
                continue

            if self._dedupe_file_names and artifact.file_name in seen_names:
                artifact = replace(
                    artifact, file_name=disambiguate_file_name(artifact.file_name, index)
                )
            seen_names.add(artifact.file_name)
            result.artifacts.append(artifact)

        report(100)
        return result

    def _split_page(
        self,
        document: BasePdfDocument,
        index: int,
        matcher: PatternCascadeMatcher,
        period_label: str,
    ) -> Artifact:
        text = document.page_text(index)
        identity = matcher.match(text)
        if not identity.is_complete:
            Log.debug(f"Page {index + 1} text sample: {text[:200]}")
            raise PageExtractionError(
                f"Could not extract {' and '.join(identity.missing_fields)} "
                "- check patterns or text format"
            )

        file_name = build_file_name(
            identity.account_id,
            normalize_customer_name(identity.customer_name),
            period_label,
        )
        return Artifact(
            account_id=identity.account_id,
            customer_name=identity.customer_name,
            file_name=file_name,
            page_index=index,
            content=document.extract_page(index),
        )
