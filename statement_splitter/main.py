import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from statement_splitter.config.settings import Settings
from statement_splitter.logging.logger import Log
from statement_splitter.matching.exceptions import MatchingError
from statement_splitter.processor.exceptions import ProcessorError
from statement_splitter.processor.pipeline import PipelineContext
from statement_splitter.processor.processor import build_archive_processor, build_processor
from statement_splitter.store.batch_store import BatchStore
from statement_splitter.store.exceptions import StoreError
from statement_splitter.store.settings_repository import build_settings_repository


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="statement-splitter",
        description="Split a bulk statement PDF into one file per customer page.",
    )
    inputs = parser.add_mutually_exclusive_group(required=True)
    inputs.add_argument("source", type=Path, nargs="?", help="bulk statement PDF")
    inputs.add_argument(
        "--archive",
        type=Path,
        help="ZIP of previously split statements to match instead of splitting",
    )
    parser.add_argument(
        "--period",
        default=settings.default_period_label,
        help='period label appended to file names, e.g. "May 2025"',
    )
    parser.add_argument("--contacts", type=Path, help="contact directory CSV to match against")
    parser.add_argument(
        "--export-dir",
        type=Path,
        default=settings.export_dir,
        help="write the batch as a ZIP archive into this directory",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> store -> processor -> one run."""
    settings = Settings()
    Log.configure(settings.log_level, settings.log_file)
    args = parse_args(argv, settings)

    with BatchStore(build_settings_repository(settings.cleanup_settings_path)) as store:
        if args.archive is not None:
            processor = build_archive_processor(store)
        else:
            processor = build_processor(settings, store)
        context = PipelineContext(
            source_path=args.archive or args.source,
            period_label=args.period,
            contacts_path=args.contacts,
            export_dir=args.export_dir,
        )
        try:
            context = processor.process(context)
        except (ProcessorError, MatchingError, StoreError, OSError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    split = context.split_result
    if split is not None:
        print(f"{len(split.artifacts)} of {split.page_count} pages split")
        for error in split.errors:
            print(f"  {error}")
    if context.loaded_count:
        print(f"{context.loaded_count} files loaded from {context.source_path.name}")
    if context.match_result is not None:
        stats = context.match_result.stats
        print(f"{stats.matched_count} of {stats.total} files matched to contacts")
        for item in context.match_result.unmatched:
            print(f"  unmatched: {item.artifact.file_name}")
    if context.archive_path is not None:
        print(f"archive written to {context.archive_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
