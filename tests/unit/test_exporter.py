import io
import zipfile
from pathlib import Path

import pytest

from statement_splitter.splitter.models import Artifact
from statement_splitter.store.batch_store import BatchStore
from statement_splitter.store.exceptions import ExportError
from statement_splitter.store.exporter import BatchExporter, archive_name, compact_period


def _artifact(file_name: str, account_id: str = "FBNWSTX123456") -> Artifact:
    return Artifact(
        account_id=account_id,
        customer_name="John Smith",
        file_name=file_name,
        page_index=0,
        content=f"%PDF {file_name}".encode(),
    )


class TestArchiveName:
    @pytest.mark.parametrize(
        ("period", "expected"),
        [
            ("July 2025", "July2025"),
            ("Jan_2024", "Jan2024"),
            ("01_2024", "Jan2024"),
            ("12 2023", "Dec2023"),
        ],
    )
    def test_compact_period(self, period: str, expected: str) -> None:
        assert compact_period(period) == expected

    def test_uses_account_prefix_and_period(self) -> None:
        assert archive_name("fbnwstx123456", "July 2025") == "FBNWSTX_July2025.zip"

    def test_default_name_without_period(self) -> None:
        assert archive_name("FBNWSTX123456", "") == "statements.zip"


class TestBatchExporter:
    def test_archive_contains_every_artifact(self) -> None:
        store = BatchStore()
        batch_id = store.create_batch([_artifact("A.pdf"), _artifact("B.pdf")])

        data = BatchExporter(store).build_archive(batch_id)

        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.namelist() == ["A.pdf", "B.pdf"]
            assert archive.read("B.pdf") == b"%PDF B.pdf"

    def test_export_writes_file_and_keeps_batch(self, tmp_path: Path) -> None:
        store = BatchStore()
        batch_id = store.create_batch([_artifact("A.pdf")])

        path = BatchExporter(store).export(batch_id, tmp_path / "out", "May 2025")

        assert path == tmp_path / "out" / "FBNWSTX_May2025.zip"
        assert zipfile.is_zipfile(path)
        assert store.has_batch(batch_id)

    def test_export_triggers_auto_clear(self, tmp_path: Path) -> None:
        store = BatchStore()
        store.update_settings(auto_clear_after_download=True)
        batch_id = store.create_batch([_artifact("A.pdf")])

        BatchExporter(store).export(batch_id, tmp_path)

        assert not store.has_batch(batch_id)

    def test_unknown_batch_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExportError, match="empty or unknown"):
            BatchExporter(BatchStore()).export("missing", tmp_path)
