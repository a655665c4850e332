import io
import zipfile

import pytest

from statement_splitter.matching.archive_loader import ArchiveLoader
from statement_splitter.matching.exceptions import ArchiveImportError


def _zip(entries: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buf.getvalue()


class TestArchiveLoader:
    def test_rebuilds_artifacts_from_file_names(self) -> None:
        data = _zip(
            {
                "FBNWSTX1_John_Smith_May_2025.pdf": b"%PDF one",
                "readme.txt": b"ignored",
                "june/DNWSTX7_CeliaFelipeRamirezs.PDF": b"%PDF two",
            }
        )

        artifacts = ArchiveLoader().load(data)

        assert [(a.account_id, a.customer_name, a.page_index) for a in artifacts] == [
            ("FBNWSTX1", "John", 0),
            ("DNWSTX7", "CeliaFelipeRamirezs", 1),
        ]
        assert artifacts[1].file_name == "DNWSTX7_CeliaFelipeRamirezs.PDF"
        assert artifacts[1].content == b"%PDF two"

    def test_invalid_archive_raises(self) -> None:
        with pytest.raises(ArchiveImportError, match="Not a valid ZIP"):
            ArchiveLoader().load(b"not a zip")
