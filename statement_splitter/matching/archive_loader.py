import io
import zipfile

from statement_splitter.extraction.naming import parse_file_name
from statement_splitter.logging.logger import Log
from statement_splitter.matching.exceptions import ArchiveImportError
from statement_splitter.splitter.models import Artifact


class ArchiveLoader:
    """Rebuilds artifacts from a ZIP of previously split statement PDFs.

    Account id and customer name come from the Account_Name[_Period].pdf
    naming convention; page_index is the entry's position among the PDFs.
    """

    def load(self, zip_bytes: bytes) -> list[Artifact]:
        try:
            archive = zipfile.ZipFile(io.BytesIO(zip_bytes))
        except zipfile.BadZipFile as exc:
            raise ArchiveImportError(f"Not a valid ZIP archive: {exc}") from exc

        artifacts: list[Artifact] = []
        with archive:
            for info in archive.infolist():
                if info.is_dir() or not info.filename.lower().endswith(".pdf"):
                    continue
                file_name = info.filename.rsplit("/", 1)[-1]
                account_id, customer_name = parse_file_name(file_name)
                artifacts.append(
                    Artifact(
                        account_id=account_id,
                        customer_name=customer_name,
                        file_name=file_name,
                        page_index=len(artifacts),
                        content=archive.read(info),
                    )
                )
        Log.info(f"Loaded {len(artifacts)} PDF files from archive")
        return artifacts
