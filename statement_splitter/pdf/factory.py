from statement_splitter.config.settings import Settings
from statement_splitter.pdf.base import BasePdfReader
from statement_splitter.pdf.pdfplumber_adapter import PdfPlumberAdapter
from statement_splitter.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfReaderFactory:
    """Creates the PDF reader adapter named by settings.pdf_engine."""

    ADAPTERS: dict[str, type[BasePdfReader]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfReader:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
