import io
from collections.abc import Callable, Sequence

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PdfFactory = Callable[[Sequence[Sequence[str]]], bytes]


def build_pdf(pages: Sequence[Sequence[str]]) -> bytes:
    """Render one PDF page per entry, one text line per string."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_pdf() -> PdfFactory:
    return build_pdf


@pytest.fixture()
def statement_pdf_bytes() -> bytes:
    """Three statement pages: two identifiable customers and one blank page."""
    return build_pdf(
        [
            [
                "New Water Systems - Monthly Statement",
                "Customer Name: John Smith",
                "Account Nbr: FBNWSTX123456",
                "Amount Due: $42.10",
            ],
            [
                "New Water Systems - Monthly Statement",
                "Customer Name: Celia & Felipe Ramirez's",
                "Account Nbr: DNWSTX777",
                "Amount Due: $18.00",
            ],
            [],
        ]
    )


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A minimal single-page PDF with known text content."""
    return build_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return build_pdf([["Page one content"], ["Page two content"]])
