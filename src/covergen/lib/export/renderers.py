"""Render a finished cover letter as TXT, PDF or DOCX bytes."""

from __future__ import annotations

import io
from dataclasses import dataclass

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from covergen.lib.errors import UnsupportedExportFormatError
from covergen.lib.models.models import ExportFormat

# PDF layout, in points on a US letter page
PAGE_WIDTH, PAGE_HEIGHT = letter
PDF_FONT = "Helvetica"
PDF_FONT_SIZE = 10
PDF_TEXT_WIDTH = 500
PDF_LINE_HEIGHT = 12
PDF_MARGIN_LEFT = 56
PDF_MARGIN_TOP = 50
PDF_MARGIN_BOTTOM = 50
PDF_MAX_LINES = int((PAGE_HEIGHT - PDF_MARGIN_TOP - PDF_MARGIN_BOTTOM) // PDF_LINE_HEIGHT)

DOCX_FONT = "Arial"
DOCX_FONT_SIZE = 11
DOCX_MARGIN = Inches(0.5)


@dataclass(frozen=True)
class RenderedFile:
    """Bytes ready to download."""

    content: bytes
    media_type: str
    filename: str


def render_txt(text: str) -> bytes:
    return text.encode("utf-8")


def wrap_pdf_lines(text: str) -> list[str]:
    """Wrap text to the PDF column width, keeping blank lines."""
    lines: list[str] = []
    for raw in text.split("\n"):
        if not raw.strip():
            lines.append("")
            continue
        lines.extend(simpleSplit(raw, PDF_FONT, PDF_FONT_SIZE, PDF_TEXT_WIDTH))
    return lines


def layout_pdf_lines(text: str) -> list[str]:
    """Lines that fit on the single PDF page.

    Anything past :data:`PDF_MAX_LINES` is dropped without warning; the export
    is one page only.
    """
    return wrap_pdf_lines(text)[:PDF_MAX_LINES]


def render_pdf(text: str) -> bytes:
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=letter)
    pdf.setTitle("Cover Letter")
    pdf.setFont(PDF_FONT, PDF_FONT_SIZE)

    # reportlab measures y from the bottom edge
    y = PDF_MARGIN_TOP
    for line in layout_pdf_lines(text):
        pdf.drawString(PDF_MARGIN_LEFT, PAGE_HEIGHT - y, line)
        y += PDF_LINE_HEIGHT

    pdf.showPage()
    pdf.save()
    return buf.getvalue()


def render_docx(text: str) -> bytes:
    """Letter-size Word document; blank lines split paragraphs, single newlines break lines."""
    doc = Document()

    section = doc.sections[0]
    section.orientation = WD_ORIENT.PORTRAIT
    section.page_width = Inches(8.5)
    section.page_height = Inches(11)
    section.top_margin = section.bottom_margin = DOCX_MARGIN
    section.left_margin = section.right_margin = DOCX_MARGIN

    normal = doc.styles["Normal"]
    normal.font.name = DOCX_FONT
    normal.font.size = Pt(DOCX_FONT_SIZE)
    normal.paragraph_format.line_spacing = 1.15
    normal.paragraph_format.space_before = Pt(0)
    normal.paragraph_format.space_after = Pt(10)

    for block in text.split("\n\n"):
        paragraph = doc.add_paragraph()
        paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        lines = block.split("\n")
        for i, line in enumerate(lines):
            run = paragraph.add_run(line)
            if i < len(lines) - 1:
                run.add_break()

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def render(text: str, fmt: str | ExportFormat) -> RenderedFile:
    """Render ``text`` in the requested download format."""
    try:
        export_format = ExportFormat(fmt.lower() if isinstance(fmt, str) else fmt)
    except ValueError:
        raise UnsupportedExportFormatError(str(fmt)) from None

    if export_format is ExportFormat.PDF:
        return RenderedFile(render_pdf(text), "application/pdf", "cover-letter.pdf")
    if export_format is ExportFormat.DOCX:
        return RenderedFile(
            render_docx(text),
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "cover-letter.docx",
        )
    return RenderedFile(render_txt(text), "text/plain; charset=utf-8", "cover-letter.txt")
