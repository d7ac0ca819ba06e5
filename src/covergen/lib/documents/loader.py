"""Resume text extraction helpers."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable

from docx import Document
from pypdf import PdfReader

from covergen.lib.documents.contact import extract_contact_info
from covergen.lib.errors import DocumentExtractionError, UnsupportedFileTypeError
from covergen.lib.models.models import ExtractionResult

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")


def decode_pdf(content: bytes) -> str:
    reader = PdfReader(io.BytesIO(content))
    text = ""
    for page in reader.pages:
        text += (page.extract_text() or "") + "\n"
    return text


def decode_docx(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    return "\n".join(par.text for par in doc.paragraphs)


def decode_txt(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


# extension -> (label used in error messages, decoder)
DECODERS: dict[str, tuple[str, Callable[[bytes], str]]] = {
    ".pdf": ("PDF", decode_pdf),
    ".docx": ("DOCX", decode_docx),
    ".txt": ("TXT", decode_txt),
}


def file_extension(filename: str) -> str:
    return Path(filename.lower()).suffix


def load_document(filename: str, content: bytes) -> ExtractionResult:
    """Decode an uploaded resume and pull contact fields out of it.

    Args:
        filename: Original file name; only its extension is used.
        content: Raw file bytes.

    Returns:
        ExtractionResult with the verbatim decoded text.

    Raises:
        UnsupportedFileTypeError: Extension is not .pdf, .docx or .txt.
        DocumentExtractionError: The format decoder failed.
    """
    suffix = file_extension(filename)
    if suffix not in DECODERS:
        raise UnsupportedFileTypeError(filename)

    label, decoder = DECODERS[suffix]
    try:
        text = decoder(content)
    except Exception as e:
        raise DocumentExtractionError(f"Failed to extract text from {label}: {e}") from e

    logger.info(f"Extracted {len(text)} characters from {label} resume")
    return ExtractionResult(text=text, contact=extract_contact_info(text))


def load_document_path(path: str | Path) -> ExtractionResult:
    """Read a resume from disk and run it through :func:`load_document`."""
    p = Path(path)
    if file_extension(p.name) not in DECODERS:
        raise UnsupportedFileTypeError(p.name)
    return load_document(p.name, p.read_bytes())
