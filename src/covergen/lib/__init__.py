"""Covergen library module."""

from covergen.lib.documents.contact import extract_contact_info
from covergen.lib.documents.loader import load_document, load_document_path
from covergen.lib.export.renderers import RenderedFile, render
from covergen.lib.models.models import (
    ContactRecord,
    ExportFormat,
    ExtractionResult,
    GenerationRequest,
    GenerationResult,
    Provider,
    SessionState,
)
from covergen.lib.prompts import build_prompt, format_letter_date

__all__ = [
    # Documents
    "extract_contact_info",
    "load_document",
    "load_document_path",
    # Models
    "ContactRecord",
    "ExportFormat",
    "ExtractionResult",
    "GenerationRequest",
    "GenerationResult",
    "Provider",
    "SessionState",
    # Prompt
    "build_prompt",
    "format_letter_date",
    # Export
    "RenderedFile",
    "render",
]
