"""Cover letter generator.

Turns a resume upload and a job description into a drafted cover letter via
one of several LLM providers, and exports it as PDF, TXT or DOCX.

Example:
    >>> from covergen import load_document, build_prompt, generate, GenerationRequest
    >>> resume = load_document("resume.txt", b"Jane Doe\\njane.doe@example.com\\n")
    >>> resume.contact.email
    'jane.doe@example.com'
"""

from covergen.api.llm.factory import generate, get_llm_provider
from covergen.lib.documents.contact import extract_contact_info
from covergen.lib.documents.loader import load_document, load_document_path
from covergen.lib.errors import CoverLetterError
from covergen.lib.export.renderers import render
from covergen.lib.models.models import (
    ContactRecord,
    ExtractionResult,
    GenerationRequest,
    GenerationResult,
    Provider,
    SessionState,
)
from covergen.lib.prompts import build_prompt

__version__ = "0.1.0"
__all__ = [
    "ContactRecord",
    "CoverLetterError",
    "ExtractionResult",
    "GenerationRequest",
    "GenerationResult",
    "Provider",
    "SessionState",
    "build_prompt",
    "extract_contact_info",
    "generate",
    "get_llm_provider",
    "load_document",
    "load_document_path",
    "render",
]
