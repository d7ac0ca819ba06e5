"""Pydantic models for resumes, generation requests and the saved session."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============================================================================
# Enums
# ============================================================================


class Provider(str, Enum):
    """Supported LLM backends."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    MISTRAL = "mistral"


class ExportFormat(str, Enum):
    """Download formats for a finished cover letter."""

    PDF = "pdf"
    TXT = "txt"
    DOCX = "docx"


# ============================================================================
# Resume extraction
# ============================================================================


class ContactRecord(BaseModel):
    """Contact fields heuristically pulled from resume text."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    linkedin: str | None = None
    address: str | None = None

    @field_validator("name", "phone", "email", "linkedin", "address")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None


class ExtractionResult(BaseModel):
    """Decoded document text plus the contact record derived from it."""

    model_config = ConfigDict(frozen=True)

    text: str
    contact: ContactRecord = Field(default_factory=ContactRecord)


# ============================================================================
# Generation
# ============================================================================


class GenerationRequest(BaseModel):
    """One prompt to send to one provider.

    ``provider`` stays a plain string so unknown values reach the adapter and
    are rejected there, before any network traffic.
    """

    provider: str
    api_key: str = Field(repr=False)
    prompt: str


class GenerationResult(BaseModel):
    """Normalized provider reply."""

    text: str
    provider: Provider


# ============================================================================
# Saved session
# ============================================================================


class SessionState(BaseModel):
    """Everything the panel remembers between visits.

    Serialized with camelCase keys so the stored record keeps the shape
    ``{apiProvider, apiKey, jobDescription, resumeText, coverLetter,
    contactInfo, timestamp}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    api_provider: str = Field(Provider.OPENAI.value, alias="apiProvider")
    api_key: str = Field("", alias="apiKey", repr=False)
    job_description: str = Field("", alias="jobDescription")
    resume_text: str = Field("", alias="resumeText")
    cover_letter: str = Field("", alias="coverLetter")
    contact_info: ContactRecord = Field(default_factory=ContactRecord, alias="contactInfo")
    timestamp: str | None = None

    def to_record(self) -> dict:
        """Dump to the stored JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
