"""Exception hierarchy for the cover letter pipeline.

Every failure that should reach the user as a status message derives from
:class:`CoverLetterError`. Its ``message`` is what the panel shows.
"""

from __future__ import annotations


class CoverLetterError(Exception):
    """Base class for user-visible pipeline failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnsupportedFileTypeError(CoverLetterError):
    """Uploaded file has an extension we cannot decode."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("Unsupported file type")


class DocumentExtractionError(CoverLetterError):
    """The format-specific decoder failed."""


class MissingInputError(CoverLetterError):
    """A precondition (API key, resume, job description, letter) is missing."""


class UnsupportedProviderError(CoverLetterError):
    """Provider name does not map to a known LLM backend."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__("Unsupported API provider")


class ProviderRequestError(CoverLetterError):
    """Provider returned a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None, provider: str | None = None) -> None:
        self.status_code = status_code
        self.provider = provider
        super().__init__(message)


class ProviderResponseError(CoverLetterError):
    """Provider returned success but the body had no text where expected."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        self.provider = provider
        super().__init__(message)


class UnsupportedExportFormatError(CoverLetterError):
    """Download format is not pdf, txt or docx."""

    def __init__(self, fmt: str) -> None:
        self.format = fmt
        super().__init__("Unsupported format")


class OperationInProgressError(CoverLetterError):
    """The same action is already running for this session."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"A {action} operation is already in progress")
