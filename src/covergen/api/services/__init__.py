"""API services."""

from covergen.api.services.cover_letter_service import CoverLetterService

__all__ = ["CoverLetterService"]
