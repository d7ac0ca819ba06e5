"""Cover letter service: one panel session from upload to download."""

from __future__ import annotations

import logging
import math
import threading
from contextlib import contextmanager
from datetime import date, datetime, timezone
from typing import Any, Callable, Iterator

import httpx
from pydantic import ValidationError

from covergen.api.config import settings
from covergen.api.llm.factory import generate
from covergen.lib.documents.loader import load_document
from covergen.lib.errors import CoverLetterError, MissingInputError, OperationInProgressError
from covergen.lib.export.renderers import RenderedFile, render
from covergen.lib.models.models import ExtractionResult, GenerationRequest, SessionState
from covergen.lib.prompts import build_prompt
from covergen.lib.storage.base import StateStore

logger = logging.getLogger(__name__)

# Fields the panel can edit directly; each change is saved immediately.
EDITABLE_FIELDS = ("api_provider", "api_key", "job_description", "cover_letter")


def size_kb(num_bytes: int) -> int:
    """Upload size in whole kilobytes, halves rounded up."""
    return math.floor(num_bytes / 1024 + 0.5)


class CoverLetterService:
    """Service holding the panel's session and running its actions.

    The session is loaded from the store once, at construction. Every action
    builds a new :class:`SessionState`, saves it, and only then replaces the
    in-memory copy, so a failed action leaves both untouched.
    """

    def __init__(
        self,
        store: StateStore,
        *,
        state_key: str | None = None,
        client: httpx.Client | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self.state_key = state_key or settings.state_key
        self.client = client
        self.today = today
        self._state_lock = threading.Lock()
        self._action_locks = {
            "upload": threading.Lock(),
            "generate": threading.Lock(),
            "download": threading.Lock(),
        }
        self.state = self._load_state()

    def _load_state(self) -> SessionState:
        try:
            record = self.store.load(self.state_key)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable saved session: {e}")
            return SessionState()
        if record is None:
            return SessionState()
        try:
            state = SessionState.model_validate(record)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable saved session: {e.error_count()} validation errors")
            return SessionState()
        logger.info("Previous session data loaded")
        return state

    def _save(self, **changes: Any) -> SessionState:
        with self._state_lock:
            changes["timestamp"] = datetime.now(timezone.utc).isoformat()
            new_state = self.state.model_copy(update=changes)
            self.store.save(self.state_key, new_state.to_record())
            self.state = new_state
            return new_state

    @contextmanager
    def _single_flight(self, action: str) -> Iterator[None]:
        lock = self._action_locks[action]
        if not lock.acquire(blocking=False):
            logger.warning(f"Rejected {action}: already in progress")
            raise OperationInProgressError(action)
        try:
            yield
        except CoverLetterError as e:
            logger.warning(f"{action} failed: {e.message}")
            raise
        except Exception:
            logger.error(f"{action} failed unexpectedly", exc_info=True)
            raise
        finally:
            lock.release()

    def update_fields(self, **changes: Any) -> SessionState:
        """Apply panel edits (provider, key, job description, letter) and save."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Not editable: {', '.join(sorted(unknown))}")
        updates = {k: v for k, v in changes.items() if v is not None}
        if not updates:
            return self.state
        return self._save(**updates)

    def upload_resume(self, filename: str, content: bytes) -> ExtractionResult:
        """Decode a resume upload and make it the session's resume."""
        with self._single_flight("upload"):
            result = load_document(filename, content)
            self._save(resume_text=result.text, contact_info=result.contact)
            logger.info(f"Resume loaded: {filename} ({size_kb(len(content))}KB)")
            return result

    def _check_ready(self) -> tuple[str, str]:
        api_key = self.state.api_key.strip()
        job_description = self.state.job_description.strip()
        if not api_key:
            raise MissingInputError("Please enter your API key")
        if not self.state.resume_text:
            raise MissingInputError("Please upload your resume")
        if not job_description:
            raise MissingInputError("Please enter a job description")
        return api_key, job_description

    def generate_cover_letter(self) -> str:
        """Draft a cover letter with the selected provider and save it."""
        with self._single_flight("generate"):
            api_key, job_description = self._check_ready()
            prompt = build_prompt(
                self.state.resume_text,
                job_description,
                self.state.contact_info,
                self.today(),
            )
            request = GenerationRequest(
                provider=self.state.api_provider, api_key=api_key, prompt=prompt
            )
            result = generate(request, client=self.client)
            self._save(cover_letter=result.text)
            return result.text

    def export(self, fmt: str) -> RenderedFile:
        """Render the current cover letter for download."""
        with self._single_flight("download"):
            if not self.state.cover_letter:
                raise MissingInputError("Please generate a cover letter first")
            return render(self.state.cover_letter, fmt)

    def clear(self) -> SessionState:
        """Forget everything, including the saved record."""
        with self._state_lock:
            self.store.delete(self.state_key)
            self.state = SessionState()
        logger.info("All data cleared")
        return self.state
