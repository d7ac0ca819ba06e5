"""FastAPI server backing the cover letter panel."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, File, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from covergen.api.config import settings
from covergen.api.services.cover_letter_service import CoverLetterService, size_kb
from covergen.lib.errors import (
    CoverLetterError,
    OperationInProgressError,
    ProviderRequestError,
    ProviderResponseError,
)
from covergen.lib.storage.duckdb_store import DuckDBStateStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Global service instance
_service: CoverLetterService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI."""
    global _service
    if settings.db_path != ":memory:":
        Path(settings.db_path).parent.mkdir(parents=True, exist_ok=True)
    store = DuckDBStateStore(settings.db_path)
    _service = CoverLetterService(store)
    yield
    _service = None
    store.close()


app = FastAPI(title="Cover Letter Generator API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_service() -> CoverLetterService:
    """Get service instance."""
    if _service is None:
        raise RuntimeError("Service not initialized")
    return _service


def _status_code_for(exc: CoverLetterError) -> int:
    if isinstance(exc, OperationInProgressError):
        return 409
    if isinstance(exc, (ProviderRequestError, ProviderResponseError)):
        return 502
    return 400


@app.exception_handler(CoverLetterError)
async def cover_letter_error_handler(request: Request, exc: CoverLetterError) -> JSONResponse:
    return JSONResponse(
        status_code=_status_code_for(exc),
        content={"status": "error", "message": exc.message},
    )


class SessionUpdate(BaseModel):
    """Panel fields that auto-save on change."""

    model_config = ConfigDict(populate_by_name=True)

    api_provider: str | None = Field(None, alias="apiProvider")
    api_key: str | None = Field(None, alias="apiKey")
    job_description: str | None = Field(None, alias="jobDescription")
    cover_letter: str | None = Field(None, alias="coverLetter")


# Session endpoints
@app.get("/api/session")
def get_session():
    """Get the saved session."""
    return get_service().state.to_record()


@app.patch("/api/session")
def update_session(update: SessionUpdate):
    """Save edited panel fields."""
    state = get_service().update_fields(**update.model_dump(exclude_none=True))
    return state.to_record()


@app.delete("/api/session")
def clear_session():
    """Clear all saved data."""
    get_service().clear()
    return {"status": "ok", "message": "All data cleared"}


# Resume endpoints
@app.post("/api/resume")
def upload_resume(file: UploadFile = File(...)):
    """Upload a resume (.pdf, .docx or .txt) and extract its text and contact info."""
    content = file.file.read()
    filename = file.filename or ""
    result = get_service().upload_resume(filename, content)
    return {
        "status": "ok",
        "message": "Resume loaded successfully!",
        "fileName": filename,
        "sizeKb": size_kb(len(content)),
        "contactInfo": result.contact.model_dump(),
    }


# Cover letter endpoints
@app.post("/api/cover-letter")
def generate_cover_letter():
    """Generate a cover letter with the selected provider."""
    text = get_service().generate_cover_letter()
    return {
        "status": "ok",
        "message": "Cover letter generated successfully!",
        "coverLetter": text,
    }


@app.get("/api/cover-letter/download")
def download_cover_letter(
    format: str = Query("pdf", description="Download format: pdf, txt, docx"),
):
    """Download the current cover letter."""
    rendered = get_service().export(format)
    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={"Content-Disposition": f'attachment; filename="{rendered.filename}"'},
    )


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
