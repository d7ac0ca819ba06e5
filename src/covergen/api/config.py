"""API configuration."""

from __future__ import annotations

import os

from pydantic_settings import BaseSettings


def _optional_float(raw: str | None) -> float | None:
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


class Settings(BaseSettings):
    """Application settings."""

    # Storage
    db_path: str = os.getenv("COVERGEN_DB_PATH", "data/covergen.duckdb")
    state_key: str = os.getenv("COVERGEN_STATE_KEY", "coverLetterGeneratorData")

    # Logging
    log_level: str = os.getenv("COVERGEN_LOG_LEVEL", "INFO")

    # Server
    cors_origins: list[str] = os.getenv("COVERGEN_CORS_ORIGINS", "http://localhost:3000").split(",")

    # LLM requests. No timeout unless one is configured.
    request_timeout: float | None = _optional_float(os.getenv("COVERGEN_REQUEST_TIMEOUT"))
    max_tokens: int = int(os.getenv("COVERGEN_MAX_TOKENS", "1000"))
    temperature: float = float(os.getenv("COVERGEN_TEMPERATURE", "0.7"))

    # Models
    openai_model: str = os.getenv("COVERGEN_OPENAI_MODEL", "gpt-3.5-turbo")
    anthropic_model: str = os.getenv("COVERGEN_ANTHROPIC_MODEL", "claude-3-sonnet-20240229")
    anthropic_version: str = os.getenv("COVERGEN_ANTHROPIC_VERSION", "2023-06-01")
    gemini_model: str = os.getenv("COVERGEN_GEMINI_MODEL", "gemini-1.5-flash")
    mistral_model: str = os.getenv("COVERGEN_MISTRAL_MODEL", "mistral-tiny")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
