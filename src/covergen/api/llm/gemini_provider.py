"""Google Gemini LLM provider."""

from __future__ import annotations

from typing import Any

import httpx

from covergen.api.config import settings
from covergen.api.llm.provider import LLMProvider
from covergen.lib.models.models import Provider

BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"


class GeminiProvider(LLMProvider):
    """Gemini generateContent provider. The key travels as a query parameter."""

    name = Provider.GEMINI

    def __init__(self) -> None:
        self.model = settings.gemini_model

    def build_url(self, api_key: str) -> str:
        url = httpx.URL(f"{BASE_URL}/{self.model}:generateContent", params={"key": api_key})
        return str(url)

    def build_body(self, prompt: str) -> dict[str, Any]:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["candidates"][0]["content"]["parts"][0]["text"]
