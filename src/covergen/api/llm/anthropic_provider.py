"""Anthropic Claude LLM provider."""

from __future__ import annotations

from typing import Any

from covergen.api.config import settings
from covergen.api.llm.provider import LLMProvider
from covergen.lib.models.models import Provider


class AnthropicProvider(LLMProvider):
    """Anthropic Claude messages provider."""

    name = Provider.ANTHROPIC
    url = "https://api.anthropic.com/v1/messages"

    def __init__(self) -> None:
        self.model = settings.anthropic_model
        self.version = settings.anthropic_version
        self.max_tokens = settings.max_tokens

    def build_url(self, api_key: str) -> str:
        return self.url

    def build_headers(self, api_key: str) -> dict[str, str]:
        headers = super().build_headers(api_key)
        headers["x-api-key"] = api_key
        headers["anthropic-version"] = self.version
        return headers

    def build_body(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["content"][0]["text"]
