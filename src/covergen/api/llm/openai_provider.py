"""OpenAI LLM provider."""

from __future__ import annotations

from typing import Any

from covergen.api.config import settings
from covergen.api.llm.provider import LLMProvider
from covergen.lib.models.models import Provider


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider."""

    name = Provider.OPENAI
    url = "https://api.openai.com/v1/chat/completions"

    def __init__(self) -> None:
        self.model = settings.openai_model
        self.max_tokens = settings.max_tokens
        self.temperature = settings.temperature

    def build_url(self, api_key: str) -> str:
        return self.url

    def build_headers(self, api_key: str) -> dict[str, str]:
        headers = super().build_headers(api_key)
        headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def build_body(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def extract_text(self, data: dict[str, Any]) -> str:
        return data["choices"][0]["message"]["content"]
