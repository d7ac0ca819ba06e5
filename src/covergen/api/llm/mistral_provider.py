"""Mistral LLM provider."""

from __future__ import annotations

from covergen.api.config import settings
from covergen.api.llm.openai_provider import OpenAIProvider
from covergen.lib.models.models import Provider


class MistralProvider(OpenAIProvider):
    """Mistral provider.

    Mistral speaks the OpenAI chat completions dialect, so only the endpoint
    and model differ.
    """

    name = Provider.MISTRAL
    url = "https://api.mistral.ai/v1/chat/completions"

    def __init__(self) -> None:
        super().__init__()
        self.model = settings.mistral_model
