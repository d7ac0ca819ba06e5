"""LLM provider factory."""

from __future__ import annotations

import logging

import httpx

from covergen.api.llm.anthropic_provider import AnthropicProvider
from covergen.api.llm.gemini_provider import GeminiProvider
from covergen.api.llm.mistral_provider import MistralProvider
from covergen.api.llm.openai_provider import OpenAIProvider
from covergen.api.llm.provider import LLMProvider
from covergen.lib.errors import UnsupportedProviderError
from covergen.lib.models.models import GenerationRequest, GenerationResult, Provider

logger = logging.getLogger(__name__)

PROVIDERS: dict[Provider, type[LLMProvider]] = {
    Provider.OPENAI: OpenAIProvider,
    Provider.ANTHROPIC: AnthropicProvider,
    Provider.GEMINI: GeminiProvider,
    Provider.MISTRAL: MistralProvider,
}


def get_llm_provider(provider_name: str | Provider) -> LLMProvider:
    """Get the provider implementation for ``provider_name``."""
    if isinstance(provider_name, Provider):
        provider = provider_name
    else:
        try:
            provider = Provider(provider_name.lower())
        except (AttributeError, ValueError):
            raise UnsupportedProviderError(str(provider_name)) from None
    return PROVIDERS[provider]()


def generate(request: GenerationRequest, client: httpx.Client | None = None) -> GenerationResult:
    """Run one generation request against the selected provider.

    The provider is resolved before any client is touched, so an unknown
    provider never reaches the network.
    """
    llm = get_llm_provider(request.provider)
    text = llm.generate(request.prompt, request.api_key, client=client)
    logger.info(f"{llm.name.value} returned {len(text)} characters")
    return GenerationResult(text=text, provider=llm.name)
