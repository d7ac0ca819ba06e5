"""LLM provider abstractions."""

from covergen.api.llm.provider import LLMProvider
from covergen.api.llm.openai_provider import OpenAIProvider
from covergen.api.llm.anthropic_provider import AnthropicProvider
from covergen.api.llm.gemini_provider import GeminiProvider
from covergen.api.llm.mistral_provider import MistralProvider
from covergen.api.llm.factory import PROVIDERS, generate, get_llm_provider

__all__ = [
    "LLMProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "GeminiProvider",
    "MistralProvider",
    "PROVIDERS",
    "generate",
    "get_llm_provider",
]
