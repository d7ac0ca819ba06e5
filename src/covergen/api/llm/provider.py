"""Abstract LLM provider interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from covergen.api.config import settings
from covergen.lib.errors import ProviderRequestError, ProviderResponseError
from covergen.lib.models.models import Provider

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "API request failed"


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses describe one wire protocol: where to POST, which headers carry
    the key, what the body looks like and where the answer sits in the reply.
    The request/response cycle itself lives here so every provider fails the
    same way.
    """

    name: Provider

    @abstractmethod
    def build_url(self, api_key: str) -> str:
        """Endpoint for a generation request."""
        pass

    def build_headers(self, api_key: str) -> dict[str, str]:
        """Request headers. Providers that authenticate by header extend this."""
        return {"Content-Type": "application/json"}

    @abstractmethod
    def build_body(self, prompt: str) -> dict[str, Any]:
        """JSON body for a single user prompt."""
        pass

    @abstractmethod
    def extract_text(self, data: dict[str, Any]) -> str:
        """Pull the generated text out of a successful response body.

        May raise KeyError/IndexError/TypeError on an unexpected shape.
        """
        pass

    def extract_error(self, data: Any) -> str | None:
        """Human-readable message from an error envelope, if any."""
        if not isinstance(data, dict):
            return None
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if data.get("message"):
            return str(data["message"])
        return None

    def generate(self, prompt: str, api_key: str, client: httpx.Client | None = None) -> str:
        """Send ``prompt`` and return the trimmed completion text.

        Args:
            prompt: Fully built prompt.
            api_key: Caller's key for this provider. Never logged.
            client: Optional shared client; one is created when omitted.

        Raises:
            ProviderRequestError: Network failure or non-success status.
            ProviderResponseError: Success status without text where expected.
        """
        url = self.build_url(api_key)
        headers = self.build_headers(api_key)
        body = self.build_body(prompt)

        # Gemini carries the key in the query string
        logger.info(f"POST {httpx.URL(url).copy_with(query=None)} ({self.name.value})")

        if client is None:
            with httpx.Client(timeout=settings.request_timeout) as own_client:
                response = self._post(own_client, url, headers, body)
        else:
            response = self._post(client, url, headers, body)

        if response.is_error:
            raise ProviderRequestError(
                self._error_message(response),
                status_code=response.status_code,
                provider=self.name.value,
            )

        try:
            data = response.json()
            return self.extract_text(data).strip()
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise ProviderResponseError(
                f"Unexpected response from {self.name.value}: {e!r}", provider=self.name.value
            ) from e

    def _post(
        self, client: httpx.Client, url: str, headers: dict[str, str], body: dict[str, Any]
    ) -> httpx.Response:
        try:
            return client.post(url, headers=headers, json=body)
        except httpx.HTTPError as e:
            raise ProviderRequestError(
                f"Request to {self.name.value} failed: {e}", provider=self.name.value
            ) from e

    def _error_message(self, response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return GENERIC_ERROR_MESSAGE
        return self.extract_error(data) or GENERIC_ERROR_MESSAGE
