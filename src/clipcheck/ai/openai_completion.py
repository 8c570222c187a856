"""OpenAI text-completion backend."""

from __future__ import annotations

import logging

import openai

from clipcheck.ai.base import (
    Choice,
    CompletionBackend,
    CompletionResponse,
    ProviderErrorPayload,
)
from clipcheck.constants import API_KEY_ENV
from clipcheck.errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)


class OpenAICompletionBackend(CompletionBackend):
    """Completion backend using the OpenAI completions API.

    Makes exactly one request per call: retries are disabled and no timeout
    is applied unless one is given.
    """

    def __init__(self, api_key: str, timeout: float | None = None) -> None:
        if not api_key:
            raise ConfigurationError(f"No OpenAI API key provided (set {API_KEY_ENV})")
        self._api_key = api_key
        self._timeout = timeout
        self._client: openai.OpenAI | None = None

    def load(self) -> None:
        """Initialize the OpenAI client."""
        self._client = openai.OpenAI(
            api_key=self._api_key,
            max_retries=0,
            timeout=self._timeout,
        )
        logger.debug("OpenAI completion client initialized (timeout=%s)", self._timeout)

    def complete(self, model: str, prompt: str, max_tokens: int) -> CompletionResponse:
        if self._client is None:
            self.load()

        logger.info("Requesting completion (model=%s, max_tokens=%d)", model, max_tokens)
        try:
            response = self._client.completions.create(  # type: ignore[union-attr]
                model=model,
                prompt=prompt,
                max_tokens=max_tokens,
            )
        except openai.APIStatusError as e:
            logger.debug("Provider error response: %s", e.body)
            return CompletionResponse(error=_error_payload(e), model=model)
        except openai.APIConnectionError as e:
            raise TransportError(f"Could not reach the completion endpoint: {e}") from e

        logger.debug("Raw response: %r", response)
        choices = [
            Choice(text=c.text, finish_reason=c.finish_reason)
            for c in (response.choices or [])
        ]
        return CompletionResponse(choices=choices, model=response.model or model)

    @property
    def is_loaded(self) -> bool:
        return self._client is not None


def _error_payload(error: openai.APIStatusError) -> ProviderErrorPayload:
    """Pull ``type`` and ``message`` out of the provider's error body."""
    body = error.body if isinstance(error.body, dict) else {}
    return ProviderErrorPayload(
        type=body.get("type") or error.type,
        message=body.get("message") or error.message,
    )
