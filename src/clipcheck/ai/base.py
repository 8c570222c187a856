"""Abstract completion backend interface and response types."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProviderErrorPayload:
    """Error body returned by the completion endpoint."""

    type: str | None
    message: str


@dataclass(frozen=True)
class Choice:
    """One candidate completion."""

    text: str
    finish_reason: str | None = None


@dataclass
class CompletionResponse:
    """Result of a completion call: either an error payload or a list of choices."""

    error: ProviderErrorPayload | None = None
    choices: list[Choice] = field(default_factory=list)
    model: str = ""


class CompletionBackend(abc.ABC):
    """Abstract base class for text-completion backends."""

    @abc.abstractmethod
    def complete(self, model: str, prompt: str, max_tokens: int) -> CompletionResponse:
        """Send a single completion request.

        Args:
            model: Provider model identifier.
            prompt: Full prompt text.
            max_tokens: Upper bound on the generated tokens.

        Returns:
            CompletionResponse. Provider-side errors are returned as data,
            not raised.
        """
        ...
