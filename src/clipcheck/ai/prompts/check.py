"""Prompt template for code checking."""

from __future__ import annotations

from enum import Enum

from clipcheck.constants import CONTEXT_BUDGET, LANGUAGE
from clipcheck.errors import ConfigurationError

# Backticks inside the code are not escaped.
CHECK_PROMPT = "Can you {mode} {language} code: `{code}`?"


def build_prompt(mode: Enum | str, code: str, language: str = LANGUAGE) -> str:
    """Build the instruction prompt for ``code``."""
    verb = mode.value if isinstance(mode, Enum) else mode
    return CHECK_PROMPT.format(mode=verb, language=language, code=code)


def max_response_tokens(prompt: str, budget: int = CONTEXT_BUDGET) -> int:
    """Tokens left for the response once ``prompt`` is counted against ``budget``.

    Raises:
        ConfigurationError: If nothing is left for the response.
    """
    remaining = budget - len(prompt)
    if remaining <= 0:
        raise ConfigurationError(
            f"Prompt is {len(prompt)} chars, leaving no room in a {budget} token budget"
        )
    return remaining
