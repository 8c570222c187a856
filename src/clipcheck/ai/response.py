"""Classify completion responses and pull code blocks out of them."""

from __future__ import annotations

import re

from clipcheck.ai.base import Choice, CompletionResponse
from clipcheck.constants import FENCE_TAG


def is_error(response: CompletionResponse) -> bool:
    """True iff the response carries a provider error payload."""
    return response.error is not None


def is_valid(choice: Choice) -> bool:
    """True iff generation ended cleanly."""
    return choice.finish_reason == "stop"


def _fence_pattern(tag: str) -> re.Pattern[str]:
    # Greedy: spans from the first opening fence to the last closing fence.
    return re.compile(r"```" + re.escape(tag) + r"\n(.*)```", re.DOTALL)


def extract_code(text: str, tag: str = FENCE_TAG) -> str | None:
    """Return the contents of the ``tag`` fenced block in ``text``, if any.

    With several fenced blocks, everything between the first opening
    fence and the last closing fence is returned.
    """
    match = _fence_pattern(tag).search(text)
    return match.group(1) if match else None
