"""Map short model keys to provider model identifiers."""

from __future__ import annotations

from clipcheck.constants import DEFAULT_MODEL, MODELS


def select_model(key: str | None) -> str:
    """Return the model identifier for ``key``, or the default for unknown keys."""
    return MODELS.get(key or "", DEFAULT_MODEL)
