"""Run configuration (mode, model, budget)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from clipcheck.constants import (
    CONTEXT_BUDGET,
    DEFAULT_MODE,
    DEFAULT_MODEL_KEY,
    FENCE_TAG,
    LANGUAGE,
)


class Mode(str, Enum):
    """Instruction verb embedded in the prompt."""

    COMMENT = "comment"
    CHECK = "check"
    FIX = "fix"
    EXPLAIN = "explain"
    REFACTOR = "refactor"


@dataclass(frozen=True)
class CheckConfig:
    """Parameters for a single clipcheck run."""

    mode: Mode = Mode(DEFAULT_MODE)
    model_key: str | None = DEFAULT_MODEL_KEY
    language: str = LANGUAGE  # name used in the prompt
    fence_tag: str = FENCE_TAG  # tag used on fenced blocks and for the lexer
    context_budget: int = CONTEXT_BUDGET
    timeout: float | None = None  # None = wait forever
