"""Syntax highlighting for 256-colour terminals."""

from __future__ import annotations

from pygments import highlight as _pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_by_name

from clipcheck.constants import FENCE_TAG


def highlight(code: str, language: str = FENCE_TAG) -> str:
    """Return ``code`` wrapped in ANSI escapes for its language, text unchanged."""
    lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
    return _pygments_highlight(code, lexer, Terminal256Formatter())
