"""Shared test fixtures."""

from __future__ import annotations

import io
import re
from unittest.mock import MagicMock

import pytest

from clipcheck.ai.base import Choice, CompletionResponse, ProviderErrorPayload
from clipcheck.config import CheckConfig

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI colour escapes."""
    return ANSI_RE.sub("", text)


@pytest.fixture
def config() -> CheckConfig:
    """Default config for testing."""
    return CheckConfig()


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def clipboard() -> MagicMock:
    mock = MagicMock()
    mock.read.return_value = "def f; end"
    return mock


def make_response(text: str = "", finish_reason: str | None = "stop") -> CompletionResponse:
    return CompletionResponse(choices=[Choice(text=text, finish_reason=finish_reason)])


def make_error_response(type: str = "invalid_request_error", message: str = "boom") -> CompletionResponse:
    return CompletionResponse(error=ProviderErrorPayload(type=type, message=message))
