"""Tests for the OpenAI completion backend."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from clipcheck.ai.openai_completion import OpenAICompletionBackend
from clipcheck.errors import ConfigurationError, TransportError

URL = "https://api.openai.com/v1/completions"


def _status_error(body: dict) -> openai.APIStatusError:
    request = httpx.Request("POST", URL)
    return openai.BadRequestError(
        "Error code: 400",
        response=httpx.Response(400, request=request),
        body=body,
    )


class TestOpenAICompletionBackend:
    def test_missing_key_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            OpenAICompletionBackend(api_key="")

    def test_lazy_client(self) -> None:
        backend = OpenAICompletionBackend(api_key="sk-test")
        assert not backend.is_loaded

    @patch("clipcheck.ai.openai_completion.openai.OpenAI")
    def test_client_has_no_retries(self, mock_openai: MagicMock) -> None:
        OpenAICompletionBackend(api_key="sk-test", timeout=30.0).load()
        mock_openai.assert_called_once_with(api_key="sk-test", max_retries=0, timeout=30.0)

    @patch("clipcheck.ai.openai_completion.openai.OpenAI")
    def test_complete_maps_choices(self, mock_openai: MagicMock) -> None:
        client = mock_openai.return_value
        client.completions.create.return_value = MagicMock(
            model="text-davinci-003",
            choices=[MagicMock(text="Here you go", finish_reason="stop")],
        )

        backend = OpenAICompletionBackend(api_key="sk-test")
        response = backend.complete("text-davinci-003", "prompt", 100)

        client.completions.create.assert_called_once_with(
            model="text-davinci-003", prompt="prompt", max_tokens=100
        )
        assert response.error is None
        assert len(response.choices) == 1
        assert response.choices[0].text == "Here you go"
        assert response.choices[0].finish_reason == "stop"
        assert response.model == "text-davinci-003"

    @patch("clipcheck.ai.openai_completion.openai.OpenAI")
    def test_empty_choices(self, mock_openai: MagicMock) -> None:
        mock_openai.return_value.completions.create.return_value = MagicMock(
            model="m", choices=[]
        )
        response = OpenAICompletionBackend(api_key="sk-test").complete("m", "p", 1)
        assert response.choices == []
        assert response.error is None

    @patch("clipcheck.ai.openai_completion.openai.OpenAI")
    def test_status_error_returned_as_payload(self, mock_openai: MagicMock) -> None:
        mock_openai.return_value.completions.create.side_effect = _status_error(
            {"type": "invalid_request_error", "message": "boom"}
        )

        response = OpenAICompletionBackend(api_key="sk-test").complete("m", "p", 1)

        assert response.error is not None
        assert response.error.type == "invalid_request_error"
        assert response.error.message == "boom"
        assert response.choices == []

    @patch("clipcheck.ai.openai_completion.openai.OpenAI")
    def test_connection_error_raises_transport_error(self, mock_openai: MagicMock) -> None:
        mock_openai.return_value.completions.create.side_effect = openai.APIConnectionError(
            request=httpx.Request("POST", URL)
        )

        with pytest.raises(TransportError):
            OpenAICompletionBackend(api_key="sk-test").complete("m", "p", 1)
