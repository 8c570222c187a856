"""Run orchestration and terminal formatting of the model's answer."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from rich.color import ColorSystem
from rich.style import Style

from clipcheck.ai.models import select_model
from clipcheck.ai.prompts.check import build_prompt, max_response_tokens
from clipcheck.ai.response import extract_code, is_error, is_valid
from clipcheck.config import CheckConfig
from clipcheck.constants import DELIMITER_CHAR, DELIMITER_WIDTH, NO_RESPONSE
from clipcheck.errors import ProviderError
from clipcheck.output.highlight import highlight

if TYPE_CHECKING:
    from clipcheck.ai.base import Choice, CompletionBackend, ProviderErrorPayload
    from clipcheck.input.clipboard import Clipboard

logger = logging.getLogger(__name__)


def paint(text: str, color: str) -> str:
    """Wrap ``text`` in a standard ANSI colour."""
    return Style(color=color).render(text, color_system=ColorSystem.STANDARD)


def delimiter() -> str:
    return "\n" + paint(DELIMITER_CHAR * DELIMITER_WIDTH, "red") + "\n"


def code_preview(text: str) -> str:
    """Echo of the clipboard contents between delimiters."""
    return delimiter() + paint(text, "yellow") + delimiter()


def valid_tick() -> str:
    return "Valid Response: " + paint("✔", "green")


def error_block(error: ProviderErrorPayload) -> str:
    return (
        paint(" ERROR! ", "red") + "\n"
        + paint(f"   type: {error.type} ", "red") + "\n"
        + paint(f"   message: {error.message} ", "red") + "\n"
    )


def no_response() -> str:
    return paint(NO_RESPONSE, "red")


def format_choice(choice: Choice, fence_tag: str) -> str:
    """Render one choice: validity tick, then highlighted code or plain text."""
    out = ""
    if is_valid(choice):
        out += valid_tick()

    code = extract_code(choice.text, fence_tag)
    if code is not None:
        out += f"{delimiter()} {highlight(code, fence_tag)} {delimiter()}"
    else:
        out += paint(choice.text, "blue")
    return out


class Presenter:
    """Drives one run: clipboard, prompt, completion, formatted output.

    The clipboard echo is written to the stream before the network call,
    so any later failure still follows a visible copy of the input.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        backend: CompletionBackend,
        stream: TextIO | None = None,
    ) -> None:
        self._clipboard = clipboard
        self._backend = backend
        self._stream = stream

    def _write(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(text)
        stream.flush()

    def run(self, config: CheckConfig | None = None) -> str:
        """Perform the run and return everything written.

        Raises:
            ConfigurationError: If the prompt leaves no token budget.
            ProviderError: After printing the error block, if the endpoint
                answered with an error payload.
            TransportError: If the endpoint could not be reached.
        """
        config = config or CheckConfig()

        text = self._clipboard.read()
        out = code_preview(text)
        self._write(out)

        prompt = build_prompt(config.mode, text, config.language)
        max_tokens = max_response_tokens(prompt, config.context_budget)
        model = select_model(config.model_key)

        response = self._backend.complete(model=model, prompt=prompt, max_tokens=max_tokens)
        logger.debug(
            "Completion from %s: %d choice(s), error=%s",
            response.model or model,
            len(response.choices),
            response.error is not None,
        )

        if is_error(response):
            assert response.error is not None
            block = error_block(response.error)
            self._write(block)
            raise ProviderError(response.error.type, response.error.message)

        if response.choices:
            rest = format_choice(response.choices[0], config.fence_tag)
        else:
            logger.warning("Completion returned no choices")
            rest = no_response()

        self._write(rest + "\n")
        return out + rest
