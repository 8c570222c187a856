"""Clipboard reads for X11 (xclip/xsel), Wayland (wl-clipboard) and macOS (pbpaste)."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from clipcheck.constants import CLIPBOARD_TIMEOUT

if TYPE_CHECKING:
    from clipcheck.platform.detect import PlatformInfo

logger = logging.getLogger(__name__)

_READ_COMMANDS = {
    "wl-clipboard": ["wl-paste", "--no-newline"],
    "xclip": ["xclip", "-selection", "clipboard", "-o"],
    "xsel": ["xsel", "--clipboard", "--output"],
    "pbpaste": ["pbpaste"],
}


class Clipboard:
    """Read-only clipboard access using system tools."""

    def __init__(self, platform: PlatformInfo) -> None:
        self._tool = platform.best_clipboard_tool

        if self._tool is None:
            logger.warning("No clipboard tool detected! Clipboard reads will be empty.")

    @property
    def tool(self) -> str | None:
        return self._tool

    def read(self) -> str:
        """Read current clipboard contents.

        An empty or unreadable clipboard yields "" so the rest of the run
        can still proceed.
        """
        cmd = _READ_COMMANDS.get(self._tool or "")
        if cmd is None:
            logger.error("No clipboard tool available")
            return ""

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=CLIPBOARD_TIMEOUT,
            )
        except subprocess.TimeoutExpired:
            logger.error("Clipboard read timed out")
            return ""
        except OSError:
            logger.exception("Clipboard read failed")
            return ""

        if result.returncode != 0:
            # Empty clipboard is not an error
            if "nothing is copied" in result.stderr.lower() or result.returncode == 1:
                return ""
            logger.error("Clipboard read failed: %s", result.stderr)
            return ""

        logger.debug("Read %d chars from clipboard via %s", len(result.stdout), self._tool)
        return result.stdout
