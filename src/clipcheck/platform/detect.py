"""Detect display server and available clipboard tools."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class DisplayServer(Enum):
    """Display server type."""

    X11 = "x11"
    WAYLAND = "wayland"
    MACOS = "macos"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PlatformInfo:
    """Detected platform capabilities."""

    display_server: DisplayServer

    # Available clipboard tools
    has_xclip: bool
    has_xsel: bool
    has_wl_clipboard: bool
    has_pbpaste: bool = False

    @property
    def best_clipboard_tool(self) -> str | None:
        """Return the best available clipboard tool for this platform."""
        if self.display_server == DisplayServer.MACOS:
            return "pbpaste" if self.has_pbpaste else None
        if self.display_server == DisplayServer.WAYLAND:
            if self.has_wl_clipboard:
                return "wl-clipboard"
            # Fallback to xclip under XWayland
            if self.has_xclip:
                return "xclip"
            if self.has_xsel:
                return "xsel"
        else:
            if self.has_xclip:
                return "xclip"
            if self.has_xsel:
                return "xsel"
        return None


def _detect_display_server() -> DisplayServer:
    """Detect the display server from the OS and environment variables."""
    if sys.platform == "darwin":
        return DisplayServer.MACOS

    session_type = os.environ.get("XDG_SESSION_TYPE", "").lower()
    if session_type == "wayland":
        return DisplayServer.WAYLAND
    if session_type == "x11":
        return DisplayServer.X11

    # Fallback: check for WAYLAND_DISPLAY
    if os.environ.get("WAYLAND_DISPLAY"):
        return DisplayServer.WAYLAND
    if os.environ.get("DISPLAY"):
        return DisplayServer.X11

    return DisplayServer.UNKNOWN


def _has_tool(name: str) -> bool:
    """Check if a command-line tool is available on PATH."""
    return shutil.which(name) is not None


def detect_platform() -> PlatformInfo:
    """Detect display server and clipboard tooling."""
    info = PlatformInfo(
        display_server=_detect_display_server(),
        has_xclip=_has_tool("xclip"),
        has_xsel=_has_tool("xsel"),
        has_wl_clipboard=_has_tool("wl-paste"),
        has_pbpaste=_has_tool("pbpaste"),
    )

    logger.debug(
        "Platform detected: display=%s, clipboard=%s",
        info.display_server.value,
        info.best_clipboard_tool or "none",
    )
    return info
