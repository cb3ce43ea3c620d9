"""Clipboard access through the platform's command-line tools."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys

from domain.services import Clipboard
from infrastructure.logging import get_logger

logger = get_logger(__name__)


class SystemClipboard(Clipboard):
    """Copy text by piping it into wl-copy, xclip, xsel, pbcopy or clip."""

    def copy_text(self, text: str) -> bool:
        if not text:
            return False
        command = self._find_command()
        if command is None:
            logger.warning("No clipboard tool found on PATH")
            return False
        return self._run_clipboard_command(command, text)

    def _find_command(self) -> list[str] | None:
        session = os.environ.get("XDG_SESSION_TYPE", "").casefold()
        if session == "wayland":
            cmd = shutil.which("wl-copy")
            if cmd is not None:
                return [cmd, "--type", "text/plain"]
        if sys.platform == "darwin":
            cmd = shutil.which("pbcopy")
            if cmd is not None:
                return [cmd]
        if sys.platform.startswith("win"):
            cmd = shutil.which("clip")
            if cmd is not None:
                return [cmd]
        cmd = shutil.which("xclip")
        if cmd is not None:
            return [cmd, "-selection", "clipboard"]
        cmd = shutil.which("xsel")
        if cmd is not None:
            return [cmd, "--clipboard", "--input"]
        return None

    def _run_clipboard_command(self, command: list[str], text: str) -> bool:
        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Clipboard command {command[0]} failed: {e}")
            return False
        return True
