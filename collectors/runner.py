"""
Command runner seam: "given a shell command, return its standard output as text".
"""
from __future__ import annotations

import subprocess
from typing import Callable

from utils import get_logger

logger = get_logger(__name__)

CommandRunner = Callable[[str], str]


def run_command(cmd: str) -> str:
    """Run cmd in a shell and return stdout with one trailing newline removed.

    No timeout is applied. A command that cannot be started yields "".
    Undecodable bytes are replaced with U+FFFD.
    """
    try:
        out = subprocess.run(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        logger.debug("Command %r could not run: %s", cmd, e)
        return ""
    text = out.stdout or ""
    if text.endswith("\n"):
        text = text[:-1]
    return text
