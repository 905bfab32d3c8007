"""A tiny command shell that reads from a terminal and echoes to a display."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import BinaryIO

__all__ = ["LogLevel", "Shell"]

_COMMAND_SIZE = 64
_SET_LOG = re.compile(r"set\s*log=\s*(\S+)")


class LogLevel(IntEnum):
    """Log verbosity levels."""

    DEBUG = 0
    INFO = 1


class Shell:
    """Reads commands from ``tty`` and copies what it reads to ``display``."""

    def __init__(self, tty: BinaryIO, display: BinaryIO) -> None:
        self.tty = tty
        self.display = display
        self.log_level = LogLevel.INFO

    def handle_command(self, cmd: str) -> None:
        """Apply a ``set log=<level>`` command; other input is ignored."""
        cmd = cmd.split("\0", 1)[0]
        if not cmd.startswith("set"):
            return
        match = _SET_LOG.match(cmd)
        if match is None:
            return
        level = match.group(1).lower()
        if level == "debug":
            self.log_level = LogLevel.DEBUG
        elif level == "info":
            self.log_level = LogLevel.INFO

    def step(self) -> int:
        """Read one command, act on it and echo it; return the bytes read."""
        data = self.tty.read(_COMMAND_SIZE - 1)
        if not data:
            return 0
        self.handle_command(data.decode("latin-1"))
        self.display.write(data)
        return len(data)