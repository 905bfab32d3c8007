"""Kernel console output: formatted printing and panics."""

from __future__ import annotations

from typing import Any, TextIO

__all__ = ["BUFFER_SIZE", "KernelPanic", "Console"]

BUFFER_SIZE = 512


class KernelPanic(RuntimeError):
    """Raised by :meth:`Console.panic` once the message has been written."""


class Console:
    """A formatted-output sink on top of a text stream such as a serial line."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def _format(self, fmt: str, args: tuple[Any, ...]) -> str:
        if not fmt:
            raise ValueError("format string must not be empty")
        text = fmt % args
        # The output buffer holds BUFFER_SIZE bytes including the terminator.
        return text[: BUFFER_SIZE - 1]

    def printk(self, fmt: str, *args: Any) -> None:
        """Format ``fmt`` with ``args`` printf-style and write it to the stream."""
        self.stream.write(self._format(fmt, args))

    def panic(self, fmt: str, *args: Any) -> None:
        """Write the formatted message, then stop by raising :class:`KernelPanic`."""
        message = self._format(fmt, args)
        self.stream.write(message)
        raise KernelPanic(message)