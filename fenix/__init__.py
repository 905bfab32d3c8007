"""Building blocks of a small kernel: lists, address parsing, DNS constants, scheduler, console and shell."""

__version__ = "0.1.0"