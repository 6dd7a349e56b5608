"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2,
with small C-library-style helpers for characters, buffers, strings and output."""

__version__ = "0.1.0"