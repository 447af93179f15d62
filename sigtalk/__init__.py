"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with small string, buffer and printf helpers."""

__version__ = "0.1.0"