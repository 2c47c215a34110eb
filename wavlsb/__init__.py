"""Least-significant-bit text hiding in WAV audio, with header inspection and a menu command."""

__version__ = "0.1.0"
__all__ = ["bits", "header", "lsb", "cli"]