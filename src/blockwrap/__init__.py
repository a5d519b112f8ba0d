"""Blockwrap - split free text into fixed-capacity, copyable blocks."""

__version__ = "0.1.0"
