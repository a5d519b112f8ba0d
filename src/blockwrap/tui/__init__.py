"""Textual terminal UI for Blockwrap."""
