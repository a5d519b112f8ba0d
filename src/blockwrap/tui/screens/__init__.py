"""Textual screen components."""

from blockwrap.tui.screens.reflow import ReflowScreen

__all__ = [
    "ReflowScreen",
]
