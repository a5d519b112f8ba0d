"""Textual widget components."""

from blockwrap.tui.widgets.block_panel import BlockBody, BlockPanel
from blockwrap.tui.widgets.capacity_input import CapacityInput
from blockwrap.tui.widgets.content_editor import BlockEditor
from blockwrap.tui.widgets.status_panel import StatusPanel

__all__ = [
    "BlockBody",
    "BlockPanel",
    "CapacityInput",
    "BlockEditor",
    "StatusPanel",
]
