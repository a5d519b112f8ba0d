"""Data models for Blockwrap."""

from blockwrap.models.layout import Block, Line, RenderMetrics, Size, flatten
from blockwrap.models.config import CapacityConfig, Config, DisplayConfig, EditorConfig

__all__ = [
    "Block",
    "Line",
    "RenderMetrics",
    "Size",
    "flatten",
    "CapacityConfig",
    "Config",
    "DisplayConfig",
    "EditorConfig",
]
