"""Configuration models for Blockwrap."""

from pydantic import BaseModel, Field, field_validator
from pathlib import Path
from typing import Literal
import yaml


LINE_CAPACITY_BOUNDS = (10, 120)
BLOCK_CAPACITY_BOUNDS = (1, 50)


def clamp(value: int, bounds: tuple[int, int]) -> int:
    """Clamp value into the inclusive (min, max) range."""
    low, high = bounds
    return max(low, min(high, value))


def whole_number(value) -> int:
    """
    Coerce a capacity value to int without losing information.

    Accepts ints, integral floats (12.0) and strings holding a whole number.

    Raises:
        ValueError: For fractions, booleans, None and anything else
    """
    if isinstance(value, bool):
        raise ValueError(f"expected a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"expected a whole number, got {value!r}")


class CapacityConfig(BaseModel):
    """Capacity settings for the reflow engine.

    Out-of-range values are clamped rather than rejected. Values that are not
    whole numbers (fractions, null, booleans, words) fail validation.
    """

    line_capacity: int = Field(
        default=30,
        description="Maximum size of one line (characters, or cells in height mode)"
    )

    block_capacity: int = Field(
        default=8,
        description="Maximum number of lines per block"
    )

    mode: Literal["lines", "height"] = Field(
        default="lines",
        description="'lines' chunks composed lines; 'height' packs words by measured height"
    )

    @field_validator("line_capacity", mode="before")
    @classmethod
    def clamp_line_capacity(cls, v) -> int:
        """Clamp line capacity into LINE_CAPACITY_BOUNDS."""
        return clamp(whole_number(v), LINE_CAPACITY_BOUNDS)

    @field_validator("block_capacity", mode="before")
    @classmethod
    def clamp_block_capacity(cls, v) -> int:
        """Clamp block capacity into BLOCK_CAPACITY_BOUNDS."""
        return clamp(whole_number(v), BLOCK_CAPACITY_BOUNDS)

    model_config = {"frozen": True}


class EditorConfig(BaseModel):
    """Configuration for block editing."""

    commit_delay: float = Field(
        default=1.5,
        ge=0.05,
        le=10.0,
        description="Idle period (seconds) after the last keystroke before an edit is committed"
    )

    model_config = {"frozen": True}


class DisplayConfig(BaseModel):
    """Configuration for the terminal UI."""

    block_width: int = Field(
        default=34,
        ge=14,
        le=160,
        description="Minimum width of each block panel in terminal cells (panels grow to fit the line capacity)"
    )

    model_config = {"frozen": True}


class Config(BaseModel):
    """Root configuration for Blockwrap."""

    capacity: CapacityConfig = Field(default_factory=CapacityConfig, description="Reflow capacity settings")
    editor: EditorConfig = Field(default_factory=EditorConfig, description="Block editing settings")
    display: DisplayConfig = Field(default_factory=DisplayConfig, description="Terminal UI settings")

    @classmethod
    def load(cls, path: Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            path: Path to config.yaml file

        Returns:
            Validated Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is invalid or validation fails
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at {path}\n\n"
                f"Create the file with the following format:\n\n"
                f"capacity:\n"
                f"  line_capacity: 30\n"
                f"  block_capacity: 8\n"
                f"  mode: lines\n"
            )

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        return cls(**data)

    model_config = {"frozen": True}
