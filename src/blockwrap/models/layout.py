"""Layout value types produced by the reflow engine."""

from dataclasses import dataclass
from typing import Iterable

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class Line:
    """One rendered row of word tokens.

    Attributes:
        words: Tokens on this line, in stream order (never empty)
    """

    words: tuple[str, ...]

    @property
    def text(self) -> str:
        """Line as displayed: tokens joined by a single space."""
        return " ".join(self.words)


@dataclass(frozen=True)
class Block:
    """A group of lines presented and copied as one unit.

    Blocks are identified by their position in the current block list only;
    any reflow may change the content at a given index.

    Attributes:
        lines: Lines of the block, in stream order (never empty)
    """

    lines: tuple[Line, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[Line]) -> "Block":
        return cls(lines=tuple(lines))

    @property
    def words(self) -> list[str]:
        """All tokens of the block, in order."""
        return [word for line in self.lines for word in line.words]

    @property
    def word_count(self) -> int:
        return sum(len(line.words) for line in self.lines)

    @property
    def text(self) -> str:
        """Block as displayed: line texts joined by newlines."""
        return "\n".join(line.text for line in self.lines)


@dataclass(frozen=True)
class Size:
    """Rendered extent of a piece of text."""

    width: int
    height: int


class RenderMetrics(BaseModel):
    """Presentational metrics of the region a block is rendered into.

    Widths are terminal cells; line_height is rows per wrapped line.
    """

    width: int = Field(..., ge=1, description="Outer width of the region, including padding")
    padding_left: int = Field(default=0, ge=0, description="Left padding inside the region")
    padding_right: int = Field(default=0, ge=0, description="Right padding inside the region")
    line_height: int = Field(default=1, ge=1, description="Rows occupied by one wrapped line")

    @property
    def content_width(self) -> int:
        """Width available to text, never less than one cell."""
        return max(1, self.width - self.padding_left - self.padding_right)

    model_config = {"frozen": True}


def flatten(blocks: Iterable[Block]) -> list[str]:
    """Concatenate the words of all blocks into one word stream."""
    return [word for block in blocks for word in block.words]
