"""Block partitioning strategies.

Both strategies share the greedy-accumulate contract of the line composer and
differ only in what they accumulate:

- LineCountPartitioner composes lines under a character budget and chunks
  them into groups of exactly K lines (the last group may be shorter).
- MeasuredHeightPartitioner accumulates words directly and closes a block as
  soon as its rendered height would exceed K reference lines. Line breaks
  inside such a block come from the renderer, so per-line capacity is not a
  stored invariant there.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Sequence

from blockwrap.models.config import CapacityConfig
from blockwrap.models.layout import Block, RenderMetrics
from blockwrap.reflow.composer import compose_lines, greedy_accumulate
from blockwrap.reflow.measure import FitPredicate, Measurer, char_fits, measurement_handle, size_fits


class Partitioner(ABC):
    """Groups a word stream into blocks."""

    @abstractmethod
    def partition(self, tokens: Sequence[str]) -> list[Block]:
        """Partition tokens into blocks, preserving order and content."""


class LineCountPartitioner(Partitioner):
    """Fixed number of composed lines per block."""

    def __init__(self, fits: FitPredicate, lines_per_block: int):
        self.fits = fits
        self.lines_per_block = lines_per_block

    def partition(self, tokens: Sequence[str]) -> list[Block]:
        lines = compose_lines(tokens, self.fits)
        size = self.lines_per_block
        return [
            Block.from_lines(lines[start:start + size])
            for start in range(0, len(lines), size)
        ]


class MeasuredHeightPartitioner(Partitioner):
    """Blocks bounded by rendered height rather than by line count."""

    def __init__(self, measurer: Measurer, lines_per_block: int):
        self.measurer = measurer
        self.lines_per_block = lines_per_block
        self.threshold = measurer.reference_height(lines_per_block)
        self.row_fits = size_fits(measurer, sentinel="")

    def fits(self, candidate: str) -> bool:
        return self.measurer.measure(candidate).height <= self.threshold

    def partition(self, tokens: Sequence[str]) -> list[Block]:
        return [self._materialize(run) for run in greedy_accumulate(tokens, self.fits)]

    def _materialize(self, words: list[str]) -> Block:
        """Break a word run into the rows the renderer would produce.

        Row breaks are decided by measuring, but the tokens themselves always
        come from `words`: the renderer drops control characters, so its
        output is never tokenized again.
        """
        return Block.from_lines(compose_lines(words, self.row_fits))


@contextmanager
def partitioner_for(config: CapacityConfig) -> Iterator[Partitioner]:
    """Select and scope the partitioning strategy for one computation.

    In height mode the line capacity is the render width in cells, and a
    measurement handle is held for the duration of the block.
    """
    if config.mode == "height":
        metrics = RenderMetrics(width=config.line_capacity)
        with measurement_handle(metrics) as measurer:
            yield MeasuredHeightPartitioner(measurer, config.block_capacity)
    else:
        yield LineCountPartitioner(char_fits(config.line_capacity), config.block_capacity)
