"""Exact-as-rendered text extraction for copy output.

A block is displayed in a region whose content width is derived from the
capacity settings, never from the surrounding layout: one cell per allowed
character (or cell, in height mode) plus one for the sentinel. In such a
region every stored line renders on one row and no two stored lines fit
together, so the text on screen, the text copied, and the stored lines are
the same.
"""

from typing import Optional

from rich.cells import cell_len
import structlog

from blockwrap.models.config import CapacityConfig
from blockwrap.models.layout import RenderMetrics
from blockwrap.reflow.composer import compose_lines
from blockwrap.reflow.measure import (
    SENTINEL,
    FitPredicate,
    cells_fit,
    char_fits,
    measurement_handle,
    size_fits,
)
from blockwrap.reflow.tokenizer import tokenize

logger = structlog.get_logger()


def extract_exact(
    block_text: str,
    metrics: RenderMetrics,
    sentinel: str = SENTINEL,
    line_fits: Optional[FitPredicate] = None,
) -> str:
    """
    Re-wrap block text exactly as it renders in a region with `metrics`.

    Stored line breaks are ignored: the block's words are recomposed with the
    size oracle for the region's content width. Whatever displays this output
    in a region with the same metrics shows these exact lines, so the copied
    text matches the screen.

    Args:
        block_text: Block content (any line breaks in it are discarded)
        metrics: Width, padding and line height of the display region
        sentinel: Marker appended to each candidate line when measuring
        line_fits: Extra per-line limit that must hold as well, if given

    Returns:
        Newline-joined rendered lines ("" for an empty block)
    """
    with measurement_handle(metrics) as measurer:
        renders_in_row = size_fits(measurer, sentinel=sentinel)

        def fits(candidate: str) -> bool:
            if line_fits is not None and not line_fits(candidate):
                return False
            return renders_in_row(candidate)

        lines = compose_lines(tokenize(block_text), fits)

    logger.debug("block_extracted", content_width=metrics.content_width, lines=len(lines))
    return "\n".join(line.text for line in lines)


def capacity_line_fits(config: CapacityConfig) -> FitPredicate:
    """Per-line limit of the capacity settings: characters, or cells in height mode."""
    if config.mode == "height":
        return cells_fit(config.line_capacity)
    return char_fits(config.line_capacity)


def capacity_metrics(
    block_text: str,
    config: CapacityConfig,
    padding: int = 1,
    sentinel: str = SENTINEL,
) -> RenderMetrics:
    """
    Metrics of a display region sized for the capacity settings.

    The content width is the line capacity (or the widest stored line, if a
    line holding wide characters or an oversized word is wider) plus the
    sentinel's cells.

    Args:
        block_text: Stored block text, lines separated by newlines
        config: Capacity settings the block was built with
        padding: Cells of padding on each side of the region
        sentinel: Sentinel reserved at the end of every row
    """
    widest = max((cell_len(line) for line in block_text.split("\n")), default=0)
    content_width = max(config.line_capacity, widest) + cell_len(sentinel)
    return RenderMetrics(
        width=content_width + 2 * padding,
        padding_left=padding,
        padding_right=padding,
        line_height=1,
    )


def extract_for_capacity(block_text: str, config: CapacityConfig, padding: int = 1) -> str:
    """Block text as displayed in a region sized by capacity_metrics()."""
    return extract_exact(
        block_text,
        capacity_metrics(block_text, config, padding),
        line_fits=capacity_line_fits(config),
    )
