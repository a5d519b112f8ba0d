"""Capacity predicates and the rendered-size measurement oracle.

These predicates decide whether a candidate line or block still fits:

- char_fits(): plain character count, used for stored lines.
- cells_fit(): terminal cell count, the row limit of height mode.
- size_fits(): asks a Measurer how tall the candidate renders in a region of
  known width, and compares against the height of reference lines.

The Measurer wraps text the way Rich lays it out in a terminal: words are
wrapped at whitespace and never folded, so a single oversized word stays on
one row and overflows.
"""

from contextlib import contextmanager
from io import StringIO
from typing import Callable, Iterator

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from blockwrap.models.layout import RenderMetrics, Size

FitPredicate = Callable[[str], bool]

# Appended to every candidate line before measuring: a line whose last cell
# is occupied would soft-wrap as soon as the cursor sits after it.
SENTINEL = "|"

REFERENCE_GLYPH = "M"


class Measurer:
    """Measures text as rendered into a region described by RenderMetrics."""

    def __init__(self, metrics: RenderMetrics, console: Console):
        self.metrics = metrics
        self._console = console

    def wrap(self, text: str) -> list[str]:
        """Return the rows text occupies once wrapped to the content width."""
        lines = Text(text).wrap(
            self._console,
            self.metrics.content_width,
            overflow="ignore",
        )
        return [line.plain.rstrip() for line in lines]

    def measure(self, text: str) -> Size:
        """Rendered extent of text: widest row in cells, height in rows."""
        rows = self.wrap(text)
        width = max((cell_len(row) for row in rows), default=0)
        return Size(width=width, height=len(rows) * self.metrics.line_height)

    def reference_height(self, lines: int) -> int:
        """Height of `lines` single-glyph reference rows."""
        return self.measure("\n".join([REFERENCE_GLYPH] * lines)).height


@contextmanager
def measurement_handle(metrics: RenderMetrics) -> Iterator[Measurer]:
    """Acquire a measurement context for one reflow computation.

    The scratch console is released when the block exits, so no measurement
    state survives between computations.
    """
    scratch = StringIO()
    console = Console(
        file=scratch,
        width=metrics.width,
        color_system=None,
        legacy_windows=False,
    )
    try:
        yield Measurer(metrics, console)
    finally:
        scratch.close()


def char_fits(capacity: int) -> FitPredicate:
    """Predicate accepting candidates of at most `capacity` characters."""

    def fits(candidate: str) -> bool:
        return len(candidate) <= capacity

    return fits


def cells_fit(capacity: int) -> FitPredicate:
    """Predicate accepting candidates at most `capacity` terminal cells wide."""

    def fits(candidate: str) -> bool:
        return cell_len(candidate) <= capacity

    return fits


def size_fits(
    measurer: Measurer,
    reference_lines: int = 1,
    sentinel: str = SENTINEL,
) -> FitPredicate:
    """Predicate accepting candidates that render within `reference_lines` rows.

    The threshold is measured once, up front, from reference text.
    """
    threshold = measurer.reference_height(reference_lines)

    def fits(candidate: str) -> bool:
        return measurer.measure(candidate + sentinel).height <= threshold

    return fits
