"""Greedy line composition."""

from typing import Sequence

from blockwrap.models.layout import Line
from blockwrap.reflow.measure import FitPredicate


def greedy_accumulate(tokens: Sequence[str], fits: FitPredicate) -> list[list[str]]:
    """
    Pack tokens into consecutive runs, each as long as `fits` allows.

    A token is appended to the current run when the run's text plus a space
    plus the token still fits. Otherwise the run is closed and the token
    starts a new one. A token that does not fit even on its own still gets a
    run of its own: tokens are never split or dropped.

    Args:
        tokens: Word tokens in stream order
        fits: Capacity predicate over the candidate run text

    Returns:
        Runs of tokens whose concatenation is exactly `tokens`
    """
    runs: list[list[str]] = []
    current: list[str] = []
    buffer = ""

    for token in tokens:
        candidate = f"{buffer} {token}" if current else token
        if current and not fits(candidate):
            runs.append(current)
            current = [token]
            buffer = token
        else:
            current.append(token)
            buffer = candidate

    if current:
        runs.append(current)

    return runs


def compose_lines(tokens: Sequence[str], fits: FitPredicate) -> list[Line]:
    """
    Compose tokens into lines under a capacity predicate.

    Examples:
        >>> from blockwrap.reflow.measure import char_fits
        >>> [line.text for line in compose_lines(["alpha", "beta", "gamma"], char_fits(10))]
        ['alpha beta', 'gamma']
    """
    return [Line(words=tuple(run)) for run in greedy_accumulate(tokens, fits)]
