"""Reflow engine: tokens -> lines -> blocks, with edit merging."""

from blockwrap.reflow.tokenizer import tokenize
from blockwrap.reflow.measure import Measurer, cells_fit, char_fits, measurement_handle, size_fits
from blockwrap.reflow.composer import compose_lines, greedy_accumulate
from blockwrap.reflow.partitioner import (
    LineCountPartitioner,
    MeasuredHeightPartitioner,
    Partitioner,
    partitioner_for,
)
from blockwrap.reflow.normalizer import normalize, normalize_text
from blockwrap.reflow.engine import EditSession, EngineState, ReflowEngine, merge_edit, splice_stream
from blockwrap.reflow.debounce import Debouncer
from blockwrap.reflow.extractor import capacity_metrics, extract_exact, extract_for_capacity

__all__ = [
    "tokenize",
    "Measurer",
    "cells_fit",
    "char_fits",
    "measurement_handle",
    "size_fits",
    "compose_lines",
    "greedy_accumulate",
    "LineCountPartitioner",
    "MeasuredHeightPartitioner",
    "Partitioner",
    "partitioner_for",
    "normalize",
    "normalize_text",
    "EditSession",
    "EngineState",
    "ReflowEngine",
    "merge_edit",
    "splice_stream",
    "Debouncer",
    "capacity_metrics",
    "extract_exact",
    "extract_for_capacity",
]
