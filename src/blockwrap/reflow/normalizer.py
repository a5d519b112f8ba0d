"""Two-pass block normalization."""

from typing import Sequence

import structlog

from blockwrap.models.layout import Block, flatten
from blockwrap.reflow.partitioner import Partitioner
from blockwrap.reflow.tokenizer import tokenize

logger = structlog.get_logger()


def normalize(tokens: Sequence[str], partitioner: Partitioner) -> list[Block]:
    """
    Partition tokens, flatten the result and partition it again.

    Greedy partitioning after a splice can leave a block under capacity
    because its neighbour was packed from a different starting point. The
    second pass packs the whole stream from scratch. Exactly two passes are
    made; the second result is final.

    Args:
        tokens: Word stream to partition
        partitioner: Strategy used for both passes

    Returns:
        Blocks of the second pass
    """
    first_pass = partitioner.partition(tokens)
    stream = tokenize(" ".join(flatten(first_pass)))
    second_pass = partitioner.partition(stream)

    logger.debug(
        "blocks_normalized",
        words=len(stream),
        first_pass_blocks=len(first_pass),
        blocks=len(second_pass),
    )
    return second_pass


def normalize_text(text: str, partitioner: Partitioner) -> list[Block]:
    """Tokenize raw text and normalize it into blocks."""
    return normalize(tokenize(text), partitioner)
