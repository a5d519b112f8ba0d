"""Reflow merge engine.

Holds the current block list and at most one edit session. An edit replaces
the words of one block inside the full word stream and reflows the whole
stream, so text pushed out of (or pulled into) the edited block lands in its
neighbours instead of being lost or duplicated.

State machine:

    VIEWING --begin_edit(i)--> EDITING(i) --commit()--> COMMITTING --> VIEWING
                                  |
                                  +--discard_edit()--> VIEWING

Commits are pure functions of the current word stream and the draft (see
merge_edit()), which is what makes a late or repeated commit safe.
"""

from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, Field
import structlog

from blockwrap.models.config import CapacityConfig
from blockwrap.models.layout import Block, flatten
from blockwrap.reflow.normalizer import normalize
from blockwrap.reflow.partitioner import Partitioner, partitioner_for
from blockwrap.reflow.tokenizer import tokenize

logger = structlog.get_logger()


class EngineState(str, Enum):
    """Enum for reflow engine states."""

    VIEWING = "viewing"
    EDITING = "editing"
    COMMITTING = "committing"


class EditSession(BaseModel):
    """In-progress edit of a single block."""

    block_index: int = Field(
        ...,
        ge=0,
        description="Position of the edited block in the block list when editing started"
    )

    draft: str = Field(
        ...,
        description="Current editor content for the block"
    )

    model_config = {"frozen": False}  # Draft changes on every keystroke


def splice_stream(
    stream: Sequence[str],
    offset: int,
    length: int,
    replacement: Sequence[str],
) -> list[str]:
    """Replace `length` words starting at `offset` with `replacement`."""
    return [*stream[:offset], *replacement, *stream[offset + length:]]


def block_offset(blocks: Sequence[Block], index: int) -> int:
    """Number of words in the blocks before `index`."""
    return sum(block.word_count for block in blocks[:index])


def merge_edit(
    blocks: Sequence[Block],
    index: int,
    draft: str,
    partitioner: Partitioner,
) -> list[Block]:
    """
    Splice edited block content into the word stream and reflow it.

    The replaced range is the word count of the block as it is now, not as
    it was when editing began.

    Args:
        blocks: Current block list
        index: Position of the edited block (must exist in `blocks`)
        draft: New raw content for that block
        partitioner: Strategy used to reflow the merged stream

    Returns:
        New block list for the merged stream
    """
    offset = block_offset(blocks, index)
    length = blocks[index].word_count
    replacement = tokenize(draft)
    merged = splice_stream(flatten(blocks), offset, length, replacement)

    logger.debug(
        "edit_spliced",
        block_index=index,
        offset=offset,
        replaced_words=length,
        inserted_words=len(replacement),
    )
    return normalize(merged, partitioner)


class ReflowEngine:
    """Owns the block list, the capacity settings and the edit session."""

    def __init__(self, config: Optional[CapacityConfig] = None, text: str = ""):
        """Initialize the engine.

        Args:
            config: Capacity settings (defaults apply when omitted)
            text: Initial raw text
        """
        self.config = config or CapacityConfig()
        self.blocks: list[Block] = []
        self.session: Optional[EditSession] = None
        self.state = EngineState.VIEWING

        if text:
            self.load_text(text)

    @property
    def stream(self) -> list[str]:
        """Full word stream across all blocks."""
        return flatten(self.blocks)

    @property
    def text(self) -> str:
        """Current logical text: the word stream joined by single spaces."""
        return " ".join(self.stream)

    def block_texts(self) -> list[str]:
        """Ordered block texts, each a newline-joined sequence of lines."""
        return [block.text for block in self.blocks]

    def _reflow(self, tokens: Sequence[str]) -> list[Block]:
        with partitioner_for(self.config) as partitioner:
            return normalize(tokens, partitioner)

    def load_text(self, text: str) -> list[Block]:
        """Replace the logical text, dropping any edit in progress."""
        if self.session is not None:
            logger.info("edit_discarded", block_index=self.session.block_index, reason="text_replaced")
            self.discard_edit()

        self.blocks = self._reflow(tokenize(text))
        logger.info("text_loaded", characters=len(text), blocks=len(self.blocks))
        return self.blocks

    def reconfigure(
        self,
        line_capacity: Optional[int] = None,
        block_capacity: Optional[int] = None,
        mode: Optional[str] = None,
    ) -> list[Block]:
        """
        Change capacity settings and reflow the current logical text.

        Values are clamped by CapacityConfig. A pending edit is committed
        first so the reflow never runs against stale offsets.

        Raises:
            pydantic.ValidationError: If a value is not a number (or an
                unknown mode); the engine is left untouched.
        """
        updates = {
            key: value
            for key, value in (
                ("line_capacity", line_capacity),
                ("block_capacity", block_capacity),
                ("mode", mode),
            )
            if value is not None
        }
        config = CapacityConfig(**{**self.config.model_dump(), **updates})

        if self.session is not None:
            self.commit()

        self.config = config
        self.blocks = self._reflow(self.stream)
        logger.info(
            "capacity_reconfigured",
            line_capacity=config.line_capacity,
            block_capacity=config.block_capacity,
            mode=config.mode,
            blocks=len(self.blocks),
        )
        return self.blocks

    def begin_edit(self, index: int) -> EditSession:
        """
        Open an edit session on block `index`, seeded with its text.

        Re-opening the block already being edited returns the existing
        session. Opening a different block commits the pending session first;
        `index` then refers to the reflowed block list.

        Raises:
            IndexError: If no block exists at `index`
        """
        if self.session is not None:
            if self.session.block_index == index:
                return self.session
            self.commit()

        block = self.blocks[index]
        self.session = EditSession(block_index=index, draft=block.text)
        self.state = EngineState.EDITING
        logger.info("edit_started", block_index=index, words=block.word_count)
        return self.session

    def update_draft(self, draft: str) -> None:
        """Record the latest editor content for the open session."""
        if self.session is None:
            logger.debug("draft_ignored_without_session")
            return
        self.session.draft = draft

    def commit(self) -> list[Block]:
        """
        Merge the session draft into the word stream and reflow.

        Does nothing when no session is open.

        Returns:
            The (possibly new) block list
        """
        if self.session is None:
            return self.blocks

        session = self.session
        self.state = EngineState.COMMITTING
        with partitioner_for(self.config) as partitioner:
            self.blocks = merge_edit(self.blocks, session.block_index, session.draft, partitioner)

        self.session = None
        self.state = EngineState.VIEWING
        logger.info("edit_committed", block_index=session.block_index, blocks=len(self.blocks))
        return self.blocks

    def discard_edit(self) -> None:
        """Drop the open session without reflowing."""
        self.session = None
        self.state = EngineState.VIEWING
