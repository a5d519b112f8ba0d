"""StatusPanel widget for displaying reflow and edit state.

Shows the block count, the active capacity settings and, while a block is
being edited, whether a commit is pending.
"""

from typing import Optional

from textual.widgets import Static

from blockwrap.reflow.engine import EngineState, ReflowEngine


class StatusPanel(Static):
    """Status line below the block list."""

    def __init__(self, engine: ReflowEngine, *args, **kwargs):
        """Initialize StatusPanel.

        Args:
            engine: Reflow engine whose state is displayed
        """
        super().__init__("", *args, id="status-panel", **kwargs)
        self.engine = engine
        self.note: Optional[str] = None

    def on_mount(self) -> None:
        """Set initial content when widget is mounted."""
        self.update_status()

    def update_status(self, note: Optional[str] = None, commit_pending: bool = False) -> None:
        """Update status display from the engine.

        Args:
            note: Transient message for the last user action (e.g. a copy)
            commit_pending: Whether a debounced commit is scheduled
        """
        self.note = note
        status_parts = [self._format_blocks(), self._format_capacity()]

        if self.engine.state == EngineState.EDITING and self.engine.session is not None:
            edit = f"Editing block {self.engine.session.block_index + 1}"
            if commit_pending:
                edit += " (unsaved)"
            status_parts.append(edit)

        if note:
            status_parts.append(note)

        self.update(" | ".join(status_parts))

    def _format_blocks(self) -> str:
        count = len(self.engine.blocks)
        if count == 0:
            return "No text"
        return f"{count} block{'s' if count != 1 else ''}"

    def _format_capacity(self) -> str:
        config = self.engine.config
        if config.mode == "height":
            return f"{config.line_capacity} cells wide, {config.block_capacity} rows/block"
        return f"{config.line_capacity} chars/line, {config.block_capacity} lines/block"
