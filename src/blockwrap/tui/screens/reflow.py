"""Reflow Screen: source text, capacity settings and the block list.

Editing the source text reflows everything. Editing a block goes through the
engine's edit session: every change updates the draft and re-schedules a
debounced commit, and leaving the editor (or pressing Save) commits at once.
After a commit the source area shows the merged text.
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Label, TextArea
import structlog

from blockwrap.reflow.debounce import Debouncer
from blockwrap.reflow.engine import ReflowEngine
from blockwrap.services.clipboard import ClipboardSink, TextualClipboard, copy_text
from blockwrap.tui.widgets.block_panel import BlockPanel
from blockwrap.tui.widgets.capacity_input import CapacityInput
from blockwrap.tui.widgets.content_editor import BlockEditor
from blockwrap.tui.widgets.status_panel import StatusPanel

logger = structlog.get_logger()


class ReflowScreen(Screen):
    """Main screen: paste text, tune capacities, edit and copy blocks."""

    DEFAULT_CSS = """
    ReflowScreen {
        layout: vertical;
    }

    #reflow-container {
        height: 100%;
        layout: vertical;
    }

    #capacity-bar {
        height: auto;
        padding: 0 1;
    }

    #capacity-bar Label {
        padding: 1 1 0 2;
    }

    #source-text {
        height: 10;
        border: solid $accent;
    }

    #block-list {
        height: 1fr;
        padding: 1 1 0 1;
    }

    #status-panel {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+s", "save_edit", "Save edit"),
        ("escape", "discard_edit", "Discard edit"),
    ]

    def __init__(
        self,
        engine: ReflowEngine,
        commit_delay: float = 1.5,
        block_width: int = 34,
        clipboard: Optional[ClipboardSink] = None,
        **kwargs
    ):
        """Initialize Reflow screen.

        Args:
            engine: Reflow engine holding the text and blocks
            commit_delay: Idle seconds after the last keystroke before committing
            block_width: Minimum width of each block panel in cells
            clipboard: Clipboard sink (defaults to the terminal clipboard)
        """
        super().__init__(**kwargs)
        self.engine = engine
        self.block_width = block_width
        self.clipboard = clipboard
        self.debouncer: Debouncer[str] = Debouncer(commit_delay, self._commit_draft)
        self._source_text = engine.text

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        config = self.engine.config
        with Container(id="reflow-container"):
            with Horizontal(id="capacity-bar"):
                yield Label("Chars per line")
                yield CapacityInput("line_capacity", config.line_capacity, id="line-capacity")
                yield Label("Lines per block")
                yield CapacityInput("block_capacity", config.block_capacity, id="block-capacity")

            yield TextArea(self._source_text, id="source-text")

            yield VerticalScroll(id="block-list")

            yield StatusPanel(self.engine)

            yield Footer()

    async def on_mount(self) -> None:
        """Handle screen mount event."""
        self.query_one("#source-text").border_title = "Text"
        await self._rebuild_blocks()

    def _sink(self) -> ClipboardSink:
        return self.clipboard or TextualClipboard(self.app)

    def _update_status(self, note: Optional[str] = None) -> None:
        self.query_one(StatusPanel).update_status(note=note, commit_pending=self.debouncer.pending)

    async def _rebuild_blocks(self) -> None:
        """Replace all block panels with the engine's current block list."""
        block_list = self.query_one("#block-list", VerticalScroll)
        await block_list.remove_children()

        editing_index = self.engine.session.block_index if self.engine.session else None
        panels = [
            BlockPanel(
                index,
                block.text,
                self.engine.config,
                editing=index == editing_index,
                min_width=self.block_width,
            )
            for index, block in enumerate(self.engine.blocks)
        ]
        await block_list.mount_all(panels)

        if editing_index is not None:
            self.query_one(f"#block-editor-{editing_index}", BlockEditor).focus()

        self._update_status()

    def _sync_source(self) -> None:
        """Show the merged logical text in the source area."""
        self._source_text = self.engine.text
        self.query_one("#source-text", TextArea).text = self._source_text

    def _commit_draft(self, draft: Optional[str]) -> None:
        """Debounced commit of the open edit session."""
        if draft is not None:
            self.engine.update_draft(draft)
        if self.engine.session is None:
            return

        self.engine.commit()
        self._sync_source()
        self.call_later(self._rebuild_blocks)

    def _flush_edit(self) -> None:
        """Commit the open edit session now, whether or not a commit is scheduled."""
        if not self.debouncer.flush() and self.engine.session is not None:
            self._commit_draft(None)

    async def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Route text changes from the source area and block editors."""
        text_area = event.text_area

        if isinstance(text_area, BlockEditor):
            session = self.engine.session
            if session is None or text_area.text == session.draft:
                return
            self.engine.update_draft(text_area.text)
            self.debouncer.schedule(text_area.text)
            self._update_status()
            return

        if text_area.id == "source-text":
            if text_area.text == self._source_text:
                return
            self.debouncer.cancel()
            self._source_text = text_area.text
            self.engine.load_text(text_area.text)
            await self._rebuild_blocks()

    def on_block_editor_blurred(self, message: BlockEditor.Blurred) -> None:
        """Leaving the editor commits immediately."""
        self._flush_edit()

    async def on_block_panel_edit_toggled(self, message: BlockPanel.EditToggled) -> None:
        """Start editing a block, or save the one being edited."""
        if message.editing:
            logger.info("user_action_save_edit", block_index=message.index)
            self._flush_edit()
            return

        self._flush_edit()
        if message.index >= len(self.engine.blocks):
            return

        logger.info("user_action_edit_block", block_index=message.index)
        self.engine.begin_edit(message.index)
        self.call_later(self._rebuild_blocks)

    def on_block_panel_copy_requested(self, message: BlockPanel.CopyRequested) -> None:
        """Copy the block text exactly as displayed."""
        logger.info("user_action_copy_block", block_index=message.index)
        if copy_text(self._sink(), message.text):
            self._update_status(note=f"Copied block {message.index + 1}")
        else:
            self._update_status(note="Copy failed")

    async def on_capacity_input_capacity_changed(self, message: CapacityInput.CapacityChanged) -> None:
        """Apply a new capacity value: commit pending edits, then reflow."""
        self.debouncer.flush()
        self.engine.reconfigure(**{message.field: message.value})

        config = self.engine.config
        self.query_one("#line-capacity", CapacityInput).show_value(config.line_capacity)
        self.query_one("#block-capacity", CapacityInput).show_value(config.block_capacity)

        self._sync_source()
        await self._rebuild_blocks()

    def action_save_edit(self) -> None:
        """Commit the open edit (ctrl+s)."""
        self._flush_edit()

    async def action_discard_edit(self) -> None:
        """Drop the open edit without reflowing (escape)."""
        if self.engine.session is None:
            return
        self.debouncer.cancel()
        logger.info("user_action_discard_edit", block_index=self.engine.session.block_index)
        self.engine.discard_edit()
        await self._rebuild_blocks()
