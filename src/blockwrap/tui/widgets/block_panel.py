"""BlockPanel widget: one block with its Copy and Edit/Save buttons.

The panel body is exactly as wide as the capacity settings allow (see
capacity_metrics()), whatever the width of the surrounding layout. The text
it shows is extract_for_capacity() of the block, and Copy hands over that
same text, so the clipboard always holds what is on screen and never breaks
the line or block capacity.
"""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Label, Static

from blockwrap.models.config import CapacityConfig
from blockwrap.models.layout import RenderMetrics
from blockwrap.reflow.extractor import capacity_metrics, extract_for_capacity
from blockwrap.tui.widgets.content_editor import BlockEditor

BODY_PADDING = 1
BORDER_CELLS = 2


class BlockBody(Static):
    """Read-only block text in a region sized by the capacity settings."""

    DEFAULT_CSS = """
    BlockBody {
        height: auto;
        padding: 0 1;
    }
    """

    def __init__(self, block_text: str, config: CapacityConfig, *args, **kwargs):
        """Initialize BlockBody.

        Args:
            block_text: Stored block text
            config: Capacity settings the block was built with
        """
        exact = extract_for_capacity(block_text, config, BODY_PADDING)
        super().__init__(exact, *args, markup=False, **kwargs)
        self.block_text = block_text
        self.config = config
        self.metrics: RenderMetrics = capacity_metrics(block_text, config, BODY_PADDING)
        self.styles.width = self.metrics.width

    def exact_text(self) -> str:
        """Block text broken exactly as displayed."""
        return extract_for_capacity(self.block_text, self.config, BODY_PADDING)


class BlockPanel(Vertical):
    """A single block: title, body (or editor) and action buttons."""

    DEFAULT_CSS = """
    BlockPanel {
        height: auto;
        min-height: 8;
        border: solid $primary;
        margin: 0 1 1 0;
    }

    BlockPanel.editing {
        border: heavy $accent;
    }

    BlockPanel .block-title {
        text-style: bold;
        padding: 0 1;
    }

    BlockPanel BlockEditor {
        height: auto;
        min-height: 6;
    }

    BlockPanel .block-actions {
        height: auto;
        align-horizontal: right;
    }

    BlockPanel Button {
        min-width: 8;
        margin-left: 1;
    }
    """

    class CopyRequested(Message):
        """Posted when the Copy button is pressed."""

        def __init__(self, index: int, text: str) -> None:
            """Initialize message.

            Args:
                index: Position of the block
                text: Block text exactly as displayed
            """
            super().__init__()
            self.index = index
            self.text = text

    class EditToggled(Message):
        """Posted when the Edit/Save button is pressed."""

        def __init__(self, index: int, editing: bool) -> None:
            """Initialize message.

            Args:
                index: Position of the block
                editing: Whether the panel was in editing mode (Save pressed)
            """
            super().__init__()
            self.index = index
            self.editing = editing

    def __init__(
        self,
        index: int,
        block_text: str,
        config: CapacityConfig,
        editing: bool = False,
        min_width: int = 0,
        *args,
        **kwargs
    ):
        """Initialize BlockPanel.

        Args:
            index: Position of the block in the block list
            block_text: Stored block text
            config: Capacity settings the block was built with
            editing: Show an editor instead of the read-only body
            min_width: Smallest panel width in cells; the panel grows to fit the body
        """
        super().__init__(*args, id=f"block-{index}", **kwargs)
        self.index = index
        self.block_text = block_text
        self.config = config
        self.editing = editing
        body_width = capacity_metrics(block_text, config, BODY_PADDING).width
        self.styles.width = max(min_width, body_width + BORDER_CELLS)
        if editing:
            self.add_class("editing")

    def compose(self) -> ComposeResult:
        yield Label(f"Block {self.index + 1}", classes="block-title")
        if self.editing:
            yield BlockEditor(self.block_text, id=f"block-editor-{self.index}")
        else:
            yield BlockBody(self.block_text, self.config, id=f"block-body-{self.index}")
        with Horizontal(classes="block-actions"):
            yield Button("Copy", id=f"copy-{self.index}", classes="copy-button", variant="primary")
            yield Button(
                "Save" if self.editing else "Edit",
                id=f"edit-{self.index}",
                classes="edit-button",
            )

    def copy_text(self) -> str:
        """Text to put on the clipboard for this block."""
        if self.editing:
            return self.query_one(BlockEditor).get_content()
        return self.query_one(BlockBody).exact_text()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("copy-button"):
            self.post_message(self.CopyRequested(self.index, self.copy_text()))
        elif event.button.has_class("edit-button"):
            self.post_message(self.EditToggled(self.index, self.editing))
