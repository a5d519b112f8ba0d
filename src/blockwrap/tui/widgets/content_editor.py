"""BlockEditor widget for editing the content of one block.

The editor replaces a block's body while an edit session is open.
"""

from textual.message import Message
from textual.widgets import TextArea
from textual.reactive import reactive


class BlockEditor(TextArea):
    """Multi-line text editor for a single block."""

    # Drives the border style
    editor_has_focus = reactive(False)

    class Blurred(Message):
        """Posted when the editor loses focus (commits the edit)."""

        def __init__(self, editor: "BlockEditor") -> None:
            super().__init__()
            self.editor = editor

    def __init__(self, content: str = "", *args, **kwargs):
        """Initialize BlockEditor.

        Args:
            content: Initial block text
        """
        super().__init__(content, *args, **kwargs)
        self.can_focus = True
        self.show_line_numbers = False

    def watch_editor_has_focus(self, has_focus: bool) -> None:
        """Heavy border while the editor has focus."""
        if has_focus:
            self.styles.border = ("heavy", "blue")
        else:
            self.styles.border = ("solid", "white")

    def on_focus(self) -> None:
        """Handle focus event."""
        self.editor_has_focus = True

    def on_blur(self) -> None:
        """Handle blur event."""
        self.editor_has_focus = False
        self.post_message(self.Blurred(self))

    def get_content(self) -> str:
        """Get current content from editor.

        Returns:
            Current text content
        """
        return self.text
