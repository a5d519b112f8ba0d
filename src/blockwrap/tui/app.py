"""Main Blockwrap TUI Application.

This module defines the Textual App that hosts the reflow screen. The app
owns the configuration and the reflow engine; the screen drives the engine
from user input.
"""

from textual.app import App
from textual.binding import Binding
import structlog

from blockwrap.models.config import Config
from blockwrap.reflow.engine import ReflowEngine
from blockwrap.tui.screens import ReflowScreen

logger = structlog.get_logger()


class BlockwrapApp(App):
    """Main Blockwrap TUI Application."""

    TITLE = "Blockwrap"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, config: Config, text: str = ""):
        """Initialize the Blockwrap app.

        Args:
            config: Application configuration
            text: Initial source text
        """
        super().__init__()
        self.config = config
        self.engine = ReflowEngine(config.capacity, text)

        logger.info(
            "app_initialized",
            characters=len(text),
            blocks=len(self.engine.blocks),
            mode=config.capacity.mode,
        )

    def on_mount(self) -> None:
        """Called when app is mounted. Show the reflow screen."""
        self.push_screen(
            ReflowScreen(
                engine=self.engine,
                commit_delay=self.config.editor.commit_delay,
                block_width=self.config.display.block_width,
                name="reflow",
            )
        )
