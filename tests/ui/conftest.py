"""Shared fixtures for UI tests."""

import pytest
from textual.app import App

from blockwrap.models.config import CapacityConfig
from blockwrap.reflow.engine import ReflowEngine
from blockwrap.tui.screens.reflow import ReflowScreen


class ReflowTestApp(App):
    """Test app wrapper for ReflowScreen."""

    def __init__(self, screen: ReflowScreen):
        super().__init__()
        self.test_screen = screen

    def on_mount(self) -> None:
        """Push the test screen on mount."""
        self.push_screen(self.test_screen)


class FakeClipboard:
    """Clipboard sink that records what was copied."""

    def __init__(self):
        self.written = []

    def write(self, text: str) -> None:
        self.written.append(text)


@pytest.fixture
def engine():
    """Engine with 10 chars/line, 2 lines/block and four words."""
    return ReflowEngine(CapacityConfig(line_capacity=10, block_capacity=2), "alpha beta gamma delta")


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def make_app(engine, clipboard):
    """Build a test app around a ReflowScreen for the shared engine (or `screen_engine`)."""

    def _make(commit_delay: float = 5.0, screen_engine=None, block_width: int = 34) -> ReflowTestApp:
        screen = ReflowScreen(
            screen_engine or engine,
            commit_delay=commit_delay,
            block_width=block_width,
            clipboard=clipboard,
        )
        return ReflowTestApp(screen)

    return _make
