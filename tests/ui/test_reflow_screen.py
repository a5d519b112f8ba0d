"""UI tests for the reflow screen: block editing, copying and capacity input."""

import pytest
from textual.widgets import TextArea

from blockwrap.models.config import CapacityConfig, Config
from blockwrap.reflow.engine import EngineState, ReflowEngine
from blockwrap.tui.app import BlockwrapApp
from blockwrap.tui.screens.reflow import ReflowScreen
from blockwrap.tui.widgets import BlockBody, BlockEditor, BlockPanel, CapacityInput, StatusPanel


@pytest.mark.asyncio
async def test_blocks_rendered_on_mount(make_app):
    """Test one panel is shown per block."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        screen = app.screen

        assert isinstance(screen, ReflowScreen)
        assert len(screen.query(BlockPanel)) == 2
        assert len(screen.query(BlockBody)) == 2
        assert screen.query_one("#source-text", TextArea).text == "alpha beta gamma delta"


@pytest.mark.asyncio
async def test_edit_button_opens_editor(make_app, engine):
    """Test Edit swaps the body for a focused editor seeded with the block text."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()

        await pilot.click("#edit-0")
        await pilot.pause()

        editor = app.screen.query_one("#block-editor-0", BlockEditor)
        assert editor.text == "alpha beta\ngamma"
        assert editor.has_focus
        assert editor.editor_has_focus
        assert editor.styles.border.top[0] == "heavy"
        assert engine.state == EngineState.EDITING
        assert str(app.screen.query_one("#edit-0").label) == "Save"


@pytest.mark.asyncio
async def test_save_commits_and_reflows(make_app, engine):
    """Test typed text is merged into the stream and pushed into later blocks."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        await pilot.click("#edit-0")
        await pilot.pause()

        for key in ["n", "e", "w", "space"]:
            await pilot.press(key)
        await pilot.pause()

        assert engine.session.draft == "new alpha beta\ngamma"
        assert engine.block_texts() == ["alpha beta\ngamma", "delta"]

        app.screen.action_save_edit()
        await pilot.pause()

        assert engine.session is None
        assert engine.block_texts() == ["new alpha\nbeta gamma", "delta"]
        assert app.screen.query_one("#source-text", TextArea).text == "new alpha beta gamma delta"
        assert len(app.screen.query(BlockEditor)) == 0


@pytest.mark.asyncio
async def test_idle_period_commits(make_app, engine):
    """Test an edit commits by itself once typing stops."""
    app = make_app(commit_delay=0.05)

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        await pilot.click("#edit-0")
        await pilot.pause()

        await pilot.press("x")
        await pilot.pause(0.3)

        assert engine.session is None
        assert engine.text == "xalpha beta gamma delta"


@pytest.mark.asyncio
async def test_discard_keeps_blocks(make_app, engine):
    """Test discarding an edit leaves the blocks untouched."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        await pilot.click("#edit-1")
        await pilot.pause()

        await pilot.press("x")
        await pilot.pause()
        await app.screen.action_discard_edit()
        await pilot.pause()

        assert engine.session is None
        assert engine.block_texts() == ["alpha beta\ngamma", "delta"]
        assert not app.screen.debouncer.pending
        assert len(app.screen.query(BlockEditor)) == 0


@pytest.mark.asyncio
async def test_copy_keeps_stored_lines(make_app, clipboard):
    """Test Copy hands over the block as displayed, which is the stored block."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()

        await pilot.click("#copy-0")
        await pilot.pause()

        assert clipboard.written == ["alpha beta\ngamma"]
        assert app.screen.query_one("#block-body-0", BlockBody).exact_text() == "alpha beta\ngamma"
        assert app.screen.query_one(StatusPanel).note == "Copied block 1"


@pytest.mark.asyncio
async def test_copy_respects_capacity_in_wide_layout(make_app):
    """Test copied lines never exceed the line or block capacity."""
    config = CapacityConfig(line_capacity=60, block_capacity=2)
    engine = ReflowEngine(config, " ".join(f"word{i:02d}" for i in range(60)))
    app = make_app(screen_engine=engine, block_width=100)

    async with app.run_test(size=(160, 50)) as pilot:
        await pilot.pause()

        copied = app.screen.query_one("#block-0", BlockPanel).copy_text()
        lines = copied.split("\n")

        assert all(len(line) <= config.line_capacity for line in lines)
        assert len(lines) <= config.block_capacity
        assert copied == engine.block_texts()[0]


@pytest.mark.asyncio
async def test_body_width_follows_line_capacity(make_app, engine):
    """Test the body leaves one cell per character plus the sentinel cell."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        body = app.screen.query_one("#block-body-0", BlockBody)

        assert body.metrics.content_width == engine.config.line_capacity + 1
        assert body.size.width == body.metrics.content_width


@pytest.mark.asyncio
async def test_invalid_capacity_restores_previous_value(make_app, engine):
    """Test non-numeric capacity input is rejected without reflowing."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        capacity = app.screen.query_one("#line-capacity", CapacityInput)
        capacity.focus()
        capacity.value = "abc"

        await pilot.press("enter")
        await pilot.pause()

        assert capacity.value == "10"
        assert engine.config.line_capacity == 10


@pytest.mark.asyncio
async def test_capacity_change_reflows(make_app, engine):
    """Test a new line capacity reflows the blocks."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        capacity = app.screen.query_one("#line-capacity", CapacityInput)
        capacity.focus()
        capacity.value = "12"

        await pilot.press("enter")
        await pilot.pause()

        assert engine.config.line_capacity == 12
        assert engine.block_texts() == ["alpha beta\ngamma delta"]
        assert len(app.screen.query(BlockPanel)) == 1


@pytest.mark.asyncio
async def test_capacity_input_shows_clamped_value(make_app, engine):
    """Test an out-of-range capacity is clamped and the clamped value displayed."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        capacity = app.screen.query_one("#line-capacity", CapacityInput)
        capacity.focus()
        capacity.value = "500"

        await pilot.press("enter")
        await pilot.pause()

        assert engine.config.line_capacity == 120
        assert capacity.value == "120"


@pytest.mark.asyncio
async def test_typing_source_text_reflows(make_app, engine):
    """Test edits to the source area repartition the whole text."""
    app = make_app()

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()
        app.screen.query_one("#source-text", TextArea).focus()

        for key in ["z", "e", "r", "o", "space"]:
            await pilot.press(key)
        await pilot.pause()

        assert engine.block_texts() == ["zero alpha\nbeta gamma", "delta"]
        assert len(app.screen.query(BlockPanel)) == 2


@pytest.mark.asyncio
async def test_blockwrap_app_shows_reflow_screen():
    """Test the app builds the engine from config and shows its blocks."""
    config = Config(capacity=CapacityConfig(line_capacity=10, block_capacity=2))
    app = BlockwrapApp(config=config, text="alpha beta gamma delta")

    async with app.run_test(size=(120, 50)) as pilot:
        await pilot.pause()

        assert isinstance(app.screen, ReflowScreen)
        assert app.engine.block_texts() == ["alpha beta\ngamma", "delta"]
        assert len(app.screen.query(BlockPanel)) == 2
