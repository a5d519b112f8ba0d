"""CLI entry point for Blockwrap."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.rule import Rule
import structlog

from blockwrap import __version__
from blockwrap.config.loader import load_config
from blockwrap.models.config import CapacityConfig, Config
from blockwrap.reflow.engine import ReflowEngine
from blockwrap.utils.logging import configure_logging


logger = structlog.get_logger()
console = Console()


def read_source(source: Optional[Path]) -> str:
    """
    Read the text to split.

    Args:
        source: File path, or None / "-" for standard input

    Returns:
        Raw text (may be empty)

    Raises:
        click.ClickException: If the file cannot be read or is not UTF-8 text
    """
    try:
        if source is None or str(source) == "-":
            return sys.stdin.read()
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error("source_decode_error", source=str(source), error=str(e))
        raise click.ClickException(f"Cannot read {source}: not UTF-8 text ({e.reason} at byte {e.start})")
    except OSError as e:
        logger.error("source_read_error", source=str(source), error=str(e))
        raise click.ClickException(f"Cannot read {source}: {e}")


def load_settings(
    config_path: Optional[Path],
    line_capacity: Optional[int] = None,
    block_capacity: Optional[int] = None,
    mode: Optional[str] = None,
) -> Config:
    """
    Load configuration and apply command-line capacity overrides.

    Raises:
        click.ClickException: If the config file is invalid
    """
    try:
        config = load_config(config_path)
    except Exception as e:
        logger.error("config_validation_error", error=str(e))
        raise click.ClickException(f"Configuration validation failed:\n{e}")

    overrides = {
        key: value
        for key, value in (
            ("line_capacity", line_capacity),
            ("block_capacity", block_capacity),
            ("mode", mode),
        )
        if value is not None
    }
    if overrides:
        capacity = CapacityConfig(**{**config.capacity.model_dump(), **overrides})
        config = config.model_copy(update={"capacity": capacity})

    logger.info("config_loaded", **config.capacity.model_dump())
    return config


capacity_options = [
    click.option("--line-capacity", "-w", type=int, help="Characters per line (cells in height mode)"),
    click.option("--block-capacity", "-n", type=int, help="Lines per block"),
    click.option(
        "--mode",
        type=click.Choice(["lines", "height"]),
        help="Partition by line count or by measured height",
    ),
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Path to configuration file (default: ~/.config/blockwrap/config.yaml)",
    ),
]


def with_capacity_options(command):
    for option in reversed(capacity_options):
        command = option(command)
    return command


@click.group()
@click.version_option(version=__version__, prog_name="blockwrap")
def cli():
    """Blockwrap: split text into fixed-size blocks of wrapped lines for copying."""
    configure_logging()


@cli.command()
@click.argument("source", required=False, type=click.Path(allow_dash=True, path_type=Path))
@with_capacity_options
@click.option("--plain", is_flag=True, help="Print raw block text separated by blank lines")
def split(
    source: Optional[Path],
    line_capacity: Optional[int],
    block_capacity: Optional[int],
    mode: Optional[str],
    config_path: Optional[Path],
    plain: bool,
):
    """
    Split SOURCE (a file, or stdin) into blocks and print them.

    Examples:
        blockwrap split notes.txt
        blockwrap split notes.txt -w 40 -n 6
        cat notes.txt | blockwrap split --plain
    """
    config = load_settings(config_path, line_capacity, block_capacity, mode)

    text = read_source(source)

    engine = ReflowEngine(config.capacity, text)
    logger.info("split_command_completed", blocks=len(engine.blocks))

    if not engine.blocks:
        click.echo("No text to split.", err=True)
        return

    if plain:
        click.echo("\n\n".join(engine.block_texts()))
        return

    for index, block_text in enumerate(engine.block_texts(), start=1):
        console.print(Rule(f"Block {index}", align="left"))
        console.print(block_text, markup=False, highlight=False)


@cli.command()
@click.argument("source", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@with_capacity_options
def tui(
    source: Optional[Path],
    line_capacity: Optional[int],
    block_capacity: Optional[int],
    mode: Optional[str],
    config_path: Optional[Path],
):
    """
    Open the interactive editor, optionally pre-loaded with SOURCE.

    Examples:
        blockwrap tui
        blockwrap tui notes.txt --mode height
    """
    from blockwrap.tui.app import BlockwrapApp

    config = load_settings(config_path, line_capacity, block_capacity, mode)
    text = read_source(source) if source else ""

    logger.info("tui_command_started", source=str(source) if source else None)
    BlockwrapApp(config=config, text=text).run()


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
