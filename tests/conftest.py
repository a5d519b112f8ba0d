"""Shared test fixtures for all test modules."""

from pathlib import Path

import pytest


SAMPLE_TEXTS = [
    "",
    "   \n\t  ",
    "alpha beta gamma delta",
    "supercalifragilisticexpialidocious",
    "one two three four five six seven eight nine ten",
    "  leading and trailing   whitespace\twith\n\nmixed   runs  ",
    "a bb ccc dddd eeeee ffffff ggggggg hhhhhhhh iiiiiiiii jjjjjjjjjj kkkkkkkkkkk",
    (
        "The quick brown fox jumps over the lazy dog while the cat watches "
        "from the windowsill and wonders why anyone would bother running at all "
        "when there is a perfectly good patch of sunlight to sleep in"
    ),
    "naïve café déjà vu 日本語のテキスト 🎉 emoji 𝓯𝓪𝓷𝓬𝔂 text",
    "ring\x07bell \x07 back\x08space end",
]


@pytest.fixture(params=SAMPLE_TEXTS, ids=lambda text: repr(text[:20]))
def sample_text(request):
    """Each sample text, including empty and whitespace-only input."""
    return request.param


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point Path.home() at a temporary directory and clear BLOCKWRAP_* overrides.

    Keeps config lookups and log files out of the real home directory.
    """
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: fake_home)
    for name in (
        "BLOCKWRAP_LINE_CAPACITY",
        "BLOCKWRAP_BLOCK_CAPACITY",
        "BLOCKWRAP_MODE",
        "BLOCKWRAP_COMMIT_DELAY",
        "BLOCKWRAP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return fake_home
