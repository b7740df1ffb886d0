"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run every test from an empty temp directory with a clean environment."""
    monkeypatch.chdir(tmp_path)
    for var in ("DATAGEN_LOG_LEVEL", "DATAGEN_LOG_FILE", "DATAGEN_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def read_lines():
    """Return the lines of a text file without trailing newlines."""

    def _read(path: Path) -> list[str]:
        return path.read_text(encoding="utf-8").splitlines()

    return _read
