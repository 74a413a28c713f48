"""
Pytest configuration and fixtures for test isolation.
"""
import logging

import pytest

from docbundle.config.environment import EnvironmentVariables


SEP = "<|RELATED_DOC_SEP-7f3a9c2e|>"


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running inside an empty working directory (no project config)
    2. Pointing HOME at a temporary directory (no user config)
    3. Removing docbundle environment variables
    """
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    home = tmp_path / "home"
    home.mkdir()

    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(home))
    for name in EnvironmentVariables.get_all_variables():
        monkeypatch.delenv(name, raising=False)

    yield workdir


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore root logger handlers replaced by CLI invocations."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def sep():
    """Delimiter token used across tests."""
    return SEP


@pytest.fixture
def bundle_file(tmp_path):
    """A two-variant bundle: original draft followed by a revision."""
    path = tmp_path / "post.md"
    path.write_text(
        "# Reactive Streams\n\nOriginal draft.\n"
        + SEP
        + "# Reactive Streams, Revisited\n\nRevised draft.\n",
        encoding="utf-8",
    )
    return path
