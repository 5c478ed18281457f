"""Shared fixtures for requisite tests."""

import pytest

from requisite.config import configure


@pytest.fixture
def sample_file(tmp_path):
    """A regular file with some content."""
    path = tmp_path / "settings.json"
    path.write_text('{"retries": 3}', encoding="utf-8")
    return path


@pytest.fixture
def sample_dir(tmp_path):
    """An empty directory."""
    path = tmp_path / "workdir"
    path.mkdir()
    return path


@pytest.fixture
def missing_path(tmp_path):
    """A path inside tmp_path that does not exist."""
    return tmp_path / "does-not-exist.txt"


@pytest.fixture(autouse=True)
def default_config():
    """Restore the default configuration after every test."""
    previous = configure()
    yield
    configure(previous)
