import io

import pytest
import structlog
from rich.console import Console


@pytest.fixture(autouse=True)
def reset_structlog():
    """Start and end every test with structlog unconfigured (the CLI binds it to its own streams)."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def console():
    """A rich Console writing to an in-memory buffer (no colours, no wrapping)."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run from an empty directory so no project `.env` or `report.txt` leaks in."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
