"""Shared pytest fixtures for the clean-struct test suite.

Provides reusable fixtures for:
- Temporary project directories
- Rich consoles that record output to a string buffer
- Registry templates and ready-made run options
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Callable

import pytest
from rich.console import Console

from clean_struct.models import FrameworkTemplate, RunOptions
from clean_struct.registry import REACT_TEMPLATE


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty temporary directory standing in for the user's project root."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# Consoles
# ---------------------------------------------------------------------------

def make_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def record_console() -> Console:
    """A Rich console writing plain text into an in-memory buffer."""
    return make_console()


# ---------------------------------------------------------------------------
# Templates & options
# ---------------------------------------------------------------------------

@pytest.fixture
def react_template() -> FrameworkTemplate:
    return REACT_TEMPLATE


@pytest.fixture
def make_options() -> Callable[..., RunOptions]:
    """Factory for ``RunOptions`` with the react/src/ts defaults."""

    def _make(**overrides: Any) -> RunOptions:
        values: dict[str, Any] = {
            "framework": "react",
            "base_path": "src",
            "selected_folders": ["components", "pages"],
            "file_extension": "ts",
            "add_readme": True,
            "add_gitkeep": True,
        }
        values.update(overrides)
        return RunOptions(**values)

    return _make
