"""Shared fixtures for pathglob tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def pattern_file(tmp_path: Path) -> Path:
    """Create a pattern file with comments and blank lines.

    Contents::

        # web pages
        *.{html,htm}

        **.css
    """
    path = tmp_path / "patterns.txt"
    path.write_text("# web pages\n*.{html,htm}\n\n**.css\n", encoding="utf-8")
    return path


@pytest.fixture
def bad_pattern_file(tmp_path: Path) -> Path:
    """Pattern file whose third line has an unterminated class."""
    path = tmp_path / "bad.txt"
    path.write_text("*.py\n# comment\n*[a-z\n", encoding="utf-8")
    return path
