"""Shared fixtures for presenter tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from rich.text import Text

from renderer import load_theme


@pytest.fixture
def theme():
    return load_theme()


@pytest.fixture
def write_doc(tmp_path: Path):
    """Write `content` to a document, optionally pinning its mtime."""

    def _write(content: str, name: str = "talk.md", mtime_ns: int | None = None) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        if mtime_ns is not None:
            os.utime(path, ns=(mtime_ns, mtime_ns))
        return str(path)

    return _write


def plain(frame: str) -> str:
    """Strip ANSI styling from a composed frame."""
    return Text.from_ansi(frame).plain
