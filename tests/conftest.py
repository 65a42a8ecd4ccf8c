"""Shared fixtures for asset collection tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

MakeFile = Callable[[str, bytes | str], Path]


@pytest.fixture
def make_file(tmp_path: Path) -> MakeFile:
    """Create a file under tmp_path, including parent directories."""

    def _make(relative_path: str, content: bytes | str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _make
