from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Dict

import pytest

from dirscope.config import set_sandbox_root
from dirscope.tools import discover_tools
from dirscope.types import ToolHandler


@pytest.fixture()
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    root_cwd = Path.cwd()
    original_env = dict(os.environ)
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(root_cwd)
        set_sandbox_root(None)
        shutil.rmtree(tmp_path, ignore_errors=True)
        os.environ.clear()
        os.environ.update(original_env)


@pytest.fixture(scope="session")
def tool_handlers() -> Dict[str, ToolHandler]:
    _, handlers = discover_tools()
    return handlers


@pytest.fixture
def make_tree(sandbox: Path):
    """Create files (str content) and directories (None) relative to the sandbox."""

    def _create(layout: Dict[str, object]) -> Path:
        for rel, content in layout.items():
            target = sandbox / rel
            if content is None:
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(str(content), encoding="utf8")
        return sandbox

    return _create


@pytest.fixture
def deep_chain(sandbox: Path):
    """Build a single chain of nested directories; removed bottom-up afterwards."""
    created = []

    def _create(levels: int, name: str = "d") -> Path:
        current = sandbox
        for _ in range(levels):
            current = current / name
            current.mkdir()
            created.append(current)
        return current

    yield _create
    for path in reversed(created):
        os.rmdir(path)
