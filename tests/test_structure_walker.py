"""Tests for the bounded recursive walk."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirscope.structure.walker import walk_directory


@pytest.fixture
def tree(make_tree):
    return make_tree(
        {
            "a.txt": "a",
            "src/main.py": "print()",
            "src/pkg/mod.py": "x = 1",
            "src/pkg/deep/leaf.py": "",
            ".git/config": "[core]",
            "empty": None,
        }
    )


def names(entries):
    return [entry.name for entry in entries]


def test_emits_directories_and_descendants(tree: Path):
    entries, stats = walk_directory(str(tree), max_depth=5, max_entries=100)
    assert names(entries) == [
        "a.txt",
        "empty",
        "src",
        "src/main.py",
        "src/pkg",
        "src/pkg/deep",
        "src/pkg/mod.py",
        "src/pkg/deep/leaf.py",
    ]
    assert stats.skipped == 0
    assert stats.truncated is False


@pytest.mark.parametrize(
    "depth,present,absent",
    [
        (1, ["a.txt", "src"], ["src/main.py"]),
        (2, ["src/main.py", "src/pkg"], ["src/pkg/mod.py"]),
        (3, ["src/pkg/mod.py", "src/pkg/deep"], ["src/pkg/deep/leaf.py"]),
    ],
)
def test_depth_bound(tree: Path, depth, present, absent):
    entries, _ = walk_directory(str(tree), max_depth=depth, max_entries=100)
    found = names(entries)
    for name in present:
        assert name in found
    for name in absent:
        assert name not in found


def test_hidden_entries_are_not_descended(tree: Path):
    entries, _ = walk_directory(str(tree), max_depth=5, max_entries=100)
    assert not any(name.startswith(".git") for name in names(entries))
    with_hidden, _ = walk_directory(str(tree), max_depth=5, max_entries=100, hidden=True)
    assert ".git" in names(with_hidden)
    assert ".git/config" in names(with_hidden)


def test_max_entries_caps_traversal(tree: Path):
    entries, stats = walk_directory(str(tree), max_depth=5, max_entries=3)
    assert len(entries) == 3
    assert stats.truncated is True


def test_file_metadata(tree: Path):
    entries, _ = walk_directory(str(tree), max_depth=1, max_entries=100, show_modified=True, details=True)
    by_name = {entry.name: entry for entry in entries}
    assert by_name["a.txt"].size == "1.0B"
    assert by_name["a.txt"].modified is not None
    assert by_name["a.txt"].permissions.startswith("-")
    assert by_name["src"].size is None
    assert by_name["src"].permissions.startswith("d")


def test_symlinks_are_reported_not_followed(sandbox: Path):
    (sandbox / "real").mkdir()
    (sandbox / "real" / "inside.txt").write_text("x", encoding="utf8")
    os.symlink(sandbox / "real", sandbox / "alias")
    entries, _ = walk_directory(str(sandbox), max_depth=5, max_entries=100)
    by_name = {entry.name: entry for entry in entries}
    assert by_name["alias"].type == "link"
    assert "alias/inside.txt" not in by_name
    assert "real/inside.txt" in by_name


def test_unreadable_subtree_is_skipped(tree: Path, monkeypatch: pytest.MonkeyPatch):
    real_listdir = os.listdir

    def fake_listdir(path):
        if str(path).endswith(os.path.join("src", "pkg")):
            raise PermissionError("denied")
        return real_listdir(path)

    monkeypatch.setattr("dirscope.structure.walker.os.listdir", fake_listdir)
    entries, stats = walk_directory(str(tree), max_depth=5, max_entries=100)
    found = names(entries)
    assert "src/pkg" in found
    assert "src/pkg/mod.py" not in found
    assert "a.txt" in found
    assert stats.skipped == 1


def test_probe_failure_skips_one_node(tree: Path, monkeypatch: pytest.MonkeyPatch):
    real_lstat = os.lstat

    def fake_lstat(path, *args, **kwargs):
        if str(path).endswith("main.py"):
            raise FileNotFoundError(path)
        return real_lstat(path, *args, **kwargs)

    monkeypatch.setattr("dirscope.structure.probe.os.lstat", fake_lstat)
    entries, stats = walk_directory(str(tree), max_depth=5, max_entries=100)
    found = names(entries)
    assert "src/main.py" not in found
    assert "src/pkg/mod.py" in found
    assert stats.skipped == 1


def test_unreadable_root_returns_nothing(tree: Path, monkeypatch: pytest.MonkeyPatch):
    def fake_listdir(path):
        raise PermissionError("denied")

    monkeypatch.setattr("dirscope.structure.walker.os.listdir", fake_listdir)
    entries, stats = walk_directory(str(tree), max_depth=5, max_entries=100)
    assert entries == []
    assert stats.skipped == 1


def test_deep_tree_is_walked_without_recursion(deep_chain, sandbox: Path):
    deep_chain(1500, "n")
    entries, stats = walk_directory(str(sandbox), max_depth=5000, max_entries=10000)
    assert len(entries) == 1500
    assert entries[-1].name == "/".join(["n"] * 1500)
    assert stats.skipped == 0


def test_non_positive_depth_lists_nothing(tree: Path):
    entries, _ = walk_directory(str(tree), max_depth=0, max_entries=100)
    assert entries == []


def test_undecodable_names_are_probed_then_replaced(sandbox: Path):
    base = os.fsencode(sandbox)
    os.mkdir(os.path.join(base, b"d\xff"))
    with open(os.path.join(base, b"d\xff", b"f\xfe.txt"), "wb") as fh:
        fh.write(b"abc")
    entries, stats = walk_directory(str(sandbox), max_depth=2, max_entries=100)
    by_name = {entry.name: entry for entry in entries}
    assert by_name["d\ufffd"].type == "dir"
    assert by_name["d\ufffd/f\ufffd.txt"].size == "3.0B"
    assert stats.skipped == 0
