"""Aggregate counts and the text rendering of a listing."""
from __future__ import annotations

from typing import List

from ..types import Entry
from ..utils import format_size

TYPE_TAGS = {"file": "[FILE]", "dir": "[DIR]", "link": "[LINK]"}


def summarize(entries: List[Entry]) -> str:
    files = [entry for entry in entries if entry.type == "file"]
    dirs = sum(1 for entry in entries if entry.type == "dir")
    total_bytes = sum(entry.size_bytes or 0 for entry in files)
    return f"{len(entries)} entries ({len(files)} files, {dirs} dirs, {format_size(total_bytes)})"


def render_entry(entry: Entry) -> str:
    name = f"{entry.name}/" if entry.type == "dir" else entry.name
    line = f"{TYPE_TAGS[entry.type]} {name}"
    if entry.size is not None:
        line += f" ({entry.size})"
    if entry.modified is not None:
        line += f" {entry.modified}"
    return line


def render_structured(entries: List[Entry]) -> str:
    return "\n".join(render_entry(entry) for entry in entries)
