"""Depth- and count-bounded breadth-first directory walk."""
from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Tuple

from ..types import Entry
from ..utils import display_name
from .probe import probe_entry


@dataclass
class WalkStats:
    skipped: int = 0
    truncated: bool = False


def walk_directory(
    base_path: str,
    max_depth: int,
    max_entries: int,
    hidden: bool = False,
    show_modified: bool = False,
    details: bool = False,
) -> tuple[List[Entry], WalkStats]:
    """Collect entries under ``base_path``, directories and their descendants alike.

    Directories are visited level by level from a queue, so tree depth never
    grows the call stack. Each directory's children are probed and emitted
    before any of them is listed. Unreadable nodes are skipped and counted in
    the stats; the walk itself never raises for them.
    """
    entries: List[Entry] = []
    stats = WalkStats()
    # (filesystem path, display prefix, depth of the directory)
    pending: Deque[Tuple[str, str, int]] = deque([(base_path, "", 0)] if max_depth > 0 else [])

    while pending and not stats.truncated:
        current, rel_prefix, depth = pending.popleft()
        try:
            names = sorted(os.listdir(current))
        except OSError:
            stats.skipped += 1
            continue
        for name in names:
            if not hidden and name.startswith("."):
                continue
            if len(entries) >= max_entries:
                stats.truncated = True
                break
            full_path = os.path.join(current, name)
            rel = f"{rel_prefix}{display_name(name)}"
            try:
                entry = probe_entry(full_path, rel, show_modified, details)
            except OSError:
                stats.skipped += 1
                continue
            entries.append(entry)
            if entry.type == "dir" and depth + 1 < max_depth:
                pending.append((full_path, f"{rel}/", depth + 1))

    return entries, stats
