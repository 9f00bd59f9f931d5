"""Symlink-aware metadata probe for a single path."""
from __future__ import annotations

import os
import stat
from datetime import datetime, timezone

from ..types import Entry, EntryType
from ..utils import format_size


def entry_type(mode: int) -> EntryType:
    if stat.S_ISLNK(mode):
        return "link"
    if stat.S_ISDIR(mode):
        return "dir"
    return "file"


def iso_mtime(mtime: float) -> str:
    return datetime.fromtimestamp(mtime, tz=timezone.utc).isoformat(timespec="seconds")


def probe_entry(full_path: str, display_name: str, show_modified: bool = False, details: bool = False) -> Entry:
    """Build an Entry from ``os.lstat``; raises OSError when the path cannot be probed."""
    info = os.lstat(full_path)
    kind = entry_type(info.st_mode)
    is_file = kind == "file"
    return Entry(
        name=display_name,
        type=kind,
        size=format_size(info.st_size) if is_file else None,
        modified=iso_mtime(info.st_mtime) if show_modified else None,
        permissions=stat.filemode(info.st_mode) if details else None,
        size_bytes=info.st_size if is_file else None,
        mtime=info.st_mtime if show_modified else None,
    )
