"""Parsers for ``ls -1`` and ``ls -l`` output."""
from __future__ import annotations

import os
import re
from datetime import datetime, timedelta
from typing import List, Optional

from ..types import Entry, EntryType
from ..utils import display_name, format_size, parse_size
from .probe import probe_entry

MONTHS = {name: index for index, name in enumerate(
    ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"], start=1
)}

LONG_LINE_RE = re.compile(
    r"^(?P<perms>[\w-]{10}[@+.]?)\s+\d+\s+(?P<owner>\S+)\s+(?P<group>\S+)\s+"
    r"(?P<size>[\d.,]+[KMGTP]?)\s+"
    r"(?P<date>[A-Z][a-z]{2}\s+\d{1,2}\s+(?:\d{1,2}:\d{2}|\d{4}))\s+"
    r"(?P<name>.+)$"
)


def parse_ls_timestamp(text: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Parse ``Jan 1 12:00`` or ``Jan 1 2023``.

    The time-of-day form omits the year: ls uses it for recent files, so it is
    the current year unless that lands more than a day in the future.
    """
    parts = text.split()
    if len(parts) != 3 or parts[0] not in MONTHS:
        return None
    month = MONTHS[parts[0]]
    try:
        day = int(parts[1])
        if ":" in parts[2]:
            hour, minute = (int(value) for value in parts[2].split(":", 1))
            now = now or datetime.now()
            stamp = datetime(now.year, month, day, hour, minute)
            if stamp - now > timedelta(days=1):
                stamp = stamp.replace(year=now.year - 1)
            return stamp
        return datetime(int(parts[2]), month, day)
    except ValueError:
        return None


def parse_ls_simple(output: str, base_path: str, show_modified: bool = False) -> List[Entry]:
    entries: List[Entry] = []
    for name in output.splitlines():
        if not name.strip() or name in {".", ".."}:
            continue
        try:
            entries.append(probe_entry(os.path.join(base_path, name), display_name(name), show_modified))
        except OSError:
            # Listed but gone or unreadable: keep the name, drop the metadata
            entries.append(Entry(name=display_name(name), type="file"))
    return entries


def parse_ls_long_format(output: str, show_modified: bool = False, now: Optional[datetime] = None) -> List[Entry]:
    entries: List[Entry] = []
    for line in output.splitlines():
        if not line.strip() or line.startswith("total "):
            continue
        match = LONG_LINE_RE.match(line)
        if not match:
            continue
        perms = match.group("perms")
        kind: EntryType = "dir" if perms[0] == "d" else "link" if perms[0] == "l" else "file"
        name = match.group("name")
        if kind == "link" and " -> " in name:
            name = name.split(" -> ", 1)[0]
        if name in {".", ".."}:
            continue
        name = display_name(name)
        size_bytes = parse_size(match.group("size")) if kind == "file" else None
        stamp = parse_ls_timestamp(match.group("date"), now) if show_modified else None
        entries.append(
            Entry(
                name=name,
                type=kind,
                size=format_size(size_bytes) if size_bytes is not None else None,
                modified=stamp.isoformat(timespec="seconds") if stamp else None,
                permissions=perms,
                size_bytes=size_bytes,
                mtime=stamp.timestamp() if stamp else None,
            )
        )
    return entries
