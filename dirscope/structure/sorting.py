"""Entry ordering."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ..types import Entry, SortKey


def effective_sort_key(sort_by: Optional[SortKey], show_modified: bool) -> SortKey:
    """Time is the default; without collected mtimes it falls back to name."""
    key: SortKey = sort_by or "time"
    if key == "time" and not show_modified:
        return "name"
    return key


def _size_key(entry: Entry) -> Any:
    return (entry.size_bytes or 0) if entry.type == "file" else 0, entry.name


def _time_key(entry: Entry) -> Any:
    # Most recent first; entries without an mtime sink to the end
    return entry.mtime is None, -(entry.mtime or 0.0), entry.name


SORT_FUNCTIONS: Dict[str, Callable[[Entry], Any]] = {
    "name": lambda entry: entry.name,
    "size": _size_key,
    "extension": lambda entry: (entry.extension, entry.name),
    "time": _time_key,
}


def sort_entries(
    entries: List[Entry],
    sort_by: Optional[SortKey] = None,
    reverse: bool = False,
    show_modified: bool = False,
) -> List[Entry]:
    key = effective_sort_key(sort_by, show_modified)
    return sorted(entries, key=SORT_FUNCTIONS[key], reverse=reverse)


def apply_limit(entries: List[Entry], limit: Optional[int]) -> List[Entry]:
    if limit is not None and limit > 0:
        return entries[:limit]
    return entries
