"""Advisory hint strings attached to listing results."""
from __future__ import annotations

from typing import List, Optional


def get_hints(status: str, entry_count: Optional[int] = None, size_limit: bool = False) -> List[str]:
    if status == "hasResults":
        hints = [
            "Next: search file contents for patterns, or narrow with pattern/extension filters.",
            "Drill deeper with depth=2 when needed.",
        ]
        if entry_count is not None and entry_count > 10:
            hints.append("Parallelize across directories.")
        return hints
    if status == "empty":
        return [
            "Empty/missing. Use hidden=true or check parent.",
            "Discover directories with directoriesOnly=true on the parent.",
        ]
    if size_limit and entry_count:
        return [
            f"Directory has {entry_count} entries. Use entriesPerPage/entryPageNumber or charLength.",
            "Sort by recent; scan page by page.",
        ]
    return ["Access failed; check the path or list the parent directory."]
