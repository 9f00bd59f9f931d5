"""Entry pages and character windows.

Entry pages slice the structured entry list by a 1-indexed page number. The
page number is echoed back as supplied, even when it lies outside the valid
range, so a caller can see which request produced an empty page.

Character windows slice the text rendering of a listing. Python strings are
indexed by code point, so a window can never end inside a multi-byte UTF-8
sequence; offsets and lengths reported back are code point counts as well.
"""
from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..config import DEFAULT_ENTRIES_PER_PAGE, MAX_ENTRIES_PER_PAGE
from ..types import CharPaginationState, Entry, PaginationState


def clamp_entries_per_page(value: Optional[int]) -> int:
    if value is None:
        return DEFAULT_ENTRIES_PER_PAGE
    return min(max(value, 1), MAX_ENTRIES_PER_PAGE)


def paginate_entries(
    entries: List[Entry],
    entries_per_page: Optional[int] = None,
    entry_page_number: Optional[int] = None,
) -> Tuple[List[Entry], PaginationState]:
    per_page = clamp_entries_per_page(entries_per_page)
    current_page = entry_page_number or 1
    total_entries = len(entries)
    total_pages = max(1, math.ceil(total_entries / per_page))
    if 1 <= current_page <= total_pages:
        start = (current_page - 1) * per_page
        page = entries[start : start + per_page]
    else:
        page = []
    state: PaginationState = {
        "totalEntries": total_entries,
        "entriesPerPage": per_page,
        "currentPage": current_page,
        "totalPages": total_pages,
        "hasMore": current_page < total_pages,
    }
    return page, state


def entry_page_hints(state: PaginationState, shown: int) -> List[str]:
    page, total = state["currentPage"], state["totalPages"]
    return [
        f"Page {page}/{total} (showing {shown} of {state['totalEntries']})",
        f"Next: entryPageNumber={page + 1}" if state["hasMore"] else "Final page",
    ]


def slice_text(text: str, char_offset: Optional[int], char_length: int) -> Tuple[str, CharPaginationState]:
    total_chars = len(text)
    offset = min(max(char_offset or 0, 0), total_chars)
    length = max(char_length, 1)
    window = text[offset : offset + length]
    end = offset + len(window)
    state: CharPaginationState = {
        "charOffset": offset,
        "charLength": len(window),
        "totalChars": total_chars,
        "hasMore": end < total_chars,
    }
    if state["hasMore"]:
        state["nextCharOffset"] = end
    return window, state


def char_window_hints(state: CharPaginationState) -> List[str]:
    if state["hasMore"]:
        return [
            f"Showing chars {state['charOffset']}-{state['charOffset'] + state['charLength']} of {state['totalChars']}",
            f"Next: charOffset={state['nextCharOffset']}",
        ]
    if state["charOffset"] > 0:
        return ["Final page: reached end of content"]
    return []
