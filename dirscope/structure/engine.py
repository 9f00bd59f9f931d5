"""Listing pipeline: lister -> filter -> sort -> limit -> summary -> paginate."""
from __future__ import annotations

from typing import List, Optional

from ..config import DEFAULT_ENTRIES_PER_PAGE, LARGE_LISTING_THRESHOLD, default_char_length
from ..errors import ERROR_CODES, ToolError, output_too_large, path_validation_failed
from ..hints import get_hints
from ..tools.shared import validate_path
from ..types import Entry, ListingRequest, Result
from .filters import apply_filters
from .listers import select_lister
from .pagination import char_window_hints, entry_page_hints, paginate_entries, slice_text
from .sorting import apply_limit, sort_entries
from .summary import render_structured, summarize


def view_structure(request: ListingRequest) -> Result:
    """Run one listing request and return a JSON-serializable result.

    Fatal failures (invalid path, ``ls`` failing, the strict overflow guard)
    become ``status="error"`` results, as does anything unexpected
    (``toolExecutionFailed``). Per-node access problems only show up as
    warnings.
    """
    try:
        validation = validate_path(request.path)
        if not validation.is_valid or validation.sanitized_path is None:
            raise path_validation_failed(validation.error or "Invalid path")

        lister = select_lister(request)
        raw = lister.list_raw(request, validation.sanitized_path)
        warnings = list(raw.warnings)
        if not raw.entries:
            return _respond(request, [], warnings)

        oversized = (
            lister.kind == "shallow"
            and len(raw.entries) > LARGE_LISTING_THRESHOLD
            and not request.wants_entry_pages
            and not request.wants_char_window
        )
        if oversized and request.strict_pagination:
            err = output_too_large(len(raw.entries), LARGE_LISTING_THRESHOLD)
            err.hints = get_hints("error", entry_count=len(raw.entries), size_limit=True)
            raise err

        entries = apply_filters(raw.entries, request)
        entries = sort_entries(entries, request.sort_by, request.reverse, request.show_file_last_modified)
        entries = apply_limit(entries, request.limit)
        if oversized and len(entries) > DEFAULT_ENTRIES_PER_PAGE:
            warnings.append(
                f"Directory has {len(raw.entries)} entries; showing {len(entries)} matches "
                f"in pages of {DEFAULT_ENTRIES_PER_PAGE}"
            )
        return _respond(request, entries, warnings)
    except ToolError as err:
        return _error_result(request, err)
    except OSError as err:
        return _error_result(request, ToolError(ERROR_CODES["TOOL_EXECUTION_FAILED"], str(err)))
    except Exception as err:
        return _error_result(
            request, ToolError(ERROR_CODES["TOOL_EXECUTION_FAILED"], f"{type(err).__name__}: {err}")
        )


def _respond(request: ListingRequest, entries: List[Entry], warnings: List[str]) -> Result:
    summary = summarize(entries) if request.summary else None
    if request.wants_char_window:
        return _char_result(request, entries, summary, warnings)
    return _entry_result(request, entries, summary, warnings)


def _entry_result(request: ListingRequest, entries: List[Entry], summary: Optional[str], warnings: List[str]) -> Result:
    page, state = paginate_entries(entries, request.entries_per_page, request.entry_page_number)
    status = "hasResults" if page else "empty"
    result: Result = {
        "status": status,
        "path": request.path,
        "entries": [entry.to_dict() for entry in page],
        "pagination": dict(state),
        "hints": [*get_hints(status, entry_count=len(entries)), *entry_page_hints(state, len(page))],
    }
    return _finish(request, result, summary, warnings)


def _char_result(request: ListingRequest, entries: List[Entry], summary: Optional[str], warnings: List[str]) -> Result:
    text = render_structured(entries)
    window, state = slice_text(text, request.char_offset, request.char_length or default_char_length())
    status = "hasResults" if window else "empty"
    result: Result = {
        "status": status,
        "path": request.path,
        "structuredOutput": window,
        "pagination": dict(state),
        "hints": [*get_hints(status, entry_count=len(entries)), *char_window_hints(state)],
    }
    return _finish(request, result, summary, warnings)


def _error_result(request: ListingRequest, err: ToolError) -> Result:
    hints = err.hints or get_hints("error")
    result: Result = {
        "status": "error",
        "path": request.path,
        "errorCode": err.error_code,
        "error": err.message,
        "hints": hints,
    }
    return _finish(request, result)


def _finish(
    request: ListingRequest,
    result: Result,
    summary: Optional[str] = None,
    warnings: Optional[List[str]] = None,
) -> Result:
    if summary:
        result["summary"] = summary
    if warnings:
        result["warnings"] = warnings
    if request.research_goal is not None:
        result["researchGoal"] = request.research_goal
    if request.reasoning is not None:
        result["reasoning"] = request.reasoning
    return result
