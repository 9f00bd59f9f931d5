"""local_view_structure tool - bounded, paginated directory listing."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..config import MAX_ENTRIES_PER_PAGE, strict_pagination_default
from ..structure import view_structure
from ..types import SORT_KEYS, ListingRequest, ToolDefinition, ToolResult

TOOL_DEFINITION: ToolDefinition = {
    "name": "local_view_structure",
    "description": (
        "List a local directory: filter by pattern/extension/type, sort, limit, "
        "and page through entries (entriesPerPage/entryPageNumber) or a text rendering (charOffset/charLength)."
    ),
    "parameters": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "Directory to list, relative to the workspace."},
            "depth": {"type": "number", "description": "Walk recursively down to this many levels."},
            "recursive": {"type": "boolean", "description": "Walk recursively (default depth 5)."},
            "pattern": {"type": "string", "description": "Glob (* and ?) or substring matched against names."},
            "extension": {"type": "string", "description": "Only names ending in .<extension>."},
            "extensions": {"type": "array", "items": {"type": "string"}},
            "filesOnly": {"type": "boolean"},
            "directoriesOnly": {"type": "boolean"},
            "hidden": {"type": "boolean", "description": "Include dot-files."},
            "sortBy": {"type": "string", "enum": list(SORT_KEYS)},
            "reverse": {"type": "boolean"},
            "limit": {"type": "number", "description": "Keep only the first N sorted entries."},
            "entriesPerPage": {"type": "number", "minimum": 1, "maximum": MAX_ENTRIES_PER_PAGE},
            "entryPageNumber": {"type": "number"},
            "charOffset": {"type": "number"},
            "charLength": {"type": "number"},
            "details": {"type": "boolean", "description": "Long listing with permissions."},
            "humanReadable": {"type": "boolean"},
            "showFileLastModified": {"type": "boolean", "description": "Collect modification times (enables time sort)."},
            "summary": {"type": "boolean"},
            "strictPagination": {"type": "boolean", "description": "Reject large unpaginated listings instead of paging them."},
            "researchGoal": {"type": "string"},
            "reasoning": {"type": "string"},
        },
    },
}


def _int_arg(args: Dict[str, Any], key: str) -> Optional[int]:
    value = args.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def _str_arg(args: Dict[str, Any], key: str) -> Optional[str]:
    value = args.get(key)
    return value if isinstance(value, str) and value else None


def _str_list_arg(args: Dict[str, Any], key: str) -> List[str]:
    value = args.get(key)
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def parse_request(args: Dict[str, Any]) -> ListingRequest:
    sort_by = _str_arg(args, "sortBy")
    if sort_by is not None and sort_by not in SORT_KEYS:
        raise ValueError(f"'sortBy' must be one of {', '.join(SORT_KEYS)}")
    strict = args.get("strictPagination")
    return ListingRequest(
        path=_str_arg(args, "path") or ".",
        depth=_int_arg(args, "depth"),
        recursive=args.get("recursive") is True,
        pattern=_str_arg(args, "pattern"),
        extension=_str_arg(args, "extension"),
        extensions=_str_list_arg(args, "extensions"),
        files_only=args.get("filesOnly") is True,
        directories_only=args.get("directoriesOnly") is True,
        hidden=args.get("hidden") is True,
        sort_by=sort_by,  # type: ignore[arg-type]
        reverse=args.get("reverse") is True,
        limit=_int_arg(args, "limit"),
        entries_per_page=_int_arg(args, "entriesPerPage"),
        entry_page_number=_int_arg(args, "entryPageNumber"),
        char_offset=_int_arg(args, "charOffset"),
        char_length=_int_arg(args, "charLength"),
        details=args.get("details") is True,
        human_readable=args.get("humanReadable") is True,
        show_file_last_modified=args.get("showFileLastModified") is True,
        summary=args.get("summary") is not False,
        strict_pagination=strict if isinstance(strict, bool) else strict_pagination_default(),
        research_goal=_str_arg(args, "researchGoal"),
        reasoning=_str_arg(args, "reasoning"),
    )


def tool_handler(args: Dict) -> ToolResult:
    result = view_structure(parse_request(args))
    output = json.dumps(result, ensure_ascii=False)
    if result["status"] == "error":
        return {"id": "local_view_structure", "output": output, "error": True}
    return {"id": "local_view_structure", "output": output}
