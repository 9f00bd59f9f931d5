"""CLI entrypoint for dirscope."""

from __future__ import annotations

import argparse
import json
import sys
from os import chdir
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import ensure_dotenv_loaded, set_sandbox_root
from .logger import HumanEntry, Logger
from .structure import view_structure
from .structure.summary import render_entry
from .tools.local_view_structure import parse_request
from .types import SORT_KEYS, Entry, Result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="dirscope <path> [options]")
    parser.add_argument("path", nargs="?", default=".", help="Directory to list (default: .)")
    parser.add_argument("--depth", type=int, help="Walk recursively down to this many levels")
    parser.add_argument("-R", "--recursive", action="store_true", help="Walk recursively (default depth 5)")
    parser.add_argument("--pattern", help="Glob (* and ?) or substring to match names against")
    parser.add_argument("--extension", "-e", action="append", dest="extensions", help="Keep names ending in .EXT (repeatable)")
    type_group = parser.add_mutually_exclusive_group()
    type_group.add_argument("--files-only", action="store_true", help="Only regular files")
    type_group.add_argument("--dirs-only", action="store_true", help="Only directories")
    parser.add_argument("-a", "--hidden", action="store_true", help="Include dot-files")
    parser.add_argument("--sort-by", choices=list(SORT_KEYS), help="Sort key (default: time, or name without --modified)")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order")
    parser.add_argument("--limit", type=int, help="Keep only the first N sorted entries")
    parser.add_argument("--per-page", type=int, dest="entries_per_page", help="Entries per page (1-20)")
    parser.add_argument("--page", type=int, dest="entry_page_number", help="1-indexed entry page")
    parser.add_argument("--char-offset", type=int, help="Character window offset (text output)")
    parser.add_argument("--char-length", type=int, help="Character window length (text output)")
    parser.add_argument("-l", "--details", action="store_true", help="Long listing with permissions")
    parser.add_argument("-H", "--human-readable", action="store_true", help="Human-readable sizes in long listings")
    parser.add_argument("-m", "--modified", action="store_true", help="Collect modification times")
    parser.add_argument("--no-summary", action="store_true", help="Omit the summary line")
    parser.add_argument("--strict", action="store_true", help="Reject large unpaginated listings")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON result")
    parser.add_argument("--log-json", dest="log_json", help="Write JSON logs to file (default: .dirscope-log.jsonl)")
    parser.add_argument("--no-log-json", action="store_true", help="Disable JSONL logging")
    parser.add_argument("--quiet", action="store_true", help="Suppress human-readable output")
    parser.add_argument("--pretty", action="store_true", help="Enable color human output")
    parser.add_argument(
        "--sandbox",
        nargs="?",
        const=".",
        help="Restrict listings to this directory (default: current directory)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    # Load .env early before parsing args
    ensure_dotenv_loaded()
    return build_parser().parse_args(argv)


def to_tool_args(parsed: argparse.Namespace) -> Dict[str, Any]:
    args: Dict[str, Any] = {
        "path": parsed.path,
        "recursive": parsed.recursive,
        "filesOnly": parsed.files_only,
        "directoriesOnly": parsed.dirs_only,
        "hidden": parsed.hidden,
        "reverse": parsed.reverse,
        "details": parsed.details,
        "humanReadable": parsed.human_readable,
        "showFileLastModified": parsed.modified,
        "summary": not parsed.no_summary,
    }
    optional = {
        "depth": parsed.depth,
        "pattern": parsed.pattern,
        "extensions": parsed.extensions,
        "sortBy": parsed.sort_by,
        "limit": parsed.limit,
        "entriesPerPage": parsed.entries_per_page,
        "entryPageNumber": parsed.entry_page_number,
        "charOffset": parsed.char_offset,
        "charLength": parsed.char_length,
    }
    args.update({key: value for key, value in optional.items() if value is not None})
    if parsed.strict:
        args["strictPagination"] = True
    return args


def render_result(logger: Logger, result: Result) -> None:
    if result["status"] == "error":
        logger.human(HumanEntry(title=result.get("errorCode", "error"), body=result.get("error"), variant="error"))
    elif "structuredOutput" in result:
        logger.human(HumanEntry(title=result.get("summary", result["status"]), body=result["structuredOutput"], variant="tool"))
    else:
        lines = [(entry["type"], render_entry(Entry(**entry))) for entry in result.get("entries", [])]
        logger.listing(result.get("summary", result["status"]), lines)
    for warning in result.get("warnings", []):
        logger.human(HumanEntry(title=warning, variant="warn"))
    for hint in result.get("hints", []):
        logger.human(HumanEntry(title=hint, variant="hint"))


def main(argv: Optional[List[str]] = None) -> int:
    parsed = parse_args(argv)

    if parsed.sandbox:
        sandbox_path = Path(parsed.sandbox).resolve()
        set_sandbox_root(sandbox_path)
        chdir(sandbox_path)

    logger = Logger(
        tool="local_view_structure",
        log_json_path=parsed.log_json,
        enable_human_logs=not parsed.quiet and not parsed.json,
        enable_file_logs=not parsed.no_log_json,
        pretty=parsed.pretty,
    )
    tool_args = to_tool_args(parsed)
    request = parse_request(tool_args)
    with logger.status(f"listing {parsed.path}"):
        result = view_structure(request)
    logger.json({"type": "request", "args": tool_args})
    logger.json({"type": "result", "status": result["status"], "errorCode": result.get("errorCode")})

    if parsed.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        render_result(logger, result)
    return 1 if result["status"] == "error" else 0


if __name__ == "__main__":
    sys.exit(main())
