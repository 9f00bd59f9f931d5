"""The two raw-entry sources: a single ``ls`` call, or a bounded walk."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..config import DEFAULT_DEPTH, DEFAULT_RECURSIVE_DEPTH, ls_timeout_seconds, walk_max_entries
from ..errors import command_execution_failed
from ..tools.shared import safe_exec
from ..types import Entry, ListingRequest
from .ls_command import LsCommandBuilder
from .parser import parse_ls_long_format, parse_ls_simple
from .walker import walk_directory


@dataclass
class RawListing:
    entries: List[Entry]
    warnings: List[str] = field(default_factory=list)


class ShallowLister:
    kind = "shallow"

    def list_raw(self, request: ListingRequest, path: Path) -> RawListing:
        command, args = LsCommandBuilder().from_request(request, str(path)).build()
        result = safe_exec(
            command,
            args,
            env={"LC_ALL": "C"},
            timeout=ls_timeout_seconds(),
            stdout_errors="surrogateescape",
        )
        if not result.success:
            raise command_execution_failed(command, result.stderr)
        if not result.stdout.strip():
            return RawListing([])
        if request.details:
            entries = parse_ls_long_format(result.stdout, request.show_file_last_modified)
        else:
            entries = parse_ls_simple(result.stdout, str(path), request.show_file_last_modified)
        return RawListing(entries)


class RecursiveLister:
    kind = "recursive"

    @staticmethod
    def max_depth(request: ListingRequest) -> int:
        if request.depth:
            return request.depth
        return DEFAULT_RECURSIVE_DEPTH if request.recursive else DEFAULT_DEPTH

    @staticmethod
    def max_entries(request: ListingRequest) -> int:
        if request.limit and request.limit > 0:
            return request.limit * 2
        return walk_max_entries()

    def list_raw(self, request: ListingRequest, path: Path) -> RawListing:
        max_entries = self.max_entries(request)
        entries, stats = walk_directory(
            str(path),
            self.max_depth(request),
            max_entries,
            hidden=request.hidden,
            show_modified=request.show_file_last_modified,
            details=request.details,
        )
        warnings: List[str] = []
        if stats.skipped:
            warnings.append(f"{stats.skipped} entries skipped due to permission or access errors")
        if stats.truncated:
            warnings.append(
                f"Traversal stopped after {max_entries} entries; results may be incomplete. "
                "Narrow pattern/extension or reduce depth."
            )
        return RawListing(entries, warnings)


Lister = Union[ShallowLister, RecursiveLister]


def select_lister(request: ListingRequest) -> Lister:
    return RecursiveLister() if request.wants_recursion else ShallowLister()
