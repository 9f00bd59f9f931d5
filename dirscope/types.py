"""Typed structures used across dirscope."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Optional, TypedDict

EntryType = Literal["file", "dir", "link"]
SortKey = Literal["name", "size", "extension", "time"]
Status = Literal["hasResults", "empty", "error"]

SORT_KEYS = ("name", "size", "extension", "time")


class ToolDefinition(TypedDict):
    name: str
    description: str
    parameters: Dict[str, Any]


class ToolResult(TypedDict, total=False):
    id: str
    output: str
    error: bool


ToolHandler = Callable[[Dict[str, Any]], ToolResult]


@dataclass(frozen=True)
class Entry:
    """One filesystem node as reported to the caller."""

    name: str
    type: EntryType
    size: Optional[str] = None
    modified: Optional[str] = None
    permissions: Optional[str] = None
    size_bytes: Optional[int] = field(default=None, compare=False)
    mtime: Optional[float] = field(default=None, compare=False)

    @property
    def leaf(self) -> str:
        return self.name.rstrip("/").rsplit("/", 1)[-1]

    @property
    def extension(self) -> str:
        leaf = self.leaf
        return leaf.rsplit(".", 1)[1] if "." in leaf else ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "type": self.type}
        if self.size is not None:
            data["size"] = self.size
        if self.modified is not None:
            data["modified"] = self.modified
        if self.permissions is not None:
            data["permissions"] = self.permissions
        return data


@dataclass
class ListingRequest:
    path: str = "."
    depth: Optional[int] = None
    recursive: bool = False
    pattern: Optional[str] = None
    extension: Optional[str] = None
    extensions: List[str] = field(default_factory=list)
    files_only: bool = False
    directories_only: bool = False
    hidden: bool = False
    sort_by: Optional[SortKey] = None
    reverse: bool = False
    limit: Optional[int] = None
    entries_per_page: Optional[int] = None
    entry_page_number: Optional[int] = None
    char_offset: Optional[int] = None
    char_length: Optional[int] = None
    details: bool = False
    human_readable: bool = False
    show_file_last_modified: bool = False
    summary: bool = True
    strict_pagination: bool = False
    research_goal: Optional[str] = None
    reasoning: Optional[str] = None

    @property
    def wants_recursion(self) -> bool:
        return bool(self.depth) or self.recursive

    @property
    def wants_char_window(self) -> bool:
        return self.char_length is not None or self.char_offset is not None

    @property
    def wants_entry_pages(self) -> bool:
        return self.entries_per_page is not None or self.entry_page_number is not None


class PaginationState(TypedDict):
    totalEntries: int
    entriesPerPage: int
    currentPage: int
    totalPages: int
    hasMore: bool


class CharPaginationState(TypedDict, total=False):
    charOffset: int
    charLength: int
    totalChars: int
    hasMore: bool
    nextCharOffset: int


class Result(TypedDict, total=False):
    status: Status
    path: str
    entries: List[Dict[str, Any]]
    structuredOutput: str
    pagination: Dict[str, Any]
    summary: str
    hints: List[str]
    warnings: List[str]
    errorCode: str
    error: str
    researchGoal: str
    reasoning: str
