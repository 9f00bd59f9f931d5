"""Argument builder for the shallow ``ls`` invocation."""
from __future__ import annotations

from typing import List, Optional, Tuple

from ..types import ListingRequest


class LsCommandBuilder:
    """Fluent builder producing ``(command, args)`` for ``ls``.

    Sorting is never delegated to ``ls``; the engine orders entries itself so
    both listers behave identically.
    """

    def __init__(self) -> None:
        self._detailed = False
        self._all = False
        self._human_readable = False
        self._path: Optional[str] = None

    def detailed(self) -> "LsCommandBuilder":
        self._detailed = True
        return self

    def all(self) -> "LsCommandBuilder":
        self._all = True
        return self

    def human_readable(self) -> "LsCommandBuilder":
        self._human_readable = True
        return self

    def path(self, path: str) -> "LsCommandBuilder":
        self._path = path
        return self

    def from_request(self, request: ListingRequest, path: Optional[str] = None) -> "LsCommandBuilder":
        if request.details:
            self.detailed()
        if request.hidden:
            self.all()
        if request.human_readable:
            self.human_readable()
        return self.path(path or request.path)

    def build(self) -> Tuple[str, List[str]]:
        args: List[str] = ["-l" if self._detailed else "-1"]
        if self._all:
            # -A: like -a but without "." and ".."
            args.append("-A")
        if self._human_readable and self._detailed:
            args.append("-h")
        if self._path:
            args.extend(["--", self._path])
        return "ls", args
