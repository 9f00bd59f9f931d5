"""Entry filters shared by both listers."""
from __future__ import annotations

import fnmatch
import re
from typing import Callable, List

from ..types import Entry, ListingRequest

Matcher = Callable[[Entry], bool]


def compile_pattern(pattern: str) -> Matcher:
    """Build a name matcher from a shell glob.

    Globs follow ``fnmatch`` case-sensitively: ``*`` and ``?`` are wildcards,
    ``[ab]`` is a character class and everything else is literal. A pattern
    without wildcards is a substring test, and one that fails to compile
    degrades to a substring test on the raw text.
    """
    if "*" not in pattern and "?" not in pattern:
        return lambda entry: pattern in entry.name
    try:
        regex = re.compile(fnmatch.translate(pattern))
    except re.error:
        return lambda entry: pattern in entry.name
    return lambda entry: bool(regex.match(entry.leaf) or regex.match(entry.name))


def _extension_suffixes(request: ListingRequest) -> List[str]:
    values = list(request.extensions)
    if request.extension:
        values.append(request.extension)
    return [f".{value.lstrip('.')}" for value in values if value and value.lstrip(".")]


def build_predicates(request: ListingRequest) -> List[Matcher]:
    predicates: List[Matcher] = []
    if not request.hidden:
        predicates.append(lambda entry: not entry.leaf.startswith("."))
    if request.pattern:
        predicates.append(compile_pattern(request.pattern))
    suffixes = tuple(_extension_suffixes(request))
    if suffixes:
        predicates.append(lambda entry: entry.leaf.endswith(suffixes))
    if request.files_only:
        predicates.append(lambda entry: entry.type == "file")
    if request.directories_only:
        predicates.append(lambda entry: entry.type == "dir")
    return predicates


def apply_filters(entries: List[Entry], request: ListingRequest) -> List[Entry]:
    predicates = build_predicates(request)
    return [entry for entry in entries if all(check(entry) for check in predicates)]
