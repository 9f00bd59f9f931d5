"""General utilities shared across dirscope modules."""
from __future__ import annotations

import json
import re
from typing import Any

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]
_SIZE_MULTIPLIERS = {"": 1, "B": 1, "K": 1024, "M": 1024**2, "G": 1024**3, "T": 1024**4, "P": 1024**5}
_SIZE_RE = re.compile(r"^\s*([\d.,]+)\s*([KMGTP]?)(?:I?B)?\s*$", re.IGNORECASE)


def safe_json(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return "<unserializable>"


def format_size(num_bytes: int) -> str:
    """Render a byte count as ``1.5MB``-style text with one decimal."""
    size = float(max(num_bytes, 0))
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f}{SIZE_UNITS[unit]}"


def parse_size(text: str) -> int:
    """Parse ``1024``, ``1.5M`` (ls -h) or ``1.0KB`` back into bytes; 0 when unparsable."""
    match = _SIZE_RE.match(text or "")
    if not match:
        return 0
    number = match.group(1)
    unit = (match.group(2) or "").upper()
    try:
        value = float(number.replace(",", "."))
    except ValueError:
        return 0
    return int(round(value * _SIZE_MULTIPLIERS[unit]))


def display_name(name: str) -> str:
    """Turn an OS-level name into valid text; undecodable bytes become U+FFFD.

    Names from ``os.listdir`` (or ``ls`` output decoded with ``surrogateescape``)
    keep undecodable bytes as lone surrogates. Those still work for ``os.lstat``
    but cannot be encoded to UTF-8, so this is applied after probing.
    """
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
