"""Configuration helpers and defaults."""
from __future__ import annotations

from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Entry pagination
DEFAULT_ENTRIES_PER_PAGE = 20
MAX_ENTRIES_PER_PAGE = 20

# Shallow listings above this many raw entries are never returned unpaginated
LARGE_LISTING_THRESHOLD = 100

# Recursive walk bounds
DEFAULT_DEPTH = 2
DEFAULT_RECURSIVE_DEPTH = 5
DEFAULT_WALK_MAX_ENTRIES = 10000

# Character windows (legacy text output)
DEFAULT_CHAR_LENGTH = 10000

DEFAULT_LOG_PATH = ".dirscope-log.jsonl"

# Track if we've loaded .env
_dotenv_loaded = False

# Sandbox root - when set, all listed paths must live under this directory
_sandbox_root: Optional[Path] = None


def set_sandbox_root(path: Optional[Path]) -> None:
    """Set the sandbox root directory. All listings will be restricted to this path."""
    global _sandbox_root
    _sandbox_root = path.resolve() if path else None


def get_sandbox_root() -> Optional[Path]:
    """Get the current sandbox root, or None if not sandboxed."""
    return _sandbox_root


def is_sandboxed() -> bool:
    """Check if sandbox mode is active."""
    return _sandbox_root is not None


def ensure_dotenv_loaded() -> None:
    """Load .env file from current directory if not already loaded."""
    global _dotenv_loaded
    if _dotenv_loaded:
        return

    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Also try parent directories up to home
        for parent in Path.cwd().parents:
            env_file = parent / ".env"
            if env_file.exists():
                load_dotenv(env_file)
                break
            if parent == Path.home():
                break

    _dotenv_loaded = True


def env_int(name: str, fallback: int) -> int:
    raw = getenv(name)
    if raw is None:
        return fallback
    try:
        value = int(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


def env_flag(name: str, fallback: bool = False) -> bool:
    raw = getenv(name)
    if raw is None:
        return fallback
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def walk_max_entries() -> int:
    return env_int("DIRSCOPE_WALK_MAX_ENTRIES", DEFAULT_WALK_MAX_ENTRIES)


def default_char_length() -> int:
    return env_int("DIRSCOPE_CHAR_LENGTH", DEFAULT_CHAR_LENGTH)


def strict_pagination_default() -> bool:
    """Whether oversized shallow listings are rejected instead of auto-paginated."""
    return env_flag("DIRSCOPE_STRICT_PAGINATION")


def ls_timeout_seconds() -> Optional[float]:
    timeout_ms = env_int("DIRSCOPE_LS_TIMEOUT_MS", 0)
    return timeout_ms / 1000 if timeout_ms else None
