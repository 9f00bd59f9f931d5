"""Shared helpers for tool implementations."""
from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..config import get_sandbox_root


@dataclass
class PathValidation:
    is_valid: bool
    sanitized_path: Optional[Path] = None
    error: Optional[str] = None


@dataclass
class ExecResult:
    success: bool
    stdout: str
    stderr: str
    code: Optional[int]


def workspace_root() -> Path:
    return get_sandbox_root() or Path.cwd().resolve()


def normalize_path(path: str) -> Path:
    return (workspace_root() / os.path.expanduser(path)).resolve()


def ensure_inside_workspace(abs_path: Path, must_exist: bool = True) -> None:
    root = workspace_root()
    try:
        target = abs_path.resolve(strict=must_exist)
    except FileNotFoundError:
        if must_exist:
            raise
        target = abs_path.parent.resolve()
    if root not in target.parents and target != root:
        raise ValueError("Path outside workspace")


def validate_path(raw_path: str) -> PathValidation:
    """Resolve a caller path and check that it names a directory inside the workspace."""
    if not raw_path or not raw_path.strip():
        return PathValidation(False, error="Path is required")
    abs_path = normalize_path(raw_path)
    try:
        ensure_inside_workspace(abs_path)
    except FileNotFoundError:
        return PathValidation(False, error=f"Path does not exist: {raw_path}")
    except (ValueError, OSError) as err:
        return PathValidation(False, error=f"{err}: {raw_path}")
    if not abs_path.is_dir():
        return PathValidation(False, error=f"Path is not a directory: {raw_path}")
    return PathValidation(True, sanitized_path=abs_path)


def safe_exec(
    command: str,
    args: List[str],
    cwd: Optional[Path] = None,
    env: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
    stdout_errors: str = "replace",
) -> ExecResult:
    """Run a command without a shell and capture its output; never raises for process failures.

    ``stdout_errors`` is the UTF-8 error handler for stdout. Callers that read
    file names back pass ``surrogateescape`` so undecodable names still round-trip
    to the filesystem; stderr is always decoded with ``replace``.
    """
    merged_env = {**os.environ, **env} if env else None
    try:
        proc = subprocess.run(
            [command, *args],
            cwd=str(cwd) if cwd else None,
            env=merged_env,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        return ExecResult(False, "", f"{command}: command not found", None)
    except subprocess.TimeoutExpired:
        return ExecResult(False, "", f"{command}: timed out after {timeout}s", None)
    return ExecResult(
        proc.returncode == 0,
        proc.stdout.decode("utf8", errors=stdout_errors),
        proc.stderr.decode("utf8", errors="replace"),
        proc.returncode,
    )
