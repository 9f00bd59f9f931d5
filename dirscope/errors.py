"""Error codes and the exception carrying them out of the listing pipeline."""
from __future__ import annotations

from typing import List, Optional

ERROR_CODES = {
    "PATH_VALIDATION_FAILED": "pathValidationFailed",
    "COMMAND_EXECUTION_FAILED": "commandExecutionFailed",
    "OUTPUT_TOO_LARGE": "outputTooLarge",
    "TOOL_EXECUTION_FAILED": "toolExecutionFailed",
}


class ToolError(Exception):
    """A fatal, caller-visible failure of one listing request."""

    def __init__(self, error_code: str, message: str, hints: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.hints = list(hints or [])


def path_validation_failed(message: str) -> ToolError:
    return ToolError(ERROR_CODES["PATH_VALIDATION_FAILED"], message)


def command_execution_failed(command: str, stderr: str = "") -> ToolError:
    detail = stderr.strip()
    hints = [f"Error: {detail}"] if detail else [f"{command} command failed"]
    return ToolError(
        ERROR_CODES["COMMAND_EXECUTION_FAILED"],
        f"{command} failed: {detail}" if detail else f"{command} failed",
        hints,
    )


def output_too_large(entry_count: int, threshold: int) -> ToolError:
    return ToolError(
        ERROR_CODES["OUTPUT_TOO_LARGE"],
        f"Directory has {entry_count} entries (more than {threshold}); pagination parameters are required",
    )
