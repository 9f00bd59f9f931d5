"""Console rendering of listing results and the JSONL audit log."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from .config import DEFAULT_LOG_PATH
from .utils import safe_json

THEME = Theme(
    {
        "info": "cyan",
        "tool": "green",
        "warn": "yellow",
        "hint": "magenta",
        "error": "bold red",
        "entry.dir": "bold blue",
        "entry.link": "cyan",
        "entry.file": "default",
    }
)


@dataclass
class HumanEntry:
    title: Optional[str] = None
    body: Optional[str] = None
    variant: str = "info"


class Logger:
    """Writes human output for one tool and appends JSON records to a log file."""

    def __init__(
        self,
        tool: str,
        log_json_path: Optional[str] = None,
        enable_human_logs: bool = True,
        enable_file_logs: bool = True,
        pretty: bool = True,
    ) -> None:
        self.tool = tool
        self.log_path = Path(log_json_path or DEFAULT_LOG_PATH)
        self.enable_human_logs = enable_human_logs
        self.enable_file_logs = enable_file_logs
        self.pretty = pretty
        self.console = Console(theme=THEME, highlight=False) if pretty else None

    @contextmanager
    def status(self, message: str = "listing") -> Iterator[None]:
        if self.console is None or not self.enable_human_logs:
            yield
            return
        with self.console.status(message, spinner="dots"):
            yield

    def human(self, entry: HumanEntry) -> None:
        if not self.enable_human_logs:
            return
        title = entry.title or entry.variant
        if self.console is None:
            print(f"{title}: {entry.body}" if entry.body else title)
            return
        self.console.print(Text.assemble((f"[{entry.variant}] ", entry.variant), title))
        if entry.body:
            self.console.print(entry.body, markup=False)

    def listing(self, title: str, lines: list[tuple[str, str]]) -> None:
        """Print a titled block of ``(entry_type, line)`` pairs, styled per type."""
        if not self.enable_human_logs:
            return
        if self.console is None:
            self.human(HumanEntry(title=title, body="\n".join(line for _, line in lines), variant="tool"))
            return
        self.human(HumanEntry(title=title, variant="tool"))
        for kind, line in lines:
            self.console.print(Text(line, style=f"entry.{kind}"))

    def json(self, entry: Dict[str, Any]) -> None:
        if not self.enable_file_logs:
            return
        record = {"timestamp": datetime.now(timezone.utc).isoformat(), "tool": self.tool, **entry}
        try:
            with self.log_path.open("a", encoding="utf8") as fh:
                fh.write(safe_json(record) + "\n")
        except OSError as err:
            if self.console is not None:
                self.console.print(f"[warn] cannot write {self.log_path}: {err}", style="warn", markup=False)
