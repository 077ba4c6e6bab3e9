"""Shared utility functions for AuthCraft.

Provides foreground command execution, JSON loading, and Rich-based console
reporting.  Everything here is synchronous: the scaffolder runs a short,
linear sequence of dependent steps and never needs an event loop.
"""

from __future__ import annotations

import json
import os
import subprocess
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Run a command in the foreground with inherited stdio.

    The child's own progress output goes straight to the user's terminal;
    nothing is captured.

    Args:
        cmd: Command and arguments.
        cwd: Working directory for the child process.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        The child's exit status.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    completed = subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
        check=False,
    )
    return completed.returncode


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str) -> None:
    """Print the welcome banner shown at the start of every run."""
    console.print(
        Panel(
            f"[bold bright_blue]{title}[/bold bright_blue]\n{subtitle}",
            border_style="bright_blue",
            expand=False,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Path", style="dim", no_wrap=True)
    table.add_column("Result")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
