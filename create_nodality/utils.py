"""Shared utility functions for create-nodality.

Provides async command execution with inherited terminal streams, duration
formatting, and Rich-based console reporting.  All user-facing output goes
through the two module-level consoles so tests can capture it.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

# Conventional shell exit status for "command not found".
COMMAND_NOT_FOUND = 127

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's stdin/stdout/stderr so the user sees live
    progress.  The command is never passed through a shell.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.

    Returns:
        The child's exit status, or ``COMMAND_NOT_FOUND`` if the program
        cannot be found (a warning naming it is printed).
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        print_warning(f"Command not found: {cmd[0]}")
        return COMMAND_NOT_FOUND

    return await process.wait()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

BANNER_STYLE = "bold color(37)"


def print_step(message: str) -> None:
    """Print a progress line announcing the next pipeline step."""
    console.print(f"[bold cyan]{escape(message)}[/bold cyan]", highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", highlight=False)


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True, highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message on stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]", soft_wrap=True, highlight=False)


def print_banner(message: str) -> None:
    """Print a prominent framed banner."""
    console.print()
    console.print(Panel(Text(message), style=BANNER_STYLE, expand=False))
    console.print()


def print_usage_hint(project_name: str, package_manager: str = "npm") -> None:
    """Print the commands available inside a freshly generated project."""
    rows = [
        (f"{package_manager} run build", "Rebuild library bundle"),
        (f"{package_manager} run dev", "Start dev server with live reload"),
        (f"{package_manager} start", "Serve project without watch"),
    ]
    width = max(len(command) for command, _ in rows) + 6
    console.print("\nUsage:\n")
    console.print(f"  cd {escape(project_name)}", highlight=False)
    for command, effect in rows:
        console.print(f"  {command.ljust(width)}[dim]# {effect}[/dim]", highlight=False)
