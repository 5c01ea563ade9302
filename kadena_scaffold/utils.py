"""Shared utility functions for the scaffolder.

Provides async command execution, non-clobbering file-system copies, literal
text substitution, host tool detection, and Rich-based console reporting.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously with the parent's stdout/stderr.

    Args:
        cmd: List of arguments; the first one is the executable.
        cwd: Working directory for the child process.

    Returns:
        The child's exit status.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


def has_tool(tool: str) -> bool:
    """Return ``True`` if *tool* is an executable on ``PATH``."""
    return shutil.which(tool) is not None


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def copy_tree_no_clobber(source: str | Path, destination: str | Path) -> list[Path]:
    """Recursively copy *source* into *destination*, skipping existing files.

    Directories are created as needed. A destination file that already exists
    is left untouched, whatever its content.

    Returns:
        The destination paths that were actually written.
    """
    src_root = Path(source)
    dst_root = Path(destination)
    if not src_root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {src_root}")
    dst_root.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for src in sorted(src_root.rglob("*")):
        target = dst_root / src.relative_to(src_root)
        if src.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            continue
        if target.exists():
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, target)
        written.append(target)
    return written


def copy_file(source: str | Path, destination: str | Path, *, clobber: bool = False) -> bool:
    """Copy a single file. Returns ``False`` if skipped because it exists."""
    target = Path(destination)
    if target.exists() and not clobber:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)
    return True


def replace_in_file(path: str | Path, replacements: dict[str, str]) -> int:
    """Replace every literal occurrence of each key with its value.

    Returns:
        Total number of occurrences replaced. The file is only rewritten when
        at least one occurrence was found.
    """
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")
    count = 0
    for token, value in replacements.items():
        count += text.count(token)
        text = text.replace(token, value)
    if count:
        file_path.write_text(text, encoding="utf-8")
    return count


def substitute_placeholders(template: str, values: dict[str, str]) -> str:
    """Replace every ``{{name}}`` token with ``values[name]``.

    Plain literal replacement: unknown tokens are left in place and no
    expressions are evaluated.
    """
    result = template
    for name, value in values.items():
        result = result.replace("{{" + name + "}}", value)
    return result


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print the start line of a pipeline step."""
    console.print(message)


def print_done(message: str) -> None:
    """Print a step completion line prefixed with a green ``DONE``."""
    console.print(f"[bold green]DONE[/bold green] {message}")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]ERROR[/bold red] {escape(message)}")


def print_panel(body: str, title: str, border_style: str = "bold green") -> None:
    """Print *body* inside a titled panel."""
    console.print()
    console.print(Panel(body, title=f"[bold]{title}[/bold]", border_style=border_style))
