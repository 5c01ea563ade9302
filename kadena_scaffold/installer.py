"""Optional post-scaffold steps: git initialisation and dependency install.

Both steps run the external tool in the new project directory with its
output streamed straight to the terminal. A non-zero exit is fatal; there is
no retry and no timeout.
"""

from __future__ import annotations

from kadena_scaffold.errors import ErrorKind, ScaffoldError
from kadena_scaffold.models import ResolvedOptions
from kadena_scaffold.utils import has_tool, print_done, print_step, run_command


def detect_package_managers() -> tuple[bool, bool]:
    """Return ``(has_npm, has_yarn)`` for the current host."""
    return has_tool("npm"), has_tool("yarn")


async def _run_or_fail(cmd: list[str], resolved: ResolvedOptions, failure: str) -> None:
    try:
        returncode = await run_command(cmd, cwd=resolved.target_directory)
    except OSError as exc:
        raise ScaffoldError(ErrorKind.SUBPROCESS, f"{failure}: {exc}") from exc
    if returncode != 0:
        raise ScaffoldError(
            ErrorKind.SUBPROCESS,
            f"{failure}: `{' '.join(cmd)}` exited with status {returncode}",
        )


async def init_git(resolved: ResolvedOptions) -> None:
    """Run ``git init`` in the target directory."""
    print_step("Initialize git repository")
    await _run_or_fail(["git", "init"], resolved, "Failed to initialize git")
    print_done("Git repository initialized successfully")


async def install_dependencies(resolved: ResolvedOptions) -> bool:
    """Install dependencies with yarn (preferred) or npm.

    Returns:
        ``False`` if no package manager is available and nothing ran.
    """
    print_step("Install dependencies...")
    manager = resolved.package_manager
    if manager is None:
        print_done("No package manager found, skipped dependency install")
        return False
    await _run_or_fail([manager, "install"], resolved, "Failed to install dependencies")
    print_done("Dependencies installed successfully")
    return True
