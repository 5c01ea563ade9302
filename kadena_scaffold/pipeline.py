"""Project-creation orchestrator.

Runs the scaffolding steps strictly in order:

1. Locate the platform template (fatal: exits the process on failure).
2. Build the ``ResolvedOptions`` context.
3. Copy the template files.
4. Write ``kadena-config.js``.
5. Copy the Pact contracts (``deploy-own`` only).
6. ``git init`` (if requested).
7. Install dependencies (if requested).
8. Print the success report.

A failing step aborts the rest. Nothing is rolled back, so a partially created
project directory stays on disk.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.markup import escape

from kadena_scaffold.config import Settings
from kadena_scaffold.errors import ErrorKind, ScaffoldError
from kadena_scaffold.installer import detect_package_managers, init_git, install_dependencies
from kadena_scaffold.models import ContractMode, CreationOptions, ResolvedOptions
from kadena_scaffold.scaffolder.config_gen import generate_config_object
from kadena_scaffold.scaffolder.generator import ProjectMaterializer
from kadena_scaffold.scaffolder.locator import locate_template
from kadena_scaffold.scaffolder.templates import TemplateRenderer
from kadena_scaffold.utils import print_error, print_panel


def resolve_options(
    options: CreationOptions, template_dir: Path, settings: Settings
) -> ResolvedOptions:
    """Attach absolute paths and host tool availability to *options*."""
    has_npm, has_yarn = detect_package_managers()
    return ResolvedOptions(
        options=options,
        template_directory=template_dir,
        target_directory=(settings.cwd / options.project_dir).resolve(),
        has_npm=has_npm,
        has_yarn=has_yarn,
    )


def _locate_or_exit(options: CreationOptions, settings: Settings) -> Path:
    try:
        template_dir = locate_template(options.platform, settings.templates_root)
        settings.ensure_templates()
    except ScaffoldError as exc:
        if exc.kind is not ErrorKind.INVALID_TEMPLATE:
            raise
        print_error("Invalid template name")
        sys.exit(1)
    return template_dir


async def create_project(
    options: CreationOptions,
    settings: Optional[Settings] = None,
    *,
    now: Optional[datetime] = None,
) -> ResolvedOptions:
    """Create a new project from *options*.

    Args:
        options: The user's choices.
        settings: Template and working-directory locations. Defaults to
            ``Settings.from_env()``.
        now: Clock override for the contract-name hash.

    Returns:
        The resolved context the project was created with.

    Raises:
        SystemExit: If the platform template cannot be read.
        ScaffoldError: If any later step fails.
    """
    settings = settings or Settings.from_env()

    template_dir = _locate_or_exit(options, settings)
    resolved = resolve_options(options, template_dir, settings)
    materializer = ProjectMaterializer(resolved, settings)

    await materializer.copy_template_files()

    config = generate_config_object(options, now=now)
    config_path = await materializer.write_config_file(config)

    if options.contract == ContractMode.DEPLOY_OWN:
        await materializer.copy_pact_files()

    if options.git:
        await init_git(resolved)

    if options.install:
        await install_dependencies(resolved)

    _print_success(resolved, config_path)
    return resolved


def _print_success(resolved: ResolvedOptions, config_path: Path) -> None:
    """Print the final success panel with next-step commands."""
    body = TemplateRenderer().render(
        "success.txt.j2",
        {
            "target_directory": escape(str(resolved.target_directory)),
            "run_command": resolved.run_command,
            "project_dir": escape(resolved.options.project_dir),
            "config_file": escape(config_path.relative_to(resolved.target_directory).as_posix()),
        },
    )
    print_panel(body, title="Success")
