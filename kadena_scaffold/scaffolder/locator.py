"""Template lookup: map a platform to its template directory."""

from __future__ import annotations

import os
from pathlib import Path

from kadena_scaffold.errors import ErrorKind, ScaffoldError
from kadena_scaffold.models import Platform


def resolve_template_dir(platform: Platform, templates_root: str | Path) -> Path:
    """Compute the template directory for *platform*.

    The vanilla template sits directly under its platform directory; every
    other platform keeps its app under an ``app`` subdirectory next to a
    ``files`` directory of optional variants.
    """
    root = Path(templates_root)
    name = Platform(platform).value.lower()
    if platform == Platform.VANILLA:
        return root / name
    return root / name / "app"


def locate_template(platform: Platform, templates_root: str | Path) -> Path:
    """Resolve the template directory and check that it can be read.

    Raises:
        ScaffoldError: ``INVALID_TEMPLATE`` if the directory is missing or
            unreadable.
    """
    template_dir = resolve_template_dir(platform, templates_root)
    if not template_dir.is_dir() or not os.access(template_dir, os.R_OK):
        raise ScaffoldError(
            ErrorKind.INVALID_TEMPLATE,
            f"No readable template for platform {Platform(platform).value!r} at {template_dir}",
        )
    return template_dir.resolve()
