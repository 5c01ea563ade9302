"""Scaffolder configuration.

Typed settings for locating the shipped templates and the directory new
projects are created in. Uses a Pydantic v2 model so values are validated at
construction time and can be overridden from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from kadena_scaffold.errors import ErrorKind, ScaffoldError

DEFAULT_TEMPLATES_ROOT = Path(__file__).parent / "templates"


class Settings(BaseModel):
    """Global scaffolder settings.

    Instances are typically created once by the CLI entry point and handed to
    ``create_project``.
    """

    templates_root: Path = Field(default=DEFAULT_TEMPLATES_ROOT)
    cwd: Path = Field(default_factory=Path.cwd, description="Parent of the new project directory")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def common_dir(self) -> Path:
        """Files shared by every platform template."""
        return self.templates_root / "common"

    @property
    def config_template_path(self) -> Path:
        """The ``kadena-config.js`` template with ``{{...}}`` placeholders."""
        return self.common_dir / "kadena-config.js"

    @property
    def pact_dir(self) -> Path:
        """Pact contract sources copied for ``deploy-own`` projects."""
        return self.common_dir / "pact"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional): KDA_TEMPLATES_DIR, KDA_CWD.
        """
        kwargs: dict[str, Path] = {}
        if os.environ.get("KDA_TEMPLATES_DIR"):
            kwargs["templates_root"] = Path(os.environ["KDA_TEMPLATES_DIR"])
        if os.environ.get("KDA_CWD"):
            kwargs["cwd"] = Path(os.environ["KDA_CWD"])
        return cls(**kwargs)

    def ensure_templates(self) -> None:
        """Raise ``ScaffoldError`` if the shared template files are missing."""
        if not self.config_template_path.is_file():
            raise ScaffoldError(
                ErrorKind.INVALID_TEMPLATE,
                f"Config template not found: {self.config_template_path}",
            )
