"""Jinja2 rendering for console messages.

Project files themselves are copied verbatim and only receive literal
``{{placeholder}}`` substitution; Jinja2 is reserved for the text the
scaffolder prints (such as the success report), stored as ``.j2`` files in
the ``messages/`` directory next to this module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

_DEFAULT_MESSAGE_DIR = Path(__file__).parent / "messages"


class TemplateRenderer:
    """Renders Jinja2 message templates with a context dictionary."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_MESSAGE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a template file relative to the template directory."""
        template = self.env.get_template(template_path)
        return template.render(**context)
