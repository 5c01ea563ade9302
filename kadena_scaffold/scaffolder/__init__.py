"""Template lookup, config generation and project materialization.

Quick usage::

    from kadena_scaffold.scaffolder import ProjectMaterializer, generate_config_object

    materializer = ProjectMaterializer(resolved, settings)
    await materializer.copy_template_files()
    await materializer.write_config_file(generate_config_object(resolved.options))
"""

from kadena_scaffold.scaffolder.config_gen import content_hash, generate_config_object
from kadena_scaffold.scaffolder.generator import ProjectMaterializer
from kadena_scaffold.scaffolder.locator import locate_template, resolve_template_dir
from kadena_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectMaterializer",
    "TemplateRenderer",
    "content_hash",
    "generate_config_object",
    "locate_template",
    "resolve_template_dir",
]
