"""create-nodality scaffolder -- renders and writes the starter project files.

Quick usage::

    from create_nodality.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    artifacts = await generator.emit(spec)
"""

from create_nodality.scaffolder.generator import (
    ProjectGenerator,
    build_artifacts,
    render_app_js,
    render_index_html,
    render_manifest,
    render_webpack_config,
)
from create_nodality.scaffolder.manifest import build_manifest
from create_nodality.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "TemplateRenderer",
    "build_artifacts",
    "build_manifest",
    "render_app_js",
    "render_index_html",
    "render_manifest",
    "render_webpack_config",
]
