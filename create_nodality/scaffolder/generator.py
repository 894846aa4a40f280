"""Main scaffolding emitter.

Renders the starter files of a Nodality project and writes them to disk.
Each file has a pure ``render_*`` function ``(ProjectSpec, Config) ->
FileArtifact`` so templates can be tested without touching the filesystem;
:class:`ProjectGenerator` writes the whole set in one staged step.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from ..config import Config
from ..models import FileArtifact, PathExistsError, ProjectSpec
from .manifest import build_manifest
from .templates import TemplateRenderer, output_name

SOURCE_DIR = "src"
MANIFEST_FILE = "package.json"

# The staging directory name never includes the project name.
STAGING_PREFIX = ".create-nodality-"

_INDEX_TEMPLATE = "index.html.j2"
_APP_TEMPLATE = "src/app.js.j2"
_WEBPACK_TEMPLATE = "webpack.config.js.j2"


# ---------------------------------------------------------------------------
# Template context
# ---------------------------------------------------------------------------


def build_context(spec: ProjectSpec, config: Config) -> dict[str, Any]:
    """Build the Jinja2 template context for *spec*."""
    return {
        "project_name": spec.name,
        "library_name": config.library_name,
        "library_title": config.library_name.capitalize(),
        "library_bundle_path": config.library_bundle_path,
        "library_import": config.library_import,
        "mount_selector": config.mount_selector,
        "mount_id": config.mount_id,
    }


# ---------------------------------------------------------------------------
# Artifact renderers
# ---------------------------------------------------------------------------


def _render_template(
    template_path: str,
    spec: ProjectSpec,
    config: Config | None,
    renderer: TemplateRenderer | None,
) -> FileArtifact:
    config = config or Config()
    renderer = renderer or TemplateRenderer()
    content = renderer.render(template_path, build_context(spec, config))
    return FileArtifact(relative_path=output_name(template_path), content=content)


def render_index_html(
    spec: ProjectSpec,
    config: Config | None = None,
    renderer: TemplateRenderer | None = None,
) -> FileArtifact:
    """``index.html``: import map, mount element and the app script."""
    return _render_template(_INDEX_TEMPLATE, spec, config, renderer)


def render_app_js(
    spec: ProjectSpec,
    config: Config | None = None,
    renderer: TemplateRenderer | None = None,
) -> FileArtifact:
    """``src/app.js``: the illustrative application stub."""
    return _render_template(_APP_TEMPLATE, spec, config, renderer)


def render_webpack_config(
    spec: ProjectSpec,
    config: Config | None = None,
    renderer: TemplateRenderer | None = None,
) -> FileArtifact:
    """``webpack.config.js``: bundles the library as an ES module."""
    return _render_template(_WEBPACK_TEMPLATE, spec, config, renderer)


def render_manifest(spec: ProjectSpec, config: Config | None = None) -> FileArtifact:
    """``package.json``: scripts and dependencies of the project."""
    manifest = build_manifest(spec.name, config)
    return FileArtifact(relative_path=MANIFEST_FILE, content=manifest.to_json())


def build_artifacts(
    spec: ProjectSpec,
    config: Config | None = None,
    renderer: TemplateRenderer | None = None,
) -> list[FileArtifact]:
    """Render every file of the project, in write order, without touching disk."""
    config = config or Config()
    renderer = renderer or TemplateRenderer()
    return [
        render_index_html(spec, config, renderer),
        render_app_js(spec, config, renderer),
        render_webpack_config(spec, config, renderer),
        render_manifest(spec, config),
    ]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes a new project directory.

    Files are written into a hidden staging directory next to the target and
    the staging directory is then renamed onto the target path, so a failure
    partway through never leaves a half-populated project behind.
    """

    def __init__(self, config: Config | None = None, renderer: TemplateRenderer | None = None) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()

    async def emit(self, spec: ProjectSpec) -> list[FileArtifact]:
        """Create ``spec.path`` with its ``src/`` directory and all starter files.

        Returns:
            The artifacts that were written.

        Raises:
            PathExistsError: If ``spec.path`` appeared after the collision check.
            OSError: If a directory or file could not be written.
        """
        artifacts = build_artifacts(spec, self.config, self.renderer)
        await asyncio.to_thread(_write_staged, spec, artifacts)
        return artifacts


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_staged(spec: ProjectSpec, artifacts: list[FileArtifact]) -> None:
    """Synchronous helper: write *artifacts* to a staging dir, then rename it into place."""
    parent = spec.path.parent
    staging = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, suffix=".staging", dir=parent))
    try:
        (staging / SOURCE_DIR).mkdir()
        for artifact in artifacts:
            _write_file(staging / artifact.relative_path, artifact.content)
        # mkdtemp creates 0700 directories; give the project normal permissions.
        _apply_default_dir_mode(staging)
        if os.path.lexists(spec.path):
            raise PathExistsError(spec.name, spec.path)
        os.rename(staging, spec.path)
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise


def _write_file(path: Path, content: str) -> None:
    """Create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _apply_default_dir_mode(path: Path) -> None:
    """Reset *path* to ``0o777`` minus the process umask."""
    umask = os.umask(0)
    os.umask(umask)
    path.chmod(0o777 & ~umask)
