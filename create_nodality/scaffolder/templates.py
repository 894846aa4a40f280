"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads the Jinja2 templates shipped
in ``create_nodality/scaffolder/templates/`` and renders them with
project-specific context data.  HTML templates are autoescaped so the project
name cannot inject markup into the generated document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer loads ``.j2`` template files from a configurable template
    directory.  A template at ``src/app.js.j2`` produces the
    project file ``src/app.js``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(
                enabled_extensions=("html.j2",),
                default_for_string=False,
            ),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"src/app.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered content with surrounding whitespace removed.
        """
        template = self.env.get_template(template_path)
        return template.render(**context).strip()


def output_name(template_path: str) -> str:
    """Strip the ``.j2`` suffix: ``"src/app.js.j2"`` -> ``"src/app.js"``."""
    return template_path[: -len(".j2")] if template_path.endswith(".j2") else template_path
