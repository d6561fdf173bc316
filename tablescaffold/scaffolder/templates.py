"""Jinja2 template rendering for table scaffolds.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``tablescaffold/scaffolder/templates/`` directory and renders them with the
scaffold context.  Supports single-file rendering for inline fragments,
unconditional file output for per-table artifacts and render-if-absent
output for shared files that are bootstrapped once.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from ..casing import camel_case, capital_case, kebab_case, pascal_case, snake_case
from ..errors import TemplateMissingError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for table scaffolding.

    Filters are registered on this instance's environment when it is built;
    nothing is added to a process-wide Jinja2 state, so two renderers never
    see each other's helpers.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["snake_case"] = snake_case
        self.env.filters["kebab_case"] = kebab_case
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["camel_case"] = camel_case
        self.env.filters["capital_case"] = capital_case

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"app/table/page.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Raises:
            TemplateMissingError: No template exists at *template_path*.
        """
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise TemplateMissingError(template_path) from exc
        return template.render(**context)

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Any existing file is overwritten.  Parent directories are created
        automatically.  Returns the output path.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        _write_file(out, content)
        return out

    def render_to_file_if_not_exists(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path | None:
        """Like :meth:`render_to_file` but leaves an existing file untouched.

        Returns the output path when the file was written, ``None`` otherwise.
        """
        out = Path(output_path)
        if out.exists():
            return None
        return self.render_to_file(template_path, out, context)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
