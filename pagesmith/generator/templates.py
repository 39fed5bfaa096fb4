"""Jinja2 template renderer used as the pipeline's template engine."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .context import RenderContext

TEMPLATE_EXTENSION = "jinja"


class JinjaTemplateRenderer:
    """Render named templates from a folder with a render context.

    An instance is the value side of a template renderer table, for example
    ``{"jinja": JinjaTemplateRenderer(Path("templates"))}``.
    Only templates named ``.html`` or ``.xml`` are autoescaped, so layouts can
    emit rendered document bodies directly.
    """

    def __init__(self, templates_dir: Path) -> None:
        """Configure a Jinja environment rooted at ``templates_dir``.

        Parameters
        ----------
        templates_dir : Path
            Directory holding ``<layout>.jinja`` templates and their partials.
        """
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def __call__(self, template_name: str, context: RenderContext) -> str:
        """Render ``template_name`` with ``context``, ending with a newline."""
        html = self.env.get_template(template_name).render(context)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["TEMPLATE_EXTENSION", "JinjaTemplateRenderer"]
