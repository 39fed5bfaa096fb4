"""Render documents into final pages.

This subpackage builds per-page render contexts, dispatches to the template
engine or feed serializer, and ships the default body and template renderers.
"""

from .context import RenderContext, make_context
from .feed import render_rss
from .page_renderer import RenderedPage, render_page, render_pages
from .renderer import HtmlContentRenderer
from .templates import TEMPLATE_EXTENSION, JinjaTemplateRenderer

__all__ = [
    "TEMPLATE_EXTENSION",
    "HtmlContentRenderer",
    "JinjaTemplateRenderer",
    "RenderContext",
    "RenderedPage",
    "make_context",
    "render_page",
    "render_pages",
    "render_rss",
]
