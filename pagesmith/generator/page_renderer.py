"""Render documents into output paths and final page content.

:func:`render_page` is the last pure step of the pipeline: it validates the
document, builds a :class:`~pagesmith.generator.context.RenderContext`, and
delegates to either the feed serializer or the template renderer chosen from
the caller's table. Writing the result is left to
:func:`pagesmith.files.save_pages`.

Example
-------
>>> from pagesmith.documents import Document
>>> from pagesmith.generator import render_page
>>> doc = Document("about.md", "/about", layout="page")
>>> page = render_page(doc, {}, {}, {"jinja": lambda name, ctx: name})
>>> page.output_path, page.content
('about.html', 'page.jinja')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from pagesmith._constants import DEFAULT_PAGE_EXTENSION, FEED_EXTENSION, FEED_LAYOUT
from pagesmith.config.models import SiteConfigError
from pagesmith.paths import get_extension, remove_extension

from .context import make_context
from .feed import render_rss

if typ.TYPE_CHECKING:
    from pagesmith.config import Config
    from pagesmith.documents import Document

    from .context import Helper, RenderContext

TemplateRenderer = cabc.Callable[[str, "RenderContext"], str]
FeedSerializer = cabc.Callable[["RenderContext"], str]


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """Rendered output ready to be written relative to the output folder."""

    output_path: str
    content: str


def render_page(
    document: Document,
    config: Config,
    helpers: cabc.Mapping[str, Helper],
    renderers: cabc.Mapping[str, TemplateRenderer],
    feed_serializer: FeedSerializer = render_rss,
) -> RenderedPage:
    """Render ``document`` with the template engine or feed serializer.

    Parameters
    ----------
    document : Document
        Document or pagination page; needs ``source_path`` and ``layout``.
    config : Config
        Loaded site config, exposed to templates as ``config``.
    helpers : Mapping[str, Helper]
        Helper functions bound to the render context.
    renderers : Mapping[str, TemplateRenderer]
        Template renderers keyed by template extension. Only the first entry
        is used.
    feed_serializer : FeedSerializer, optional
        Called instead of the template renderer for the ``RSS`` layout.

    Returns
    -------
    RenderedPage
        Output path (source path with the layout's or the default extension)
        and rendered content.

    Raises
    ------
    SiteConfigError
        If the document has no source path or layout, or no template renderer
        is configured.
    """
    if not document.source_path:
        msg = 'Source path not specified for a document. Add a "source_path" field.'
        raise SiteConfigError(msg)
    if not document.layout:
        msg = (
            f"Layout not specified for {document.source_path}. "
            'Add "layout" front matter field.'
        )
        raise SiteConfigError(msg)

    context = make_context(document, config, helpers)
    if document.layout == FEED_LAYOUT:
        content = feed_serializer(context)
        extension = FEED_EXTENSION
    else:
        template_extension, render = _first_renderer(renderers)
        content = render(f"{document.layout}.{template_extension}", context)
        extension = get_extension(document.layout) or DEFAULT_PAGE_EXTENSION

    return RenderedPage(
        output_path=f"{remove_extension(document.source_path)}.{extension}",
        content=content,
    )


def render_pages(
    documents: cabc.Iterable[Document],
    config: Config,
    helpers: cabc.Mapping[str, Helper],
    renderers: cabc.Mapping[str, TemplateRenderer],
    feed_serializer: FeedSerializer = render_rss,
) -> list[RenderedPage]:
    """Render every document in ``documents`` with :func:`render_page`."""
    return [
        render_page(document, config, helpers, renderers, feed_serializer)
        for document in documents
    ]


def _first_renderer(
    renderers: cabc.Mapping[str, TemplateRenderer],
) -> tuple[str, TemplateRenderer]:
    try:
        return next(iter(renderers.items()))
    except StopIteration:
        msg = "No template renderer configured."
        raise SiteConfigError(msg) from None


__all__ = ["RenderedPage", "render_page", "render_pages"]
