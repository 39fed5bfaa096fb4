"""Whole-site build pipeline.

:class:`SiteBuilder` wires the stages together: it loads the config folder,
parses the source folder, lets the caller derive extra documents (pagination
pages, feeds, tag indexes) from the loaded set, renders everything, and writes
the results to the output folder.

Typical usage:

>>> from pathlib import Path
>>> from pagesmith.site import SiteBuilder
>>> builder = SiteBuilder(
...     source_dir=Path("source"),
...     config_dir=Path("config"),
...     templates_dir=Path("templates"),
...     output_dir=Path("public"),
... )  # doctest: +SKIP
>>> written = builder.run()  # doctest: +SKIP
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from .config import Config, load_config
from .documents import ParseOptions, load_source_files
from .files import save_pages
from .generator import (
    TEMPLATE_EXTENSION,
    HtmlContentRenderer,
    JinjaTemplateRenderer,
    render_pages,
    render_rss,
)
from .helpers import DEFAULT_HELPERS

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .documents import Document
    from .documents.parser import BodyRenderer, FieldParser
    from .generator.context import Helper
    from .generator.page_renderer import FeedSerializer, TemplateRenderer

DEFAULT_SOURCE_EXTENSIONS = ("md", "html")

CollectionsHook = cabc.Callable[
    [list["Document"], Config], cabc.Iterable["Document"]
]

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Load, render, and write every page of a site."""

    def __init__(  # noqa: PLR0913 - mirrors the pipeline's pluggable tables
        self,
        *,
        source_dir: Path,
        config_dir: Path,
        templates_dir: Path,
        output_dir: Path,
        extensions: cabc.Sequence[str] = DEFAULT_SOURCE_EXTENSIONS,
        cut_tag: str | None = None,
        renderers: cabc.Mapping[str, BodyRenderer] | None = None,
        field_parsers: cabc.Mapping[str, FieldParser] | None = None,
        helpers: cabc.Mapping[str, Helper] | None = None,
        template_renderers: cabc.Mapping[str, TemplateRenderer] | None = None,
        feed_serializer: FeedSerializer = render_rss,
        collections: CollectionsHook | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        source_dir : Path
            Folder of source documents.
        config_dir : Path
            Folder holding ``base.yml`` and language configs.
        templates_dir : Path
            Folder of Jinja templates used by the default template renderer.
        output_dir : Path
            Folder receiving rendered pages.
        extensions : Sequence[str], optional
            Source file extensions to load.
        cut_tag : str, optional
            Marker splitting document excerpts from the rest of the content.
        renderers : Mapping[str, BodyRenderer], optional
            Body renderers by extension; defaults to markdown for ``md``.
        field_parsers : Mapping[str, FieldParser], optional
            Custom front matter field parsers.
        helpers : Mapping[str, Helper], optional
            Template helpers; defaults to :data:`pagesmith.helpers.DEFAULT_HELPERS`.
        template_renderers : Mapping[str, TemplateRenderer], optional
            Template engine table; defaults to Jinja templates in
            ``templates_dir``.
        feed_serializer : FeedSerializer, optional
            Serializer used for documents with the ``RSS`` layout.
        collections : CollectionsHook, optional
            Called with the loaded documents and config; the documents it
            returns are rendered in addition to the loaded ones.
        """
        self.source_dir = source_dir
        self.config_dir = config_dir
        self.output_dir = output_dir
        self.extensions = tuple(extensions)
        if renderers is None:
            renderers = {"md": HtmlContentRenderer()}
        self.parse_options = ParseOptions(
            renderers=renderers,
            field_parsers=field_parsers or {},
            cut_tag=cut_tag,
        )
        self.helpers = helpers if helpers is not None else DEFAULT_HELPERS
        self.template_renderers = template_renderers or {
            TEMPLATE_EXTENSION: JinjaTemplateRenderer(templates_dir)
        }
        self.feed_serializer = feed_serializer
        self.collections = collections

    def run(self) -> list[Path]:
        """Build the site and return the paths of the written pages.

        Raises
        ------
        SiteConfigError
            If a document cannot be rendered because it lacks a layout, or the
            config files are malformed.
        """
        config = load_config(self.config_dir)
        documents = load_source_files(
            self.source_dir, self.extensions, self.parse_options
        )
        if self.collections is not None:
            documents = [*documents, *self.collections(documents, config)]

        pages = render_pages(
            documents,
            config,
            self.helpers,
            self.template_renderers,
            self.feed_serializer,
        )
        written = save_pages(pages, self.output_dir)
        logger.info("Wrote %d pages to %s", len(written), self.output_dir)
        return written


__all__ = ["DEFAULT_SOURCE_EXTENSIONS", "SiteBuilder"]
