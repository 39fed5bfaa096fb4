"""Slice an ordered document collection into synthetic pagination pages."""

from __future__ import annotations

import collections.abc as cabc
import math
import typing as typ

from pagesmith.config.models import SiteConfigError
from pagesmith.paths import page_number_url

from .models import PaginationPage

if typ.TYPE_CHECKING:
    from .models import Document

REQUIRED_OPTIONS = ("source_path_prefix", "url_prefix", "documents_per_page", "layout")


def paginate(
    documents: cabc.Sequence[Document], options: cabc.Mapping[str, typ.Any]
) -> list[PaginationPage]:
    """Split ``documents`` into pages of ``documents_per_page`` entries.

    Parameters
    ----------
    documents : Sequence[Document]
        Already filtered and ordered documents.
    options : Mapping[str, Any]
        ``source_path_prefix``, ``url_prefix``, ``documents_per_page`` and
        ``layout`` are required. ``index`` (bool) gives the first page an
        explicit ``/index`` source path; it is required when
        ``source_path_prefix`` is the site root, where the bare prefix has no
        file name. ``extra`` is a mapping copied into every page with the
        lowest precedence.

    Returns
    -------
    list[PaginationPage]
        One page per ``ceil(len(documents) / documents_per_page)``; an empty
        input yields no pages.

    Raises
    ------
    SiteConfigError
        If a required option is missing, ``documents_per_page`` is not a
        positive integer, or a site-root prefix lacks ``index``.

    Examples
    --------
    >>> from pagesmith.documents import Document
    >>> docs = [Document(f"{n}.md", f"/{n}") for n in range(5)]
    >>> pages = paginate(
    ...     docs,
    ...     {"source_path_prefix": "blog", "url_prefix": "/blog",
    ...      "documents_per_page": 2, "layout": "index"},
    ... )
    >>> [page.url for page in pages]
    ['/blog', '/blog/page/2', '/blog/page/3']
    """
    for name in REQUIRED_OPTIONS:
        if options.get(name) in (None, ""):
            msg = f"'{name}' not specified for paginate()."
            raise SiteConfigError(msg)

    per_page = options["documents_per_page"]
    if isinstance(per_page, bool) or not isinstance(per_page, int) or per_page < 1:
        msg = f"'documents_per_page' must be a positive integer, got {per_page!r}."
        raise SiteConfigError(msg)

    source_path_prefix: str = options["source_path_prefix"]
    url_prefix: str = options["url_prefix"]
    index = bool(options.get("index", False))
    if not index and not source_path_prefix.strip("/"):
        msg = "'index' must be true when 'source_path_prefix' is the site root."
        raise SiteConfigError(msg)
    extra = dict(options.get("extra") or {})
    total = len(documents)
    total_pages = math.ceil(total / per_page)

    def _url(number: int) -> str:
        return page_number_url(url_prefix, number)

    pages: list[PaginationPage] = []
    for number in range(1, total_pages + 1):
        begin = (number - 1) * per_page
        pages.append(
            PaginationPage(
                source_path=page_number_url(source_path_prefix, number, index=index),
                url=_url(number),
                layout=options["layout"],
                fields=dict(extra),
                documents=tuple(documents[begin : begin + per_page]),
                documents_total=total,
                previous_url=_url(number - 1) if number > 1 else None,
                next_url=_url(number + 1) if number < total_pages else None,
            )
        )
    return pages


__all__ = ["REQUIRED_OPTIONS", "paginate"]
