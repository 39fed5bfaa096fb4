"""RSS 2.0 serialization for pages whose layout is the feed layout."""

from __future__ import annotations

import datetime as dt
import typing as typ
from email.utils import format_datetime
from xml.etree.ElementTree import Element, SubElement, tostring

from pagesmith import helpers

if typ.TYPE_CHECKING:
    from pagesmith.documents import Document

    from .context import RenderContext

RSS_VERSION = "2.0"


def render_rss(context: RenderContext) -> str:
    """Serialize ``context["documents"]`` into an RSS 2.0 feed.

    The channel uses the ``title``, ``description`` and ``url`` site options.
    Item links are absolutized and root-relative links inside the content are
    rewritten so feed readers can follow them.

    Raises
    ------
    MissingOptionError
        If the site config lacks ``title`` or ``url``.
    """
    root = Element("rss", attrib={"version": RSS_VERSION})
    channel = SubElement(root, "channel")
    SubElement(channel, "title").text = str(helpers.option(context, "title"))
    SubElement(channel, "link").text = str(helpers.option(context, "url"))
    SubElement(channel, "description").text = str(
        _optional_option(context, "description") or ""
    )
    language = context.get("lang") or _optional_option(context, "lang")
    if language:
        SubElement(channel, "language").text = str(language)

    documents: typ.Iterable[Document] = context.get("documents") or ()
    for document in documents:
        _append_item(channel, context, document)

    return '<?xml version="1.0" encoding="UTF-8"?>\n' + tostring(
        root, encoding="unicode"
    )


def _append_item(channel: Element, context: RenderContext, document: Document) -> None:
    link = helpers.absolutize_url(context, document.url)
    item = SubElement(channel, "item")
    SubElement(item, "title").text = str(document.get("title", ""))
    SubElement(item, "link").text = link
    SubElement(item, "guid", attrib={"isPermaLink": "true"}).text = link
    SubElement(item, "description").text = str(
        helpers.absolutize_links(context, document.content)
    )
    published = _to_datetime(document.get("date"))
    if published is not None:
        SubElement(item, "pubDate").text = format_datetime(published)


def _optional_option(context: RenderContext, key: str) -> typ.Any:  # noqa: ANN401
    try:
        return helpers.option(context, key)
    except KeyError:
        return None


def _to_datetime(value: object) -> dt.datetime | None:
    """Normalize YAML dates, datetimes, and ISO strings to aware UTC datetimes."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime.combine(value, dt.time())
        case str() as text if text.strip():
            try:
                parsed = dt.datetime.fromisoformat(text.strip())
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = ["RSS_VERSION", "render_rss"]
