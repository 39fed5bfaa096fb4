"""Tests for building render contexts and rendering pages."""

from __future__ import annotations

import typing as typ

import pytest

from pagesmith.config import SiteConfigError
from pagesmith.documents import Document
from pagesmith.generator import RenderContext, make_context, render_page, render_pages

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture

CONFIG = {"base": {"title": "My blog", "url": "http://example.com"}}


def _echo_renderer(template: str, context: RenderContext) -> str:
    return f"{template}|{context['title']}"


def test_missing_layout_names_source_path() -> None:
    """Rendering without a layout is a configuration error for that document."""
    doc = Document.from_mapping({"source_path": "posts/foo.md", "title": "Foo"})

    with pytest.raises(SiteConfigError, match="posts/foo.md"):
        render_page(doc, CONFIG, {}, {"jinja": _echo_renderer})

    with_layout = Document.from_mapping({**doc.as_dict(), "layout": "post"})
    page = render_page(with_layout, CONFIG, {}, {"jinja": _echo_renderer})
    assert page.content == "post.jinja|Foo"


def test_missing_source_path_is_fatal() -> None:
    """Documents must carry a source path."""
    with pytest.raises(SiteConfigError, match="Source path"):
        render_page(
            Document("", "/", layout="page"), CONFIG, {}, {"jinja": _echo_renderer}
        )


def test_output_path_uses_layout_extension() -> None:
    """Layouts with an embedded extension choose the output extension."""
    fields = {"title": "x"}
    plain = Document("posts/foo.md", "/posts/foo", layout="post", fields=fields)
    sitemap = Document("sitemap.md", "/sitemap", layout="sitemap.xml", fields=fields)

    assert render_page(plain, CONFIG, {}, {"jinja": _echo_renderer}).output_path == (
        "posts/foo.html"
    )
    rendered = render_page(sitemap, CONFIG, {}, {"jinja": _echo_renderer})
    assert rendered.output_path == "sitemap.xml"
    assert rendered.content == "sitemap.xml.jinja|x"


def test_first_template_renderer_wins(mocker: MockerFixture) -> None:
    """Only the first renderer in the table is used."""
    first = mocker.Mock(return_value="first")
    second = mocker.Mock(return_value="second")
    doc = Document("a.md", "/a", layout="page")

    page = render_page(doc, CONFIG, {}, {"njk": first, "jinja": second})

    assert page.content == "first"
    first.assert_called_once()
    assert first.call_args.args[0] == "page.njk"
    second.assert_not_called()


def test_empty_renderer_table_is_fatal() -> None:
    """A pipeline without a template engine cannot render pages."""
    with pytest.raises(SiteConfigError, match="template renderer"):
        render_page(Document("a.md", "/a", layout="page"), CONFIG, {}, {})


def test_feed_layout_uses_feed_serializer(mocker: MockerFixture) -> None:
    """The RSS layout bypasses templates and writes an XML file."""
    serializer = mocker.Mock(return_value="<rss/>")
    template = mocker.Mock()
    doc = Document("feed.md", "/feed", layout="RSS")

    page = render_page(doc, CONFIG, {}, {"jinja": template}, serializer)

    assert page.output_path == "feed.xml"
    assert page.content == "<rss/>"
    template.assert_not_called()
    context = serializer.call_args.args[0]
    assert context["config"] is CONFIG


def test_context_binds_helpers_to_context() -> None:
    """Helpers receive the context and can reach fields and sibling helpers."""

    def _shout(ctx: RenderContext, suffix: str) -> str:
        return ctx.title.upper() + suffix

    def _twice(ctx: RenderContext) -> str:
        return ctx.shout("!") * 2

    doc = Document("a.md", "/a", layout="page", fields={"title": "hi"})
    context = make_context(doc, CONFIG, {"shout": _shout, "twice": _twice})

    assert context["config"] is CONFIG
    assert context["source_path"] == "a.md"
    assert context.twice() == "HI!HI!"


def test_helpers_take_precedence_over_fields() -> None:
    """A helper replaces a document field with the same name."""
    doc = Document("a.md", "/a", fields={"title": "field"})
    context = make_context(doc, {}, {"title": lambda ctx: "helper"})
    assert context.title() == "helper"


def test_context_is_fresh_per_render() -> None:
    """Contexts are independent objects that do not touch the document."""
    doc = Document("a.md", "/a", layout="page", fields={"title": "t"})
    first = make_context(doc, CONFIG)
    first["title"] = "changed"

    assert make_context(doc, CONFIG)["title"] == "t"
    assert doc.fields["title"] == "t"


def test_render_pages_maps_every_document() -> None:
    """Every document produces one rendered page in order."""
    docs = [
        Document(f"{name}.md", f"/{name}", layout="page", fields={"title": name})
        for name in ("a", "b")
    ]
    pages = render_pages(docs, CONFIG, {}, {"jinja": _echo_renderer})
    assert [page.output_path for page in pages] == ["a.html", "b.html"]
