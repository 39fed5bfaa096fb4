"""End-to-end tests for building a site from folders on disk."""

from __future__ import annotations

import re
import typing as typ
from xml.etree import ElementTree as ET

import pytest
from bs4 import BeautifulSoup

from pagesmith.cli import build
from pagesmith.config import SiteConfigError
from pagesmith.documents import (
    Document,
    filter_documents,
    order_documents,
    paginate,
)
from pagesmith.site import SiteBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

POST_TEMPLATE = """\
<!doctype html>
<html lang="{{ page_lang() }}">
<head><title>{{ get_page_title() }}</title></head>
<body>
<article>
<h1>{{ title }}</h1>
{{ content }}
</article>
</body>
</html>
"""

INDEX_TEMPLATE = """\
<!doctype html>
<html lang="{{ page_lang() }}">
<head><title>{{ get_page_title() }}</title></head>
<body>
<ul class="posts">
{% for post in documents %}
<li><a href="{{ post.url }}">{{ post.title }}</a>{{ post.excerpt }}</li>
{% endfor %}
</ul>
<p class="total">{{ documents_total }}</p>
{% if previous_url %}<a class="previous" href="{{ previous_url }}">Newer</a>{% endif %}
{% if next_url %}<a class="next" href="{{ next_url }}">Older</a>{% endif %}
</body>
</html>
"""

POSTS = {
    "first": "2024-01-05",
    "second": "2024-02-05",
    "third": "2024-03-05",
}


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Create config, source, and template folders for a small blog."""
    _write(
        tmp_path / "config" / "base.yml",
        "title: Example\n"
        "url: https://example.com\n"
        "lang: en\n"
        "description: Notes and things\n",
    )
    for name, date in POSTS.items():
        _write(
            tmp_path / "source" / "posts" / f"{name}.md",
            "---\n"
            f"title: {name.capitalize()}\n"
            f"date: {date}\n"
            "layout: post\n"
            "---\n"
            f"Intro to *{name}*.\n\n"
            "<!-- cut -->\n\n"
            f"See [more](/posts/{name}).\n",
        )
    _write(tmp_path / "templates" / "post.jinja", POST_TEMPLATE)
    _write(tmp_path / "templates" / "index.jinja", INDEX_TEMPLATE)
    return tmp_path


def _collections(
    documents: list[Document], config: dict[str, typ.Any]
) -> list[Document]:
    posts = order_documents(
        filter_documents(documents, {"source_path": re.compile(r"^posts/")}),
        ["-date"],
    )
    pages = paginate(
        posts,
        {
            "source_path_prefix": "/",
            "url_prefix": "/",
            "documents_per_page": 2,
            "layout": "index",
            "index": True,
        },
    )
    feed = Document.from_mapping(
        {"source_path": "feed.xml", "layout": "RSS", "documents": posts}
    )
    return [*pages, feed]


def _builder(site: Path, **kwargs: typ.Any) -> SiteBuilder:
    return SiteBuilder(
        source_dir=site / "source",
        config_dir=site / "config",
        templates_dir=site / "templates",
        output_dir=site / "public",
        **kwargs,
    )


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_build_writes_every_page(site: Path) -> None:
    """Source documents and derived pages are written under the output folder."""
    written = _builder(
        site, cut_tag="<!-- cut -->", collections=_collections
    ).run()

    public = site / "public"
    assert sorted(path.relative_to(public).as_posix() for path in written) == [
        "feed.xml",
        "index.html",
        "page/2.html",
        "posts/first.html",
        "posts/second.html",
        "posts/third.html",
    ]


def test_post_pages_use_their_layout(site: Path) -> None:
    """Posts render markdown into the post template with helper output."""
    _builder(site, cut_tag="<!-- cut -->").run()

    soup = _soup(site / "public" / "posts" / "first.html")
    assert soup.title is not None
    assert soup.title.string == "First — Example"
    assert soup.html is not None
    assert soup.html["lang"] == "en"
    article = soup.find("article")
    assert article is not None
    assert article.find("em") is not None
    assert article.find("em").get_text() == "first"


def test_pagination_pages_link_each_other(site: Path) -> None:
    """Index pages list newest posts first and link to their neighbours."""
    _builder(site, cut_tag="<!-- cut -->", collections=_collections).run()
    public = site / "public"

    first = _soup(public / "index.html")
    assert [a.get_text() for a in first.select("ul.posts a")] == ["Third", "Second"]
    assert first.select_one("p.total").get_text() == "3"
    assert first.select_one("a.previous") is None
    assert first.select_one("a.next")["href"] == "/page/2"

    second = _soup(public / "page" / "2.html")
    assert [a.get_text() for a in second.select("ul.posts a")] == ["First"]
    assert second.select_one("a.previous")["href"] == "/"
    assert second.select_one("a.next") is None


def test_excerpts_stop_at_cut_marker(site: Path) -> None:
    """Index entries show only the content before the cut marker."""
    _builder(site, cut_tag="<!-- cut -->", collections=_collections).run()

    listing = _soup(site / "public" / "index.html").select_one("ul.posts")
    assert listing is not None
    assert "Intro to" in listing.get_text()
    assert "See more" not in listing.get_text()


def test_feed_lists_posts_with_absolute_links(site: Path) -> None:
    """The RSS layout produces a feed with absolute item links."""
    _builder(site, collections=_collections).run()

    root = ET.fromstring((site / "public" / "feed.xml").read_bytes())  # noqa: S314
    channel = root.find("channel")
    assert channel is not None
    assert channel.findtext("title") == "Example"
    assert channel.findtext("language") == "en"
    items = channel.findall("item")
    assert [item.findtext("link") for item in items] == [
        "https://example.com/posts/third",
        "https://example.com/posts/second",
        "https://example.com/posts/first",
    ]
    assert all(item.findtext("pubDate") for item in items)
    description = items[0].findtext("description") or ""
    assert 'href="https://example.com/posts/third"' in description


def test_missing_layout_aborts_build(site: Path) -> None:
    """A document without a layout stops the build with a helpful error."""
    _write(site / "source" / "about.md", "---\ntitle: About\n---\nHi.\n")

    with pytest.raises(SiteConfigError, match=r"Layout not specified for about\.md"):
        _builder(site).run()
    assert not (site / "public" / "posts").exists()


def test_build_command_reports_written_pages(
    site: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The build command renders the site and prints each written path."""
    build(
        source_dir=site / "source",
        config_dir=site / "config",
        templates_dir=site / "templates",
        output_dir=site / "public",
        extension=["md"],
        cut_tag="<!-- cut -->",
    )

    out = capsys.readouterr().out.splitlines()
    assert len(out) == len(POSTS)
    assert all(line.startswith("wrote ") for line in out)
    assert (site / "public" / "posts" / "second.html").is_file()
