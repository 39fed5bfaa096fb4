r"""Turn raw source files into typed :class:`Document` objects.

A source file is an optional YAML front matter block delimited by ``---``
lines, followed by a body. The body is rendered with the renderer registered
for the file extension, optionally split into an excerpt on a cut marker, and
merged with the metadata and any custom field parser output.

Example
-------
>>> from pagesmith.documents.parser import parse_document
>>> doc = parse_document("---\ntitle: Hi\nlayout: post\n---\nBody", "posts/hi.md")
>>> doc.url, doc.fields["title"], doc.content
('/posts/hi', 'Hi', 'Body')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

import frontmatter
from frontmatter.default_handlers import YAMLHandler
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from pagesmith.config.models import SiteConfigError
from pagesmith.paths import filepath_to_url, get_extension

from .models import Document

BOM = "\ufeff"

BodyRenderer = cabc.Callable[[str], str]
FieldParser = cabc.Callable[[typ.Any, cabc.Mapping[str, typ.Any]], typ.Any]


@dc.dataclass(slots=True)
class ParseOptions:
    """Pluggable behaviour applied while parsing a source file.

    Attributes
    ----------
    renderers : Mapping[str, BodyRenderer]
        Body renderers keyed by file extension (without the dot).
    field_parsers : Mapping[str, FieldParser]
        Custom field parsers keyed by front matter field name.
    cut_tag : str | None
        Literal marker separating the excerpt from the rest of the content.
    """

    renderers: cabc.Mapping[str, BodyRenderer] = dc.field(default_factory=dict)
    field_parsers: cabc.Mapping[str, FieldParser] = dc.field(default_factory=dict)
    cut_tag: str | None = None


class RuamelYAMLHandler(YAMLHandler):
    """``---`` delimited front matter loaded with ruamel.yaml's safe loader."""

    def load(self, fm: str, **kwargs: object) -> dict[str, typ.Any]:  # noqa: ARG002
        """Parse the front matter block, rejecting anything but a mapping."""
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        loaded = loader.load(fm)
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            msg = "front matter must be a mapping"
            raise SiteConfigError(msg)
        return dict(loaded)


def split_front_matter(
    source: str, filepath: str = "<string>"
) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining body.

    Sources without a front matter block yield an empty mapping and the full
    source as the body.

    Raises
    ------
    SiteConfigError
        If the front matter is not valid YAML or not a mapping.
    """
    text = source.removeprefix(BOM)
    handler = RuamelYAMLHandler()
    if not handler.detect(text):
        return {}, text
    try:
        metadata, body = frontmatter.parse(text, handler=handler)
    except (YAMLError, SiteConfigError) as exc:
        msg = f"Invalid front matter in {filepath}: {exc}"
        raise SiteConfigError(msg) from exc
    return dict(metadata), body


def render_by_type(
    source: str, filepath: str, renderers: cabc.Mapping[str, BodyRenderer]
) -> str:
    """Render ``source`` with the renderer registered for the file extension."""
    render = renderers.get(get_extension(filepath))
    if render is None:
        return source
    return render(source)


def parse_custom_fields(
    attributes: cabc.Mapping[str, typ.Any],
    field_parsers: cabc.Mapping[str, FieldParser],
) -> dict[str, typ.Any]:
    """Return the outputs of every field parser, keyed by field name.

    Each parser receives the raw value (``None`` when absent) and the complete
    metadata mapping so it can derive values from sibling fields.
    """
    return {
        name: parse(attributes.get(name), attributes)
        for name, parse in field_parsers.items()
    }


def split_excerpt(content: str, cut_tag: str | None) -> tuple[str | None, str | None]:
    """Split ``content`` on the first ``cut_tag``, returning trimmed halves."""
    if not cut_tag or cut_tag not in content:
        return None, None
    excerpt, more = content.split(cut_tag, 1)
    return excerpt.strip(), more.strip()


def parse_document(
    source: str, filepath: str, options: ParseOptions | None = None
) -> Document:
    """Parse front matter, render the body, and build a :class:`Document`.

    Parameters
    ----------
    source : str
        Raw file contents.
    filepath : str
        Path relative to the source folder; drives the URL and renderer choice.
    options : ParseOptions, optional
        Renderers, custom field parsers, and cut marker.

    Returns
    -------
    Document
        Front matter fields, then ``source_path``, ``content``, ``excerpt``,
        ``more`` and ``url``, with custom field outputs taking precedence.
    """
    opts = options or ParseOptions()
    attributes, body = split_front_matter(source, filepath)
    content = render_by_type(body, filepath, opts.renderers).strip()
    excerpt, more = split_excerpt(content, opts.cut_tag)

    data: dict[str, typ.Any] = {
        **attributes,
        "source_path": filepath,
        "content": content,
        "excerpt": excerpt,
        "more": more,
        "url": filepath_to_url(filepath),
    }
    data.update(parse_custom_fields(attributes, opts.field_parsers))
    return Document.from_mapping(data)


__all__ = [
    "BOM",
    "BodyRenderer",
    "FieldParser",
    "ParseOptions",
    "RuamelYAMLHandler",
    "parse_custom_fields",
    "parse_document",
    "render_by_type",
    "split_excerpt",
    "split_front_matter",
]
