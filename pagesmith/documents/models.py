"""Typed documents flowing through the transform pipeline."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from pagesmith.paths import filepath_to_url


@dc.dataclass(frozen=True, slots=True)
class Document:
    """A parsed source file (or synthetic page) ready for querying and rendering.

    Attributes
    ----------
    source_path : str
        Path of the originating file relative to the source folder.
    url : str
        Canonical site-relative URL derived from ``source_path``.
    content : str
        Rendered, trimmed body.
    excerpt : str | None
        Content before the cut marker; ``None`` when no marker applied.
    more : str | None
        Content after the cut marker; ``None`` when no marker applied.
    layout : str | None
        Template name used at render time.
    fields : Mapping[str, Any]
        Remaining front matter and custom field parser outputs.
    """

    source_path: str
    url: str
    content: str = ""
    excerpt: str | None = None
    more: str | None = None
    layout: str | None = None
    fields: cabc.Mapping[str, typ.Any] = dc.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: cabc.Mapping[str, typ.Any]) -> typ.Self:
        """Build a document, routing known keys to attributes and the rest to ``fields``."""
        attributes = {
            field.name for field in dc.fields(cls) if field.name != "fields"
        }
        known = {key: value for key, value in data.items() if key in attributes}
        extra = {key: value for key, value in data.items() if key not in attributes}
        source_path = known.pop("source_path", "")
        url = known.pop("url", None) or filepath_to_url(source_path)
        return cls(source_path=source_path, url=url, fields=extra, **known)

    def get(self, name: str, default: typ.Any = None) -> typ.Any:  # noqa: ANN401
        """Return a core attribute or extra field, ``default`` when absent."""
        if name != "fields" and name in self._attribute_names():
            value = getattr(self, name)
            return default if value is None else value
        return self.fields.get(name, default)

    def as_dict(self) -> dict[str, typ.Any]:
        """Flatten core attributes and extra fields into a new dict."""
        data = dict(self.fields)
        for name in self._attribute_names():
            if name != "fields":
                data[name] = getattr(self, name)
        return data

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __getitem__(self, name: str) -> typ.Any:  # noqa: ANN401
        if name != "fields" and name in self._attribute_names():
            return getattr(self, name)
        return self.fields[name]

    def __getattr__(self, name: str) -> typ.Any:  # noqa: ANN401
        # Only reached for names that are not dataclass attributes.
        if name.startswith("__") or name == "fields":
            raise AttributeError(name)
        try:
            return self.fields[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    @classmethod
    def _attribute_names(cls) -> tuple[str, ...]:
        return tuple(field.name for field in dc.fields(cls))


@dc.dataclass(frozen=True, slots=True)
class PaginationPage(Document):
    """One page of a paginated document collection.

    Attributes
    ----------
    documents : tuple[Document, ...]
        Contiguous slice of the paginated sequence shown on this page.
    documents_total : int
        Number of documents across every page.
    previous_url : str | None
        URL of the previous page, ``None`` on the first page.
    next_url : str | None
        URL of the next page, ``None`` on the last page.
    """

    documents: tuple[Document, ...] = ()
    documents_total: int = 0
    previous_url: str | None = None
    next_url: str | None = None


__all__ = ["Document", "PaginationPage"]
