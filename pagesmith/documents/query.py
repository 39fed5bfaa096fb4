"""Pure filter, order, and group operations over document sequences.

None of these functions mutate their inputs: each returns a new list or dict
holding references to the original documents.

Examples
--------
>>> from pagesmith.documents import Document, order_documents
>>> docs = [Document("a.md", "/a", fields={"n": 2}), Document("b.md", "/b", fields={"n": 1})]
>>> [doc.source_path for doc in order_documents(docs, ["n"])]
['b.md', 'a.md']
"""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from pagesmith.config.models import SiteConfigError

if typ.TYPE_CHECKING:
    from .models import Document

DESCENDING_PREFIX = "-"

Predicate = typ.Any
GroupKey = str | cabc.Callable[["Document"], typ.Any]


def filter_documents(
    documents: cabc.Iterable[Document], predicates: cabc.Mapping[str, Predicate]
) -> list[Document]:
    """Return documents for which every predicate in ``predicates`` holds.

    Parameters
    ----------
    documents : Iterable[Document]
        Documents to filter.
    predicates : Mapping[str, Any]
        Field name to a compiled regular expression (searched in the field's
        string value), a callable (applied to the field's value), or a literal
        compared for equality. Missing fields read as ``None``.

    Returns
    -------
    list[Document]
        Matching documents in input order.
    """
    return [
        document
        for document in documents
        if all(
            _matches(document.get(field), expected)
            for field, expected in predicates.items()
        )
    ]


def _matches(value: typ.Any, expected: Predicate) -> bool:  # noqa: ANN401
    if isinstance(expected, re.Pattern):
        return expected.search("" if value is None else str(value)) is not None
    if callable(expected):
        return bool(expected(value))
    return value == expected


def order_documents(
    documents: cabc.Iterable[Document], fields: cabc.Sequence[str]
) -> list[Document]:
    """Sort documents by ``fields``; prefix a field with ``-`` for descending.

    The first field is the primary key. Sorting is stable, so documents equal
    under every key keep their input order. Documents missing a field sort
    after those that have it, whichever the direction.

    Raises
    ------
    SiteConfigError
        If a field name is empty.
    """
    ordered = list(documents)
    for spec in reversed(fields):
        descending = spec.startswith(DESCENDING_PREFIX)
        field = spec.removeprefix(DESCENDING_PREFIX)
        if not field:
            msg = f"Invalid order field {spec!r}."
            raise SiteConfigError(msg)
        if descending:
            ordered.sort(
                key=lambda doc, name=field: _descending_key(doc.get(name)),
                reverse=True,
            )
        else:
            ordered.sort(key=lambda doc, name=field: _ascending_key(doc.get(name)))
    return ordered


def _ascending_key(value: typ.Any) -> tuple[bool, typ.Any]:  # noqa: ANN401
    return (value is None, value if value is not None else 0)


def _descending_key(value: typ.Any) -> tuple[bool, typ.Any]:  # noqa: ANN401
    return (value is not None, value if value is not None else 0)


def group_documents(
    documents: cabc.Iterable[Document], key: GroupKey
) -> dict[typ.Any, list[Document]]:
    """Group documents by a field name or a key function.

    A list or tuple value places the document under each of its items. Falsy
    keys (``None``, ``""``, ``0``, empty sequences) exclude the document.

    Examples
    --------
    >>> from pagesmith.documents import Document
    >>> doc = Document("a.md", "/a", fields={"tags": ["x", "y"]})
    >>> sorted(group_documents([doc], "tags"))
    ['x', 'y']
    """
    groups: dict[typ.Any, list[Document]] = {}
    for document in documents:
        value = key(document) if callable(key) else document.get(key)
        if not value:
            continue
        values = value if isinstance(value, list | tuple) else (value,)
        for item in values:
            if not item:
                continue
            bucket = groups.setdefault(item, [])
            if not bucket or bucket[-1] is not document:
                bucket.append(document)
    return groups


__all__ = ["filter_documents", "group_documents", "order_documents"]
