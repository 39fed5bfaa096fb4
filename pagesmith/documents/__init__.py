"""Typed documents and the operations that load, query, and paginate them.

Examples
--------
>>> from pathlib import Path
>>> from pagesmith.documents import load_source_files, order_documents
>>> docs = load_source_files(Path("source"), ["md"])  # doctest: +SKIP
>>> latest = order_documents(docs, ["-date"])  # doctest: +SKIP
"""

from .models import Document, PaginationPage
from .pagination import paginate
from .parser import (
    ParseOptions,
    parse_custom_fields,
    parse_document,
    render_by_type,
    split_excerpt,
    split_front_matter,
)
from .query import filter_documents, group_documents, order_documents
from .repository import load_source_files

__all__ = [
    "Document",
    "PaginationPage",
    "ParseOptions",
    "filter_documents",
    "group_documents",
    "load_source_files",
    "order_documents",
    "paginate",
    "parse_custom_fields",
    "parse_document",
    "render_by_type",
    "split_excerpt",
    "split_front_matter",
]
