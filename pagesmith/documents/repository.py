"""Load every matching source file in a folder as a :class:`Document`."""

from __future__ import annotations

import logging
import typing as typ

from pagesmith.files import list_source_files, read_file

from .parser import ParseOptions, parse_document

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import Document

logger = logging.getLogger(__name__)


def load_source_files(
    folder: Path,
    extensions: cabc.Sequence[str],
    options: ParseOptions | None = None,
) -> list[Document]:
    """Parse every file under ``folder`` whose extension is in ``extensions``.

    Parameters
    ----------
    folder : Path
        Source folder searched recursively.
    extensions : Sequence[str]
        File extensions to include, such as ``["md", "html"]``.
    options : ParseOptions, optional
        Renderers, field parsers, and cut marker forwarded to the parser.

    Returns
    -------
    list[Document]
        Documents in discovery order. Callers impose their own order with
        :func:`pagesmith.documents.order_documents`.

    Notes
    -----
    Finding no files is not an error: a warning is logged and an empty list is
    returned so the build can continue with an empty site.
    """
    files = list_source_files(folder, extensions)
    if not files:
        logger.warning(
            "No source files found in %s matching extensions: %s",
            folder,
            ", ".join(extensions),
        )
        return []

    documents = [
        parse_document(read_file(folder / filepath), filepath, options)
        for filepath in files
    ]
    logger.debug("Loaded %d documents from %s", len(documents), folder)
    return documents


__all__ = ["load_source_files"]
