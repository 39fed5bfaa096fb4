"""Extension, URL, and page-number helpers shared by the pipeline.

Every function here is pure and works on POSIX-style relative paths, which is
how source files are identified throughout pagesmith.

Examples
--------
>>> from pagesmith.paths import filepath_to_url
>>> filepath_to_url("posts/hello/index.md")
'/posts/hello'
>>> filepath_to_url("index.md")
'/'
"""

from __future__ import annotations

import posixpath
import re

from ._constants import INDEX_SEGMENT, PAGE_SEGMENT

DOUBLE_SLASH_PATTERN = re.compile(r"/{2,}")
TRAILING_INDEX_PATTERN = re.compile(rf"/{INDEX_SEGMENT}$")


def get_extension(filepath: str) -> str:
    """Return the extension of ``filepath`` without the leading dot."""
    return posixpath.splitext(filepath)[1].lstrip(".")


def remove_extension(filepath: str) -> str:
    """Return ``filepath`` with the extension of its last segment removed."""
    return posixpath.splitext(filepath)[0]


def collapse_slashes(path: str) -> str:
    """Collapse runs of slashes left behind by prefix/suffix concatenation."""
    return DOUBLE_SLASH_PATTERN.sub("/", path)


def filepath_to_url(filepath: str) -> str:
    """Convert a source-relative file path into a canonical site URL.

    Parameters
    ----------
    filepath : str
        Path relative to the source folder, for example ``posts/foo.md``.

    Returns
    -------
    str
        The path prefixed with ``/``, stripped of its extension and of a
        trailing ``/index`` segment. An empty result becomes ``/``.
    """
    url = "/" + remove_extension(filepath.replace("\\", "/"))
    url = TRAILING_INDEX_PATTERN.sub("", url)
    if not url:
        return "/"
    return url


def page_number_url(prefix: str, page_number: int, *, index: bool = False) -> str:
    """Return the path for ``page_number`` under ``prefix``.

    Page one is the bare prefix, or ``prefix/index`` when ``index`` is set.
    Later pages live under ``prefix/page/<n>``.
    """
    if page_number > 1:
        url = f"{prefix}/{PAGE_SEGMENT}/{page_number}"
    elif index:
        url = f"{prefix}/{INDEX_SEGMENT}"
    else:
        url = prefix
    return collapse_slashes(url)


__all__ = [
    "collapse_slashes",
    "filepath_to_url",
    "get_extension",
    "page_number_url",
    "remove_extension",
]
