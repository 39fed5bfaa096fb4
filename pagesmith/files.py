"""Filesystem boundary for the pagesmith pipeline.

Discovery, reading, and writing all happen here so the parser, query, and
renderer modules stay free of I/O. Paths returned by discovery helpers are
relative POSIX strings, which is the identity every ``Document`` carries.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import CONFIG_EXTENSIONS

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .generator.page_renderer import RenderedPage


def list_source_files(folder: Path, extensions: cabc.Iterable[str]) -> list[str]:
    """Return sorted relative paths of files under ``folder`` with ``extensions``.

    Parameters
    ----------
    folder : Path
        Root folder searched recursively.
    extensions : Iterable[str]
        File extensions with or without a leading dot (``"md"`` or ``".md"``).

    Returns
    -------
    list[str]
        POSIX-style paths relative to ``folder``. Missing folders yield an empty
        list.
    """
    wanted = {f".{ext.lstrip('.').lower()}" for ext in extensions}
    if not folder.is_dir():
        return []
    return sorted(
        path.relative_to(folder).as_posix()
        for path in folder.rglob("*")
        if path.is_file() and path.suffix.lower() in wanted
    )


def list_config_files(folder: Path) -> list[Path]:
    """Return YAML config files directly inside ``folder`` (not recursive)."""
    if not folder.is_dir():
        return []
    return sorted(
        path
        for path in folder.iterdir()
        if path.is_file() and path.suffix.lower() in CONFIG_EXTENSIONS
    )


def read_file(path: Path) -> str:
    """Read a UTF-8 text file."""
    return path.read_text(encoding="utf-8")


def read_yaml_file(path: Path) -> typ.Any:  # noqa: ANN401 - arbitrary YAML payload
    """Load a YAML document with the safe loader, returning ``None`` when empty."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        return loader.load(handle)


def write_file(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def save_pages(pages: cabc.Iterable[RenderedPage], folder: Path) -> list[Path]:
    """Persist rendered pages beneath ``folder`` and return the written paths."""
    return [
        write_file(folder / page.output_path.lstrip("/"), page.content)
        for page in pages
    ]


__all__ = [
    "list_config_files",
    "list_source_files",
    "read_file",
    "read_yaml_file",
    "save_pages",
    "write_file",
]
