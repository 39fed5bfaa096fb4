"""Cyclopts CLI entrypoint for building a pagesmith site.

The ``pagesmith`` console script loads the config and source folders, renders
every document through its layout template, and writes the pages to the output
folder. Every option can also be supplied through an ``INPUT_*`` environment
variable, which keeps CI invocations short.

Examples
--------
Build the site with the default folder layout:

>>> from pagesmith.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory with excerpts split on ``<!-- cut -->``:

>>> from pagesmith.cli import app
>>> app(
...     ["build", "--output-dir", "dist", "--cut-tag", "<!-- cut -->"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .site import DEFAULT_SOURCE_EXTENSIONS, SiteBuilder

DEFAULT_SOURCE_DIR = Path("source")
DEFAULT_CONFIG_DIR = Path("config")
DEFAULT_TEMPLATES_DIR = Path("templates")
DEFAULT_OUTPUT_DIR = Path("public")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="pagesmith", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render every source document into the output folder.")
def build(
    *,
    source_dir: typ.Annotated[
        Path, Parameter(help="Folder of source documents", env_var="INPUT_SOURCE_DIR")
    ] = DEFAULT_SOURCE_DIR,
    config_dir: typ.Annotated[
        Path, Parameter(help="Folder of YAML configs", env_var="INPUT_CONFIG_DIR")
    ] = DEFAULT_CONFIG_DIR,
    templates_dir: typ.Annotated[
        Path, Parameter(help="Folder of Jinja templates", env_var="INPUT_TEMPLATES_DIR")
    ] = DEFAULT_TEMPLATES_DIR,
    output_dir: typ.Annotated[
        Path, Parameter(help="Folder receiving pages", env_var="INPUT_OUTPUT_DIR")
    ] = DEFAULT_OUTPUT_DIR,
    extension: typ.Annotated[
        list[str] | None,
        Parameter(help="Source file extension to load (repeatable)"),
    ] = None,
    cut_tag: typ.Annotated[
        str | None,
        Parameter(help="Marker splitting excerpts", env_var="INPUT_CUT_TAG"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log progress at INFO level")
    ] = False,
) -> None:
    """Build the site described by the config, source, and template folders.

    Parameters
    ----------
    source_dir : Path, optional
        Folder searched recursively for source documents.
    config_dir : Path, optional
        Folder holding ``base.yml`` and ``<lang>.yml`` configs.
    templates_dir : Path, optional
        Folder holding ``<layout>.jinja`` templates.
    output_dir : Path, optional
        Folder receiving the rendered pages.
    extension : list[str] or None, optional
        Source extensions to load; defaults to ``md`` and ``html``.
    cut_tag : str or None, optional
        Marker splitting excerpts from the rest of each document.
    verbose : bool, optional
        Enable INFO-level logging.

    Raises
    ------
    SiteConfigError
        If the configuration is malformed or a document lacks a layout.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING, format=LOG_FORMAT
    )
    builder = SiteBuilder(
        source_dir=source_dir,
        config_dir=config_dir,
        templates_dir=templates_dir,
        output_dir=output_dir,
        extensions=tuple(extension or DEFAULT_SOURCE_EXTENSIONS),
        cut_tag=cut_tag,
    )
    for path in builder.run():
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pagesmith`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
