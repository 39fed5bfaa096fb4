"""Turn a folder of front-matter documents into a rendered static site.

The package is organised as a pipeline: :mod:`pagesmith.config` loads and
merges language configs, :mod:`pagesmith.documents` parses, queries, and
paginates documents, and :mod:`pagesmith.generator` renders them through a
template engine. :class:`pagesmith.site.SiteBuilder` runs the whole chain and
the ``pagesmith`` console script exposes it on the command line.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from pagesmith import main
>>> main()  # doctest: +SKIP
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
