"""Per-render context objects handed to templates and helpers."""

from __future__ import annotations

import functools
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pagesmith.config import Config
    from pagesmith.documents import Document

Helper = typ.Callable[..., typ.Any]


class RenderContext(dict[str, typ.Any]):
    """Mapping of config, document fields, and bound helpers for one render.

    Keys are also readable as attributes so helpers can write
    ``ctx.option("url")`` or ``ctx.lang``. Missing attributes raise
    ``AttributeError``; use :meth:`dict.get` for optional fields.
    """

    def __getattr__(self, name: str) -> typ.Any:  # noqa: ANN401
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    def bind(self, helpers: cabc.Mapping[str, Helper]) -> RenderContext:
        """Attach each helper under its name with this context as first argument."""
        for name, helper in helpers.items():
            self[name] = functools.partial(helper, self)
        return self


def make_context(
    document: Document,
    config: Config,
    helpers: cabc.Mapping[str, Helper] | None = None,
) -> RenderContext:
    """Build a fresh :class:`RenderContext` for ``document``.

    The config lives under ``config``, every document field sits at the top
    level, and helpers are bound last so their names take precedence.
    """
    context = RenderContext(config=config)
    context.update(document.as_dict())
    return context.bind(helpers or {})


__all__ = ["Helper", "RenderContext", "make_context"]
