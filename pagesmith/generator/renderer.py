"""Markdown body renderer with Pygments-highlighted fenced code."""

from __future__ import annotations

import typing as typ

from markdown import Markdown

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

DEFAULT_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


class HtmlContentRenderer:
    """Render markdown source bodies to HTML.

    Instances are callable, so ``{"md": HtmlContentRenderer()}`` can be passed
    straight to :class:`~pagesmith.documents.ParseOptions` as a body renderer.
    Fenced code blocks are highlighted by Pygments through ``codehilite`` with
    CSS classes, leaving the colour scheme to the site stylesheet.
    """

    def __init__(
        self,
        extensions: typ.Sequence[Extension | str] | None = None,
        css_class: str = "codehilite",
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        extensions : Sequence[Extension | str], optional
            Extra Python-Markdown extensions appended to the defaults.
        css_class : str, optional
            Class of the ``div`` wrapping each highlighted block.
        """
        self._md = Markdown(
            extensions=[*DEFAULT_EXTENSIONS, *(extensions or ())],
            extension_configs={
                "codehilite": {"guess_lang": False, "css_class": css_class}
            },
        )

    def __call__(self, text: str) -> str:
        """Convert ``text``; blank input renders as an empty string."""
        if not text.strip():
            return ""
        return self._md.reset().convert(text)


__all__ = ["DEFAULT_EXTENSIONS", "HtmlContentRenderer"]
