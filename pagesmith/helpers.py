"""Template helpers bound to each page's render context.

Every helper takes the :class:`~pagesmith.generator.context.RenderContext` as
its first argument. :func:`~pagesmith.generator.context.make_context` binds
them, so templates call ``option("title")`` or ``get_page_title()`` without
passing the context themselves.

Examples
--------
>>> from pagesmith.documents import Document
>>> from pagesmith.generator import make_context
>>> config = {"base": {"title": "My blog"}}
>>> ctx = make_context(Document("a.md", "/a"), config, DEFAULT_HELPERS)
>>> ctx.option("title")
'My blog'
"""

from __future__ import annotations

import datetime as dt
import hashlib
import json
import posixpath
import re
import typing as typ
from pathlib import Path

from babel import Locale
from babel.dates import format_date
from markupsafe import Markup

from pagesmith._constants import BASE_CONFIG_NAME
from pagesmith.config.models import MissingOptionError
from pagesmith.paths import remove_extension

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pagesmith.generator.context import Helper, RenderContext

ROOT_RELATIVE_LINK_PATTERN = re.compile(r"""(\b(?:href|src)=["'])/(?!/)""")
PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")
_MISSING = object()


def option(ctx: RenderContext, key: str) -> typ.Any:  # noqa: ANN401
    """Return a config option, preferring the page language over base.

    ``key`` may use dot notation (``"author.name"``). Lookup order is the
    config of the page's ``lang``, the ``base`` config, then the top level of
    the config itself.

    Raises
    ------
    MissingOptionError
        If no scope defines ``key``.
    """
    config = ctx.get("config") or {}
    scopes: list[typ.Any] = []
    lang = ctx.get("lang")
    if lang:
        scopes.append(config.get(lang))
    scopes.extend((config.get(BASE_CONFIG_NAME), config))
    for scope in scopes:
        value = _lookup(scope, key)
        if value is not _MISSING:
            return value
    raise MissingOptionError(key)


def _lookup(scope: typ.Any, key: str) -> typ.Any:  # noqa: ANN401
    value = scope
    for part in key.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def page_lang(ctx: RenderContext) -> str:
    """Return the page's ``lang`` field, falling back to the ``lang`` option."""
    return ctx.get("lang") or option(ctx, "lang")


def translate(
    ctx: RenderContext, key: str, params: cabc.Mapping[str, typ.Any] | None = None
) -> str:
    """Return a localized option with ``{name}`` placeholders filled from ``params``.

    Unknown placeholders are left untouched. Plural rules are not interpreted.
    """
    template = str(option(ctx, key))
    values = params or {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(values[name]) if name in values else match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def absolutize_url(ctx: RenderContext, url: str) -> str:
    """Prefix a site-relative ``url`` with the ``url`` option."""
    if "://" in url:
        return url
    base = str(option(ctx, "url")).rstrip("/")
    return f"{base}/{url.lstrip('/')}"


def absolutize_links(ctx: RenderContext, html: str) -> Markup:
    """Make root-relative ``href`` and ``src`` attributes in ``html`` absolute."""
    base = str(option(ctx, "url")).rstrip("/")
    return Markup(
        ROOT_RELATIVE_LINK_PATTERN.sub(lambda match: f"{match.group(1)}{base}/", html)
    )


def get_page_title(
    ctx: RenderContext, *, title: str | None = None, suffix: bool = True
) -> str:
    """Return the HTML title for the page.

    ``pageTitle`` wins outright. Otherwise the page (or passed) title is
    followed by the site title unless ``suffix`` is false; pages without a
    title use the site title alone.
    """
    page_title = ctx.get("pageTitle")
    if page_title:
        return str(page_title)
    title = title or ctx.get("title")
    site_title = option(ctx, "title")
    if not title:
        return str(site_title)
    if not suffix:
        return str(title)
    return f"{title} — {site_title}"


def date_to_string(ctx: RenderContext, value: dt.date | str) -> str:
    """Return ``value`` as a long date in the page language.

    ``value`` may be a date, a datetime, or an ISO 8601 string. Language tags
    such as ``en-US`` are accepted alongside Babel's ``en_US`` form, so ``en``
    gives ``October 22, 2015`` and ``ru`` gives ``22 октября 2015 г.``.
    """
    if isinstance(value, str):
        value = dt.datetime.fromisoformat(value.strip())
    locale = Locale.parse(str(page_lang(ctx)).replace("-", "_"))
    return format_date(value, format="long", locale=locale)


def asset_filepath(ctx: RenderContext, url: str) -> str:
    """Return the filesystem path of a static asset under ``assetsFolder``."""
    return posixpath.join(str(option(ctx, "assetsFolder")), url.lstrip("/"))


def fingerprint(ctx: RenderContext, url: str) -> str:
    """Return ``url`` with the MD5 digest of the asset appended as a query."""
    digest = hashlib.md5(  # noqa: S324 - cache busting, not security
        Path(asset_filepath(ctx, url)).read_bytes()
    ).hexdigest()
    return f"{url}?{digest}"


def embed_file(ctx: RenderContext, url: str) -> Markup:
    """Return the contents of a static asset as markup."""
    return Markup(Path(asset_filepath(ctx, url)).read_text(encoding="utf-8"))


def inline_file(ctx: RenderContext, url: str) -> Markup:
    """Return an asset's contents prefixed with a ``/*name*/`` comment."""
    name = remove_extension(posixpath.basename(url))
    return Markup(f"/*{name}*/") + embed_file(ctx, url)


def to_json(ctx: RenderContext, value: typ.Any) -> Markup:  # noqa: ANN401, ARG001
    """Return ``value`` serialized as compact JSON markup."""
    return Markup(json.dumps(value, ensure_ascii=False, separators=(",", ":")))


DEFAULT_HELPERS: dict[str, Helper] = {
    "option": option,
    "page_lang": page_lang,
    "__": translate,
    "absolutize_url": absolutize_url,
    "absolutize_links": absolutize_links,
    "get_page_title": get_page_title,
    "date_to_string": date_to_string,
    "asset_filepath": asset_filepath,
    "fingerprint": fingerprint,
    "embed_file": embed_file,
    "inline_file": inline_file,
    "json": to_json,
}


__all__ = [
    "DEFAULT_HELPERS",
    "absolutize_links",
    "absolutize_url",
    "asset_filepath",
    "date_to_string",
    "embed_file",
    "fingerprint",
    "get_page_title",
    "inline_file",
    "option",
    "page_lang",
    "to_json",
    "translate",
]
