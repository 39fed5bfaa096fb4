"""Typed structures and errors describing loaded site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

Config = dict[str, typ.Any]


class SiteConfigError(ValueError):
    """Raised when site configuration or caller-supplied options are invalid."""


class MissingOptionError(SiteConfigError, KeyError):
    """Raised when a template asks for a config option that is not defined."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Option '{key}' is not specified in the config.")

    def __str__(self) -> str:
        return str(self.args[0])


@dc.dataclass(slots=True)
class ConfigSet:
    """Raw configs read from disk before language merging.

    Attributes
    ----------
    base : Config
        Settings shared by every language.
    langs : dict[str, Config]
        Per-language overrides keyed by language code.
    """

    base: Config = dc.field(default_factory=dict)
    langs: dict[str, Config] = dc.field(default_factory=dict)


__all__ = ["Config", "ConfigSet", "MissingOptionError", "SiteConfigError"]
