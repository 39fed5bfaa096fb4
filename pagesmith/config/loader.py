"""Load base and per-language YAML configs and merge them."""

from __future__ import annotations

import typing as typ

from pagesmith._constants import BASE_CONFIG_NAME
from pagesmith.files import list_config_files, read_yaml_file

from .merge import deep_merge
from .models import Config, ConfigSet, SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def load_config(folder: Path) -> Config:
    """Load every config file in ``folder`` and merge languages over base.

    Parameters
    ----------
    folder : Path
        Directory holding ``base.yml`` and zero or more ``<lang>.yml`` files.
        Only the top level of the folder is inspected.

    Returns
    -------
    Config
        ``{"base": {...}}`` when no language files exist, otherwise one merged
        config per language code.

    Raises
    ------
    SiteConfigError
        If a config file does not contain a mapping at its top level.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagesmith.config import load_config
    >>> load_config(Path("config"))  # doctest: +SKIP
    {'en': {'title': 'My blog', 'lang': 'en'}, 'ru': {...}}
    """
    return merge_configs(read_config_files(list_config_files(folder)))


def read_config_files(files: cabc.Iterable[Path]) -> ConfigSet:
    """Read config files, sorting them into the base config and languages."""
    configs = ConfigSet()
    for path in files:
        payload = read_yaml_file(path) or {}
        if not isinstance(payload, dict):
            msg = f"Config file '{path}' must contain a mapping at the top level."
            raise SiteConfigError(msg)
        name = path.stem
        if name == BASE_CONFIG_NAME:
            configs.base = payload
        else:
            configs.langs[name] = payload
    return configs


def merge_configs(configs: ConfigSet) -> Config:
    """Merge each language config over the base config.

    The base config is only exposed on its own when there are no languages.
    """
    if not configs.langs:
        return {BASE_CONFIG_NAME: configs.base}
    return {
        lang: deep_merge(configs.base, override)
        for lang, override in configs.langs.items()
    }


__all__ = ["load_config", "merge_configs", "read_config_files"]
