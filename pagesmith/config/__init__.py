"""Load and merge hierarchical site configuration.

A config folder holds one ``base.yml`` plus optional ``<lang>.yml`` overrides.
:func:`load_config` reads them with ruamel.yaml and deep-merges every language
over the base, so templates always see a complete config for their language.

Examples
--------
>>> from pagesmith.config import deep_merge
>>> deep_merge({"a": 1, "b": 2}, {"b": 3})
{'a': 1, 'b': 3}
"""

from .loader import load_config, merge_configs, read_config_files
from .merge import deep_merge
from .models import Config, ConfigSet, MissingOptionError, SiteConfigError

__all__ = [
    "Config",
    "ConfigSet",
    "MissingOptionError",
    "SiteConfigError",
    "deep_merge",
    "load_config",
    "merge_configs",
    "read_config_files",
]
