"""Right-biased recursive merge for nested configuration mappings."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ


def deep_merge(
    base: cabc.Mapping[str, typ.Any], override: cabc.Mapping[str, typ.Any] | None
) -> dict[str, typ.Any]:
    """Recursively merge ``override`` over ``base`` without mutating either.

    Nested mappings merge key by key; any other value, including lists,
    replaces the base value wholesale.

    Examples
    --------
    >>> deep_merge({"a": 1, "b": {"c": 2, "d": [1]}}, {"b": {"d": [2]}})
    {'a': 1, 'b': {'c': 2, 'd': [2]}}
    """
    result: dict[str, typ.Any] = {
        key: _copy_mapping(value) for key, value in base.items()
    }
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, cabc.Mapping) and isinstance(value, cabc.Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = _copy_mapping(value)
    return result


def _copy_mapping(value: typ.Any) -> typ.Any:  # noqa: ANN401 - config values are arbitrary
    """Return a detached copy of nested mappings so callers cannot alias inputs."""
    if isinstance(value, cabc.Mapping):
        return deep_merge(value, None)
    return value


__all__ = ["deep_merge"]
