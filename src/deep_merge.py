"""Logic for layering a user configuration over the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``update`` merged into ``base``.

    Nested mappings are merged key by key. Any other value in ``update``,
    lists included, replaces the value in ``base``. Neither input is modified.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result
