from __future__ import annotations

from typing import Any, Mapping, Sequence


def array_path(data: Any, path: str, default: Any = None) -> Any:
    """
    Resolves a dot-separated path inside nested data or returns default.

    Example:
        data = {"foo": {"bar": "baz"}, "pass": 123, "items": ["a", "b"]}

        array_path(data, "foo.bar")           # "baz"
        array_path(data, "bar", "nothing")    # "nothing"
        array_path(data, "items.1")           # "b"
    """
    value = data
    for chain in path.split("."):
        if isinstance(value, Mapping):
            if chain in value:
                value = value[chain]
                continue
            # YAML keys like 1: are parsed as ints
            if chain.lstrip("-").isdigit() and int(chain) in value:
                value = value[int(chain)]
                continue
            return default
        if isinstance(value, Sequence) and not isinstance(value, str):
            try:
                value = value[int(chain)]
            except (ValueError, IndexError):
                return default
            continue
        return default
    return value


__all__ = ["array_path"]
