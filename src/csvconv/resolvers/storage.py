"""Attribute- and item-based ``ValueResolver`` implementations."""

from __future__ import annotations

from typing import Any

from ..core import ValueResolver


class AttributeResolver(ValueResolver):
    """Address an attribute: ``get("name", obj)`` → ``obj.name``."""

    def get(self, path: str, data: Any) -> Any:
        return getattr(data, path)

    def set(self, path: str, data: Any, value: Any) -> Any:
        setattr(data, path, value)
        return data

    def exists(self, path: str, data: Any) -> bool:
        return hasattr(data, path)


class ItemResolver(ValueResolver):
    """Address a mapping key or sequence index: ``get(k, data)`` → ``data[k]``.

    Writing one past the end of a list appends.
    """

    def get(self, path: Any, data: Any) -> Any:
        return data[path]

    def set(self, path: Any, data: Any, value: Any) -> Any:
        if isinstance(data, list) and path == len(data):
            data.append(value)
        else:
            data[path] = value
        return data
