"""Field constructors: how a record binder hands a location to the engine.

::

    attribute_field(row, "price")                 # row.price, hint from annotations
    item_field(values, 2, int)                    # values[2]
    pointer_field(doc, "/order/qty", Unsigned)    # doc["order"]["qty"]
    query_field(doc, "order.total", float)        # read-only JMESPath
    detached_field(Money(5))                      # read-only, not addressable
"""

from __future__ import annotations

import typing
from typing import Any

import jmespath

from .core import Field
from .resolvers import AttributeResolver, ItemResolver, PointerResolver, QueryResolver

_MISSING = object()


def attribute_field(obj: Any, name: str, hint: Any = _MISSING) -> Field:
    """Reference ``obj.<name>``.

    *hint* defaults to the class annotation of *name*; an unannotated
    attribute falls back to the type of its current value.
    """
    if hint is _MISSING:
        hints = typing.get_type_hints(type(obj))
        hint = hints[name] if name in hints else type(getattr(obj, name))
    return Field(owner=obj, key=name, hint=hint, resolver=AttributeResolver())


def item_field(container: Any, key: Any, hint: Any) -> Field:
    """Reference ``container[key]`` of a mapping or list."""
    return Field(owner=container, key=key, hint=hint, resolver=ItemResolver())


def pointer_field(document: Any, path: str, hint: Any) -> Field:
    """Reference the JSON Pointer *path* inside a nested dict/list *document*."""
    return Field(owner=document, key=path, hint=hint, resolver=PointerResolver())


def query_field(
        document: Any,
        expression: str,
        hint: Any,
        *,
        options: jmespath.Options | None = None,
) -> Field:
    """Read-only reference to the result of a JMESPath *expression* over *document*."""
    resolver = QueryResolver(expression, options=options)
    return Field(owner=document, key=expression, hint=hint, resolver=resolver)


def detached_field(value: Any, hint: Any = _MISSING) -> Field:
    """Wrap a bare value with no storage behind it.

    Primitive values can still be rendered; anything needing capability
    dispatch fails because the value is not addressable.
    """
    if hint is _MISSING:
        hint = type(value)
    return Field(owner=value, key=None, hint=hint, addressable=False)
