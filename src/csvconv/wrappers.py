"""Wrapper layers around a concrete value: ``Optional[T]`` and ``Ref[T]``.

``Optional[T]`` cannot nest in Python (``Optional[Optional[T]]`` collapses),
so ``Ref[T]`` is the pointer-like box used to build deeper chains::

    price: Optional[Ref[Money]] = None      # two layers

A layer is *empty* when it holds nothing:

* ``Optional[T]`` – the slot holds ``None``.
* ``Ref[T]``      – the slot holds ``None`` or a ``Ref`` whose ``value`` is ``None``.
"""

from __future__ import annotations

import types
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar, Union, get_args, get_origin

from .core import Field, Unsigned
from .errors import UnsupportedConversion, describe
from .resolvers.storage import AttributeResolver

T = TypeVar("T")

_NONE_TYPE = type(None)
_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))
_ZEROS: dict[Any, Any] = {str: "", bool: False, int: 0, Unsigned: 0, float: 0.0}


class Ref(Generic[T]):
    """Mutable pointer-like box.  ``Ref()`` is the empty (zero) value."""

    __slots__ = ("value",)

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ref) and self.value == other.value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


# ─────────────────────────────────────────────────────────────────────────────
# Layers
# ─────────────────────────────────────────────────────────────────────────────


class Layer(ABC):
    """One level of indirection around *inner*."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner

    @abstractmethod
    def open(self, field: Field) -> Optional[Field]:
        """Return the wrapped location, or ``None`` when the layer is empty."""

    @abstractmethod
    def fill(self, field: Field) -> Field:
        """Store a zero value of *inner* into the empty layer and open it."""


class OptionalLayer(Layer):
    def open(self, field: Field) -> Optional[Field]:
        if field.get() is None:
            return None
        return field.narrow(self.inner)

    def fill(self, field: Field) -> Field:
        field.set(zero_value(self.inner))
        return field.narrow(self.inner)


class RefLayer(Layer):
    def open(self, field: Field) -> Optional[Field]:
        ref = field.get()
        if ref is None or ref.value is None:
            return None
        return _box(ref, self.inner)

    def fill(self, field: Field) -> Field:
        ref = field.get()
        if ref is None:
            ref = Ref()
            field.set(ref)
        ref.value = zero_value(self.inner)
        return _box(ref, self.inner)


def _box(ref: Ref, hint: Any) -> Field:
    return Field(owner=ref, key="value", hint=hint, resolver=AttributeResolver())


def layer_of(hint: Any) -> Optional[Layer]:
    """Return the outermost wrapper layer of *hint*, or ``None`` if concrete."""
    if hint is Ref:
        return RefLayer(Any)
    origin = get_origin(hint)
    if origin is Ref:
        return RefLayer(get_args(hint)[0])
    if origin in _UNION_ORIGINS:
        args = get_args(hint)
        inner = [a for a in args if a is not _NONE_TYPE]
        if len(args) == 2 and len(inner) == 1:
            return OptionalLayer(inner[0])
    return None


def zero_value(hint: Any) -> Any:
    """Zero-initialised value for *hint*.

    ::

        zero_value(int)               → 0
        zero_value(Optional[Money])   → None
        zero_value(Ref[Money])        → Ref()
        zero_value(Money)             → Money()
    """
    try:
        if hint in _ZEROS:
            return _ZEROS[hint]
    except TypeError:  # unhashable hint
        pass

    layer = layer_of(hint)
    if isinstance(layer, OptionalLayer):
        return None
    if isinstance(layer, RefLayer):
        return Ref()
    if isinstance(hint, type):
        try:
            return hint()
        except TypeError as exc:
            raise UnsupportedConversion(
                "string", describe(hint), "cannot allocate a default value"
            ) from exc
    raise UnsupportedConversion("string", describe(hint), "cannot allocate a default value")
