"""Core abstractions: kinds, field references, dispatch registries, Converter.

This module owns every *interface* in the system.  Concrete matchers,
codecs and storage resolvers live in ``matchers``, ``codecs`` and
``resolvers``; ``factory`` wires them together.

Conversion flow (``Converter`` entry points)::

    collaborator (record binder)
      │  Field + token            Field
      ▼                            ▼
    Converter.set_field      Converter.get_field_as_string
      │
      ▼
    kinds.resolve(field) → FieldCodec              ← dispatch #1: field kind
      ├── primitive kind → PrimitiveCodec → primitives.to_*
      └── other          → CapabilityCodec → IndirectionResolver
                                 └── parsers / renderers.resolve(cls)   ← dispatch #2: capability
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, List, NewType, Optional

from .errors import UnsupportedConversion, describe

#: Declares an unsigned 64-bit integer field (``count: Unsigned``).
Unsigned = NewType("Unsigned", int)


# ─────────────────────────────────────────────────────────────────────────────
# Kind
# ─────────────────────────────────────────────────────────────────────────────


class Kind(enum.Enum):
    """Coarse primitive category of a field."""

    TEXT = "string"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    OTHER = "other"


_PRIMITIVE_KINDS: dict[Any, Kind] = {
    str: Kind.TEXT,
    bool: Kind.BOOL,
    int: Kind.INT,
    Unsigned: Kind.UINT,
    float: Kind.FLOAT,
}


def kind_of(hint: Any) -> Kind:
    """Map a declared type hint to its ``Kind``.

    Only the exact builtin types are primitive; subclasses, wrappers and
    user classes are ``Kind.OTHER``::

        kind_of(int)            → Kind.INT
        kind_of(Unsigned)       → Kind.UINT
        kind_of(Optional[int])  → Kind.OTHER
    """
    try:
        return _PRIMITIVE_KINDS.get(hint, Kind.OTHER)
    except TypeError:  # unhashable hint
        return Kind.OTHER


# ─────────────────────────────────────────────────────────────────────────────
# ValueResolver — storage-addressing abstraction
# ─────────────────────────────────────────────────────────────────────────────


class ValueResolver(ABC):
    """Abstract interface for reading/writing one location inside a container.

    Concrete implementations: ``resolvers.storage.AttributeResolver``,
    ``resolvers.storage.ItemResolver``, ``resolvers.pointer.PointerResolver``,
    ``resolvers.query.QueryResolver``.
    """

    #: ``False`` for resolvers that can only read (e.g. JMESPath queries).
    writable: bool = True

    @abstractmethod
    def get(self, path: Any, data: Any) -> Any:
        """Read the value at *path*.  Raises ``KeyError`` / ``IndexError`` if absent."""

    @abstractmethod
    def set(self, path: Any, data: Any, value: Any) -> Any:
        """Write *value* at *path*.  Returns the (possibly new) *data* root."""

    def exists(self, path: Any, data: Any) -> bool:
        """Check whether *path* resolves to a value.

        Default: wraps ``get`` in a try/except.  Override for cheaper probes.
        """
        try:
            self.get(path, data)
            return True
        except (KeyError, IndexError, TypeError):
            return False


# ─────────────────────────────────────────────────────────────────────────────
# Field — reference to a single storage location
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Field:
    """Handle to one storage location of statically unknown type.

    Attributes:
        owner:       Container holding the location (or the value itself when
                     *resolver* is ``None``).
        key:         Address of the location inside *owner*.
        hint:        Declared type hint; decides the ``Kind``.
        resolver:    ``ValueResolver`` that reads/writes ``owner[key]``.
                     ``None`` marks a detached, read-only value.
        addressable: ``False`` only for detached values; capability-based
                     conversion needs an addressable location.

    The engine never keeps a ``Field`` past a single call.  Build them with
    the helpers in ``csvconv.fields``.
    """

    owner: Any
    key: Any
    hint: Any
    resolver: Optional[ValueResolver] = None
    addressable: bool = True

    @property
    def kind(self) -> Kind:
        return kind_of(self.hint)

    @property
    def settable(self) -> bool:
        return self.resolver is not None and self.resolver.writable

    def get(self) -> Any:
        """Current value; a missing location reads as ``None``."""
        if self.resolver is None:
            return self.owner
        if not self.resolver.exists(self.key, self.owner):
            return None
        return self.resolver.get(self.key, self.owner)

    def set(self, value: Any) -> None:
        if self.resolver is None:
            raise UnsupportedConversion(
                type(value).__qualname__, describe(self.hint), "field is not settable"
            )
        self.resolver.set(self.key, self.owner, value)

    def narrow(self, hint: Any) -> Field:
        """Same storage, viewed through the unwrapped *hint*."""
        return replace(self, hint=hint, addressable=True)


# ─────────────────────────────────────────────────────────────────────────────
# Dispatch system — matcher + handler nodes, first match by priority
# ─────────────────────────────────────────────────────────────────────────────


class Matcher(ABC):
    """Predicate: does *subject* belong to the given dispatch node?

    The kind registry matches ``Field`` objects; the capability registries
    match classes::

        KindMatcher(Kind.INT)   → field.kind is Kind.INT
        MarshallerMatcher()     → cls declares marshal_csv
        AlwaysMatcher()         → True
    """

    @abstractmethod
    def matches(self, subject: Any) -> bool: ...


class FieldCodec(ABC):
    """Convert one field in both directions."""

    @abstractmethod
    def decode(self, field: Field, token: str) -> None:
        """Convert *token* and store the result into *field*."""

    @abstractmethod
    def encode(self, field: Field) -> str:
        """Render the current value of *field* as text."""


class Renderer(ABC):
    """Capability handler on the read path."""

    @abstractmethod
    def render(self, value: Any) -> str: ...


class Parser(ABC):
    """Capability handler on the write path."""

    @abstractmethod
    def parse(self, value: Any, token: str) -> None: ...


@dataclass
class DispatchNode:
    """Single node in a ``DispatchRegistry``.

    Attributes:
        name:     Human-readable label (for introspection / debugging).
        priority: Higher = tried first.
        matcher:  Decides whether *handler* applies to a subject.
        handler:  ``FieldCodec``, ``Renderer`` or ``Parser``.
    """

    name: str
    priority: int
    matcher: Matcher
    handler: Any


class DispatchRegistry:
    """Flat registry with *first-match* dispatch.

    ``resolve`` walks nodes by descending priority on every call and
    returns the handler of the first node whose matcher fires, or ``None``.
    Nothing is cached: a type's capabilities are re-derived on each call.
    """

    def __init__(self) -> None:
        self._nodes: List[DispatchNode] = []

    # -- registration -------------------------------------------------------

    def register(self, node: DispatchNode) -> None:
        """Add a node to this registry."""
        self._nodes.append(node)

    # -- dispatch -----------------------------------------------------------

    def resolve(self, subject: Any) -> Any:
        for node in self.nodes():
            if node.matcher.matches(subject):
                return node.handler
        return None

    # -- introspection ------------------------------------------------------

    def nodes(self) -> List[DispatchNode]:
        """Return nodes sorted by descending priority."""
        return sorted(self._nodes, key=lambda n: n.priority, reverse=True)


# ─────────────────────────────────────────────────────────────────────────────
# Converter — public entry point (field bridge)
# ─────────────────────────────────────────────────────────────────────────────


class Converter:
    """Holds the kind registry and exposes the two field-level operations.

    Stateless between calls: concurrent calls on *distinct* fields are safe;
    calls racing on the same field must be serialised by the caller.
    Every error propagates unchanged.
    """

    def __init__(self, *, kinds: DispatchRegistry) -> None:
        self.kinds = kinds

    def set_field(self, field: Field, token: str) -> None:
        """Convert *token* to the field's type and store it."""
        codec = self.kinds.resolve(field)
        if codec is None:
            raise UnsupportedConversion("string", describe(field.hint))
        codec.decode(field, token)

    def get_field_as_string(self, field: Field) -> str:
        """Render the field's current value as text."""
        codec = self.kinds.resolve(field)
        if codec is None:
            raise UnsupportedConversion(describe(field.hint), "string")
        return codec.encode(field)
