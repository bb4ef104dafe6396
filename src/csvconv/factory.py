"""Converter factory — the single place where all pieces are assembled.

``build_default_converter`` is the recommended entry point for users who want
a fully functional Converter without hand-wiring every registry.

Customisation points:

* **extra_codecs** – additional ``DispatchNode``s for the kind registry,
                     e.g. a codec for ``Decimal`` fields matched by
                     ``HintMatcher(Decimal)``.
"""

from __future__ import annotations

from typing import Iterable

from .codecs import CapabilityCodec, MarshalRenderer, PrimitiveCodec, StringRenderer, UnmarshalParser
from .core import Converter, DispatchNode, DispatchRegistry, Field, Kind
from .indirection import IndirectionResolver
from .matchers import AlwaysMatcher, KindMatcher
from .primitives import BUILTIN_CONVERTERS
from .protocols import MarshallerMatcher, StringerMatcher, UnmarshallerMatcher


def build_default_converter(
        *,
        extra_codecs: Iterable[DispatchNode] | None = None,
) -> Converter:
    """Assemble a Converter with the standard kind and capability registries.

    What gets wired
    ---------------
    kinds
        * ``string``, ``bool``, ``int``, ``uint``, ``float`` (priority 10) –
          ``PrimitiveCodec`` backed by ``primitives.to_*``.
        * ``capability`` (priority -999, catch-all) – ``CapabilityCodec``.
        * every node from *extra_codecs*, at whatever priority it carries.

    renderers
        * ``marshaller`` (priority 10) – ``marshal_csv()``.
        * ``stringer``   (priority  5) – ``__str__``.

    parsers
        * ``unmarshaller`` (priority 10) – ``unmarshal_csv(token)``.

    Example::

        converter = build_default_converter()
        converter.set_field(attribute_field(row, "qty"), "0x10")   # row.qty == 16
        converter.get_field_as_string(attribute_field(row, "qty")) # → "16"
    """
    renderers = DispatchRegistry()
    renderers.register(DispatchNode(
        name="marshaller", priority=10,
        matcher=MarshallerMatcher(), handler=MarshalRenderer(),
    ))
    renderers.register(DispatchNode(
        name="stringer", priority=5,
        matcher=StringerMatcher(), handler=StringRenderer(),
    ))

    parsers = DispatchRegistry()
    parsers.register(DispatchNode(
        name="unmarshaller", priority=10,
        matcher=UnmarshallerMatcher(), handler=UnmarshalParser(),
    ))

    kinds = DispatchRegistry()
    for kind in (Kind.TEXT, Kind.BOOL, Kind.INT, Kind.UINT, Kind.FLOAT):
        kinds.register(DispatchNode(
            name=kind.value, priority=10,
            matcher=KindMatcher(kind),
            handler=PrimitiveCodec(BUILTIN_CONVERTERS[kind.value]),
        ))
    kinds.register(DispatchNode(
        name="capability", priority=-999,
        matcher=AlwaysMatcher(),
        handler=CapabilityCodec(IndirectionResolver(parsers=parsers, renderers=renderers)),
    ))

    for node in extra_codecs or ():
        kinds.register(node)

    return Converter(kinds=kinds)


# -- module-level shortcuts ------------------------------------------------

_DEFAULT_CONVERTER = build_default_converter()


def set_field(field: Field, token: str) -> None:
    """``build_default_converter().set_field`` on a shared, never-mutated converter."""
    _DEFAULT_CONVERTER.set_field(field, token)


def get_field_as_string(field: Field) -> str:
    """``build_default_converter().get_field_as_string`` on a shared converter."""
    return _DEFAULT_CONVERTER.get_field_as_string(field)
