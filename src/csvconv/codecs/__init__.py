"""Codecs sub-package — concrete FieldCodec / Renderer / Parser implementations.

primitive  – the five primitive kinds, backed by ``primitives.to_*``
capability – catch-all codec for every other field, plus the capability
             handlers (``marshal_csv``, ``__str__``, ``unmarshal_csv``)
"""

from .capability import CapabilityCodec, MarshalRenderer, StringRenderer, UnmarshalParser
from .primitive import PrimitiveCodec

__all__ = [
    "PrimitiveCodec",
    "CapabilityCodec",
    "MarshalRenderer",
    "StringRenderer",
    "UnmarshalParser",
]
