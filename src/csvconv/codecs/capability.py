"""Capability-based conversion for non-primitive fields.

``CapabilityCodec`` is the catch-all of the kind registry: anything that is
not one of the five primitive kinds is routed to ``IndirectionResolver``,
which unwraps the field and dispatches on the concrete class to one of the
handlers below.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core import Field, FieldCodec, Parser, Renderer
from ..errors import UnsupportedConversion
from ..indirection import IndirectionResolver

logger = logging.getLogger(__name__)


class MarshalRenderer(Renderer):
    """Render through ``marshal_csv()``.  Its exceptions propagate unchanged."""

    def render(self, value: Any) -> str:
        text = value.marshal_csv()
        if not isinstance(text, str):
            raise UnsupportedConversion(
                type(value).__qualname__, "string",
                f"marshal_csv returned {type(text).__qualname__}",
            )
        logger.debug("rendered %s via marshal_csv", type(value).__qualname__)
        return text


class StringRenderer(Renderer):
    """Render through ``str()``; the fallback when ``marshal_csv`` is absent."""

    def render(self, value: Any) -> str:
        logger.debug("rendered %s via __str__", type(value).__qualname__)
        return str(value)


class UnmarshalParser(Parser):
    """Populate *value* in place through ``unmarshal_csv(token)``."""

    def parse(self, value: Any, token: str) -> None:
        value.unmarshal_csv(token)
        logger.debug("parsed %s via unmarshal_csv", type(value).__qualname__)


class CapabilityCodec(FieldCodec):
    def __init__(self, resolver: IndirectionResolver) -> None:
        self._resolver = resolver

    def decode(self, field: Field, token: str) -> None:
        self._resolver.resolve_for_write(field, token)

    def encode(self, field: Field) -> str:
        return self._resolver.resolve_for_read(field)
