"""Indirection resolution for non-primitive fields.

Walks ``Optional`` / ``Ref`` layers down to the concrete value, then hands
it to the capability registries.  The two directions are asymmetric:

* **write** – an empty layer is filled with a zero value of the wrapped type
  (stored into the caller's field *before* parsing) and resolution recurses
  into it.
* **read**  – an empty layer renders as ``""`` with no error.

Capabilities are only ever checked on the innermost concrete value, never on
an intermediate layer.
"""

from __future__ import annotations

import logging

from .core import DispatchRegistry, Field
from .errors import UnsupportedConversion, describe
from .wrappers import layer_of, zero_value

logger = logging.getLogger(__name__)


class IndirectionResolver:
    """Resolve a field through its wrapper chain and dispatch on capability.

    Args:
        parsers:   Registry of ``Parser`` handlers matched against classes.
        renderers: Registry of ``Renderer`` handlers matched against classes;
                   ``TypeMarshaller`` must outrank ``Stringer``.
    """

    def __init__(self, *, parsers: DispatchRegistry, renderers: DispatchRegistry) -> None:
        self.parsers = parsers
        self.renderers = renderers

    # -- write --------------------------------------------------------------

    def resolve_for_write(self, field: Field, token: str) -> None:
        layer = layer_of(field.hint)
        if layer is None:
            self._parse(field, token)
            return

        inner = layer.open(field)
        if inner is None:
            inner = layer.fill(field)
            logger.debug("allocated %s for empty %s", describe(layer.inner), describe(field.hint))
        self.resolve_for_write(inner, token)

    def _parse(self, field: Field, token: str) -> None:
        if not field.addressable:
            raise UnsupportedConversion(
                "string", describe(field.hint), f"{describe(field.hint)} is not addressable"
            )

        value = field.get()
        if value is None:
            value = zero_value(field.hint)
            field.set(value)

        cls = type(value)
        parser = self.parsers.resolve(cls)
        if parser is None:
            raise UnsupportedConversion(
                "string", describe(cls), f"{describe(cls)} does not implement TypeUnmarshaller"
            )
        parser.parse(value, token)

    # -- read ---------------------------------------------------------------

    def resolve_for_read(self, field: Field) -> str:
        layer = layer_of(field.hint)
        if layer is None:
            return self._render(field)

        inner = layer.open(field)
        if inner is None:
            return ""
        return self.resolve_for_read(inner)

    def _render(self, field: Field) -> str:
        if not field.addressable:
            raise UnsupportedConversion(
                describe(field.hint), "string", f"{describe(field.hint)} is not addressable"
            )

        value = field.get()
        if value is None:
            return ""

        cls = type(value)
        renderer = self.renderers.resolve(cls)
        if renderer is None:
            raise UnsupportedConversion(
                describe(cls), "string",
                f"{describe(cls)} does not implement TypeMarshaller nor Stringer",
            )
        return renderer.render(value)
