"""Primitive-kind codec."""

from __future__ import annotations

from typing import Any, Callable

from ..core import Field, FieldCodec
from ..primitives import INTEGER_BOUNDS, check_bounds, to_string


class PrimitiveCodec(FieldCodec):
    """Codec for one primitive kind.

    *convert* is the ``primitives.to_*`` function of the field's kind.  It
    parses the token on ``decode`` and normalises the stored value before
    rendering on ``encode`` (a bool field holding ``1`` renders ``"true"``).
    A number stored in an integer field must already fit its 64-bit range;
    it is never wrapped on the way out.
    """

    def __init__(self, convert: Callable[[Any], Any]) -> None:
        self._convert = convert

    def decode(self, field: Field, token: str) -> None:
        field.set(self._convert(token))

    def encode(self, field: Field) -> str:
        value = field.get()
        target = field.kind.value
        if target in INTEGER_BOUNDS and type(value) in (int, float):
            check_bounds(value, target)
        return to_string(self._convert(value))
