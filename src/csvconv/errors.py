"""Conversion error taxonomy.

Exports
-------
ConversionError
    Base class for every error the engine itself raises.

UnsupportedConversion
    No primitive rule and no declared capability applies to the field.

ParseFailure
    A textual token could not be parsed as the target primitive.

Errors raised by a user type's ``marshal_csv`` / ``unmarshal_csv`` are *not*
part of this hierarchy: they propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any


def describe(hint: Any) -> str:
    """Human-readable name of a type hint (``int``, ``Optional[Money]``, …)."""
    if isinstance(hint, type):
        return hint.__qualname__
    return repr(hint).replace("typing.", "")


class ConversionError(Exception):
    """Base class for conversion failures."""


class UnsupportedConversion(ConversionError, TypeError):
    """The (source, target) pair has no applicable rule.

    Attributes:
        source: Description of the value/type being converted.
        target: Description of the attempted target.
        reason: Optional detail appended to the message.
    """

    def __init__(self, source: str, target: str, reason: str = "") -> None:
        self.source = source
        self.target = target
        self.reason = reason
        message = f"No known conversion from {source} to {target}"
        if reason:
            message = f"{message}, {reason}"
        super().__init__(message)


class ParseFailure(ConversionError, ValueError):
    """A token is not a valid literal for *target*.

    Attributes:
        token:  The offending text.
        target: Name of the primitive kind that was expected.
    """

    def __init__(self, token: str, target: str, reason: str = "invalid syntax") -> None:
        self.token = token
        self.target = target
        self.reason = reason
        super().__init__(f"cannot parse {token!r} as {target}: {reason}")
