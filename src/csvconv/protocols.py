"""Conversion capabilities a user type may declare.

A type opts into capability-based conversion by defining the methods below.
Detection looks at the *class*, never at an instance, and is always made
against the concrete type reached after unwrapping ``Optional`` / ``Ref``.

Exports
-------
Stringer
    ``__str__`` overridden somewhere below ``object``.  Infallible; used on
    the read path only when ``TypeMarshaller`` is absent.

TypeMarshaller
    ``marshal_csv() -> str``.  May raise; preferred on the read path.

TypeUnmarshaller
    ``unmarshal_csv(value) -> None``.  Populates the instance in place; the
    only way to write a non-primitive field.

is_stringer / is_marshaller / is_unmarshaller
    Class-level detection helpers.

StringerMatcher / MarshallerMatcher / UnmarshallerMatcher
    ``Matcher`` adapters for the capability registries.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .core import Matcher


@runtime_checkable
class Stringer(Protocol):
    def __str__(self) -> str: ...


@runtime_checkable
class TypeMarshaller(Protocol):
    def marshal_csv(self) -> str: ...


@runtime_checkable
class TypeUnmarshaller(Protocol):
    def unmarshal_csv(self, value: str) -> None: ...


def is_stringer(cls: type) -> bool:
    return getattr(cls, "__str__", object.__str__) is not object.__str__


def is_marshaller(cls: type) -> bool:
    return callable(getattr(cls, "marshal_csv", None))


def is_unmarshaller(cls: type) -> bool:
    return callable(getattr(cls, "unmarshal_csv", None))


class StringerMatcher(Matcher):
    def matches(self, subject: Any) -> bool:
        return isinstance(subject, type) and is_stringer(subject)


class MarshallerMatcher(Matcher):
    def matches(self, subject: Any) -> bool:
        return isinstance(subject, type) and is_marshaller(subject)


class UnmarshallerMatcher(Matcher):
    def matches(self, subject: Any) -> bool:
        return isinstance(subject, type) and is_unmarshaller(subject)
