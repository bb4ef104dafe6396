"""Shared field matchers for the kind registry.

Capability matchers (which look at classes, not fields) live next to the
protocols they detect in ``protocols``.

Exports
-------
KindMatcher
    Match a field by its ``Kind``.  Every primitive codec uses one.

HintMatcher
    Match a field by its exact declared hint (e.g. ``Decimal``).  Used to
    plug extra codecs in through ``build_default_converter``.

AlwaysMatcher
    Unconditional match — catch-all / fallback sentinel.
"""

from __future__ import annotations

from typing import Any

from .core import Field, Kind, Matcher


class KindMatcher(Matcher):
    """Match a field by its primitive kind.

    ::

        KindMatcher(Kind.INT).matches(int_field)   # True
        KindMatcher(Kind.INT).matches(str_field)   # False
    """

    def __init__(self, kind: Kind) -> None:
        self._kind = kind

    def matches(self, subject: Any) -> bool:
        return isinstance(subject, Field) and subject.kind is self._kind


class HintMatcher(Matcher):
    """Match a field whose declared hint is exactly *hint*."""

    def __init__(self, hint: Any) -> None:
        self._hint = hint

    def matches(self, subject: Any) -> bool:
        return isinstance(subject, Field) and subject.hint == self._hint


class AlwaysMatcher(Matcher):
    """Unconditional match — use as a catch-all / fallback node.

    ::

        AlwaysMatcher().matches(anything)   # True
    """

    def matches(self, subject: Any) -> bool:
        return True
