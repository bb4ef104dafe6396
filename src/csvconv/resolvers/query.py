"""JMESPath-based read-only ValueResolver.

Lets a record binder render values that are easier to *select* than to
address, e.g. ``orders[?status=='open'] | [0].total``.  Writing is not
supported: JMESPath expressions do not name a single storage location.
"""

from __future__ import annotations

from typing import Any

import jmespath

from ..core import ValueResolver
from ..errors import UnsupportedConversion


class QueryResolver(ValueResolver):
    """``ValueResolver`` that evaluates a JMESPath expression.

    Expressions are compiled once per resolver; a missing path reads as
    ``None``.
    """

    writable = False

    def __init__(self, expression: str, *, options: jmespath.Options | None = None) -> None:
        self._parsed = jmespath.compile(expression)
        self._options = options

    def get(self, path: str, data: Any) -> Any:
        return self._parsed.search(data, options=self._options)

    def set(self, path: str, data: Any, value: Any) -> Any:
        raise UnsupportedConversion(
            type(value).__qualname__, f"JMESPath {path!r}", "location is read-only"
        )

    def exists(self, path: str, data: Any) -> bool:
        return True
