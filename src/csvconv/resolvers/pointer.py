"""JSON-Pointer-based ValueResolver.

Addresses a field inside a nested dict/list document:

* RFC 6901 JSON Pointer (``/a/b/0``) with ``~0`` / ``~1`` escapes
* ``-`` for list-append in *set*
* Intermediate containers are created on *set*
"""

from __future__ import annotations

from typing import Any, List

from ..core import ValueResolver


class PointerResolver(ValueResolver):
    """``ValueResolver`` with JSON Pointer semantics.

    The root pointer (``""`` or ``"/"``) names the whole document; it can be
    read but not written in place.
    """

    # -- read ---------------------------------------------------------------

    def get(self, path: str, data: Any) -> Any:
        """Read value at *path*.

        Examples::

            get("/a/b", {"a": {"b": 42}})       → 42
            get("/arr/0", {"arr": [1, 2]})      → 1
            get("/a~1b", {"a/b": 1})            → 1
        """
        cur: Any = data
        for token in self._tokens(path):
            if isinstance(cur, (list, tuple)):
                cur = cur[int(token)]
            else:
                cur = cur[token]
        return cur

    def exists(self, path: str, data: Any) -> bool:
        try:
            self.get(path, data)
            return True
        except (KeyError, IndexError, TypeError, ValueError):
            return False

    # -- write --------------------------------------------------------------

    def set(self, path: str, data: Any, value: Any) -> Any:
        """Write *value* at *path*, creating missing intermediate nodes.

        Special cases:

        * Leaf ``"-"``           → append to parent list.
        * Numeric leaf on a list → extend with ``None`` if index is out
                                   of range (auto-grow).

        Examples::

            set("/a/b", {}, 1)            → {"a": {"b": 1}}
            set("/arr/-", {"arr": []}, 2) → {"arr": [2]}
        """
        tokens = self._tokens(path)
        if not tokens:
            raise ValueError(f"{path!r}: cannot replace the document root in place")

        parent = self._ensure_parent(data, tokens)
        leaf = tokens[-1]

        if leaf == "-":
            if not isinstance(parent, list):
                raise TypeError(f"{path}: parent is not a list (append '-')")
            parent.append(value)
        elif isinstance(parent, list):
            idx = int(leaf)
            while idx >= len(parent):
                parent.append(None)
            parent[idx] = value
        else:
            parent[leaf] = value

        return data

    # -- internal helpers ---------------------------------------------------

    @staticmethod
    def _decode(tok: str) -> str:
        """Decode a single JSON Pointer token (RFC 6901)."""
        return tok.replace("~1", "/").replace("~0", "~")

    def _tokens(self, path: str) -> List[str]:
        if path in ("", "/"):
            return []
        return [self._decode(raw) for raw in path[1:].split("/")]

    @staticmethod
    def _ensure_parent(doc: Any, tokens: List[str]) -> Any:
        """Walk to the container of the last token, creating ``{}`` nodes on the way."""
        cur: Any = doc
        for token in tokens[:-1]:
            if isinstance(cur, list):
                idx = int(token)
                while idx >= len(cur):
                    cur.append({})
                if cur[idx] is None:
                    cur[idx] = {}
                cur = cur[idx]
            else:
                if cur.get(token) is None:
                    cur[token] = {}
                cur = cur[token]
        return cur
