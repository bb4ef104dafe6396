"""Storage resolvers — concrete ``ValueResolver`` implementations.

storage – object attributes and mapping/sequence items
pointer – RFC 6901 JSON Pointer into nested dict/list documents
query   – read-only JMESPath expressions
"""

from .pointer import PointerResolver
from .query import QueryResolver
from .storage import AttributeResolver, ItemResolver

__all__ = [
    "AttributeResolver",
    "ItemResolver",
    "PointerResolver",
    "QueryResolver",
]
