"""csvconv: type-directed conversion between typed fields and CSV text tokens."""

from .codecs import CapabilityCodec, MarshalRenderer, PrimitiveCodec, StringRenderer, UnmarshalParser
from .core import (
    Converter,
    DispatchNode,
    DispatchRegistry,
    Field,
    FieldCodec,
    Kind,
    Matcher,
    Parser,
    Renderer,
    Unsigned,
    ValueResolver,
    kind_of,
)
from .errors import ConversionError, ParseFailure, UnsupportedConversion
from .factory import build_default_converter, get_field_as_string, set_field
from .fields import attribute_field, detached_field, item_field, pointer_field, query_field
from .indirection import IndirectionResolver
from .matchers import AlwaysMatcher, HintMatcher, KindMatcher
from .primitives import (
    BUILTIN_CONVERTERS,
    check_bounds,
    format_float,
    to_bool,
    to_float,
    to_int,
    to_string,
    to_uint,
)
from .protocols import (
    MarshallerMatcher,
    Stringer,
    StringerMatcher,
    TypeMarshaller,
    TypeUnmarshaller,
    UnmarshallerMatcher,
    is_marshaller,
    is_stringer,
    is_unmarshaller,
)
from .resolvers import AttributeResolver, ItemResolver, PointerResolver, QueryResolver
from .wrappers import Ref, layer_of, zero_value

__all__ = [
    # core
    "Converter",
    "DispatchNode",
    "DispatchRegistry",
    "Field",
    "FieldCodec",
    "Kind",
    "Matcher",
    "Parser",
    "Renderer",
    "Unsigned",
    "ValueResolver",
    "kind_of",
    # errors
    "ConversionError",
    "ParseFailure",
    "UnsupportedConversion",
    # factory
    "build_default_converter",
    "get_field_as_string",
    "set_field",
    # fields
    "attribute_field",
    "detached_field",
    "item_field",
    "pointer_field",
    "query_field",
    # indirection / wrappers
    "IndirectionResolver",
    "Ref",
    "layer_of",
    "zero_value",
    # matchers
    "AlwaysMatcher",
    "HintMatcher",
    "KindMatcher",
    # primitives
    "BUILTIN_CONVERTERS",
    "check_bounds",
    "format_float",
    "to_bool",
    "to_float",
    "to_int",
    "to_string",
    "to_uint",
    # protocols
    "MarshallerMatcher",
    "Stringer",
    "StringerMatcher",
    "TypeMarshaller",
    "TypeUnmarshaller",
    "UnmarshallerMatcher",
    "is_marshaller",
    "is_stringer",
    "is_unmarshaller",
    # codecs
    "CapabilityCodec",
    "MarshalRenderer",
    "PrimitiveCodec",
    "StringRenderer",
    "UnmarshalParser",
    # resolvers
    "AttributeResolver",
    "ItemResolver",
    "PointerResolver",
    "QueryResolver",
]
