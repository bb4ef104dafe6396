"""Tests for build_default_converter factory."""

from dataclasses import dataclass
from decimal import Decimal

import pytest
from csvconv import (
    DispatchNode,
    FieldCodec,
    HintMatcher,
    UnsupportedConversion,
    Unsigned,
    attribute_field,
    build_default_converter,
    get_field_as_string,
    set_field,
)


class DecimalCodec(FieldCodec):
    def decode(self, field, token):
        field.set(Decimal(token))

    def encode(self, field):
        return format(field.get(), "f")


@dataclass
class Invoice:
    number: str = ""
    lines: Unsigned = 0
    total: Decimal = Decimal("0")
    balance: int = 0
    ratio: float = 0.0


class TestBuildDefaultConverter:
    """Test build_default_converter factory function."""

    def test_default_kind_nodes(self):
        """Five primitive codecs plus the capability catch-all, last."""
        converter = build_default_converter()

        names = [node.name for node in converter.kinds.nodes()]
        assert set(names[:5]) == {"string", "bool", "int", "uint", "float"}
        assert names[-1] == "capability"

    def test_builds_working_converter(self, converter):
        invoice = Invoice()

        converter.set_field(attribute_field(invoice, "lines"), "3")
        converter.set_field(attribute_field(invoice, "number"), "INV-1")

        assert invoice.lines == 3
        assert invoice.number == "INV-1"

    def test_decimal_without_codec_is_read_only(self, converter):
        """Decimal renders through __str__ but cannot parse itself."""
        invoice = Invoice(total=Decimal("1.50"))

        assert converter.get_field_as_string(attribute_field(invoice, "total")) == "1.50"
        with pytest.raises(UnsupportedConversion):
            converter.set_field(attribute_field(invoice, "total"), "2")

    def test_extra_codecs(self):
        """Extra nodes take part in kind dispatch."""
        converter = build_default_converter(extra_codecs=[
            DispatchNode(name="decimal", priority=20, matcher=HintMatcher(Decimal), handler=DecimalCodec()),
        ])
        invoice = Invoice()

        converter.set_field(attribute_field(invoice, "total"), "1E+2")

        assert invoice.total == Decimal("100")
        assert converter.get_field_as_string(attribute_field(invoice, "total")) == "100"


class TestPrimitiveReadPath:
    """get_field_as_string on primitive fields holding out-of-range values."""

    @pytest.mark.parametrize("name,value", [
        ("balance", 2 ** 64), ("balance", 2 ** 63), ("balance", -2 ** 63 - 1),
        ("lines", 2 ** 64), ("lines", -1), ("balance", 1e30),
    ])
    def test_integer_field_is_not_wrapped(self, converter, name, value):
        invoice = Invoice()
        setattr(invoice, name, value)

        with pytest.raises(UnsupportedConversion, match="out of range"):
            converter.get_field_as_string(attribute_field(invoice, name))

    def test_integer_field_limits_render(self, converter):
        invoice = Invoice(lines=2 ** 64 - 1, balance=-2 ** 63)

        assert converter.get_field_as_string(attribute_field(invoice, "lines")) == "18446744073709551615"
        assert converter.get_field_as_string(attribute_field(invoice, "balance")) == "-9223372036854775808"

    def test_float_field_holding_huge_int_fails(self, converter):
        invoice = Invoice(ratio=10 ** 400)

        with pytest.raises(UnsupportedConversion, match="out of range"):
            converter.get_field_as_string(attribute_field(invoice, "ratio"))


class TestModuleShortcuts:
    """set_field / get_field_as_string on the shared converter."""

    def test_shortcuts(self):
        invoice = Invoice()

        set_field(attribute_field(invoice, "lines"), "0b11")

        assert invoice.lines == 3
        assert get_field_as_string(attribute_field(invoice, "lines")) == "3"
