"""Test functions in string_conversion.py.

:author: Shay Hill
:created: 2023-09-23
"""

# pyright: reportPrivateUsage=false
import itertools as it
import random
from collections.abc import Iterator

from lxml import etree

import svg_fluent.string_conversion as mod
from svg_fluent.values import SpreadMethod

_FLOAT_ITERATIONS = 100


def random_floats() -> Iterator[float]:
    """Yield random float values within(-ish) precision limits."""
    for _ in range(_FLOAT_ITERATIONS):
        yield random.uniform(1e-20, 1e20)


def random_ints() -> Iterator[int]:
    """Yield random integer values."""
    big_int = 2**63 - 1
    for _ in range(_FLOAT_ITERATIONS):
        yield random.randint(-big_int, big_int)


class TestFormatNumber:
    """Test format_number function."""

    def test_negative_zero(self):
        """Remove "-" from "-0"."""
        assert mod.format_number(-0.0000000001) == "0"

    def test_round_to_int(self):
        """Round to int if no decimal values !- 0."""
        assert mod.format_number(1.0000000001) == "1"

    def test_six_digits(self):
        """Round to six digits after the decimal."""
        assert mod.format_number(1 / 3) == "0.333333"

    def test_always_str(self):
        """Every number formats to a str that float can read."""
        for num in it.chain(random_floats(), random_ints()):
            _ = float(mod.format_number(num))


class TestFormatAttrValue:
    """Test format_attr_value function."""

    def test_float(self):
        """Return string of float."""
        assert mod.format_attr_value("x", 1.0) == "1"

    def test_true(self):
        """Render a True boolean attribute as its own name."""
        assert mod.format_attr_value("autofocus", True) == "autofocus"

    def test_false(self):
        """Do not render a False boolean attribute."""
        assert mod.format_attr_value("autofocus", False) is None

    def test_none(self):
        """Do not render None."""
        assert mod.format_attr_value("fill", None) is None

    def test_enum(self):
        """Render the value of an Enum member."""
        assert mod.format_attr_value("spreadMethod", SpreadMethod.REFLECT) == "reflect"

    def test_empty_string(self):
        """Render an empty string as is."""
        assert mod.format_attr_value("fill", "") == ""


class TestFixKey:
    """Test fix_key function."""

    def test_plain(self):
        """Return plain keys unchanged."""
        assert mod.fix_key("stroke-width") == "stroke-width"

    def test_qualified(self):
        """Convert known prefixes to Clark notation."""
        assert mod.fix_key("xlink:href") == "{http://www.w3.org/1999/xlink}href"

    def test_unknown_prefix(self):
        """Return keys with an unknown prefix unchanged."""
        assert mod.fix_key("foo:bar") == "foo:bar"


class TestToSnakeCase:
    """Test to_snake_case function."""

    def test_camel(self):
        """Split camel humps."""
        assert mod.to_snake_case("viewBox") == "view_box"
        assert mod.to_snake_case("clipPathUnits") == "clip_path_units"

    def test_kebab(self):
        """Replace hyphens."""
        assert mod.to_snake_case("fill-opacity") == "fill_opacity"

    def test_keyword(self):
        """Add a trailing underscore to Python keywords."""
        assert mod.to_snake_case("class") == "class_"

    def test_digits(self):
        """Keep digits attached."""
        assert mod.to_snake_case("x1") == "x1"


class TestSvgTostring:
    """Test svg_tostring function."""

    def test_no_tail(self):
        """Do not serialize the tail of an element."""
        root = etree.fromstring("<g><rect/>tail</g>")
        assert mod.svg_tostring(root[0]) == "<rect/>"

    def test_unicode(self):
        """Return str, not bytes."""
        root = etree.fromstring("<text>é</text>")
        assert mod.svg_tostring(root) == "<text>é</text>"
