"""Test functions in constructors.new_element

:author: Shay Hill
:created: 1/31/2020
"""

import pytest
from lxml import etree

from svg_fluent import constructors
from svg_fluent.attribute_set import AttributeSet
from svg_fluent.exceptions import StructureError
from svg_fluent.nsmap import SVG_NAMESPACE


class TestNewElement:
    def test_params(self) -> None:
        """Pass values as strings"""
        attrib = AttributeSet({"x": 10, "y1": 80, "stroke-width": "2"})
        elem = constructors.new_element("line", attrib)
        assert etree.tostring(elem) == b'<line x="10" y1="80" stroke-width="2"/>'

    def test_no_attrib(self) -> None:
        """Create an empty element"""
        elem = constructors.new_element("g")
        assert etree.tostring(elem) == b"<g/>"

    def test_qualified_name_string_conversion(self) -> None:
        """If an attribute name has a known prefix, convert to qname"""
        elem = constructors.new_element("use", AttributeSet({"xlink:href": "#a"}))
        assert (
            etree.tostring(elem)
            == b'<use xmlns:ns0="http://www.w3.org/1999/xlink" ns0:href="#a"/>'
        )

    def test_float(self) -> None:
        """Floats at 0.6f precision"""
        elem = constructors.new_element("text", AttributeSet(x=1 / 3))
        assert etree.tostring(elem) == b'<text x="0.333333"/>'

    def test_title_is_not_an_attribute(self) -> None:
        """Do not set title as an attribute"""
        elem = constructors.new_element("g", AttributeSet(title="t", id="g1"))
        assert etree.tostring(elem) == b'<g id="g1"/>'

    def test_xmlns(self) -> None:
        """Use an xmlns attribute as the default namespace"""
        elem = constructors.new_element("svg", AttributeSet(xmlns=SVG_NAMESPACE))
        assert elem.tag == f"{{{SVG_NAMESPACE}}}svg"
        assert etree.tostring(elem) == b'<svg xmlns="http://www.w3.org/2000/svg"/>'


class TestNewSubElement:
    def test_sub_element(self) -> None:
        """New element is a sub-element of parent"""
        parent = constructors.new_element("g")
        _ = constructors.new_sub_element(parent, "rect")
        assert etree.tostring(parent) == b"<g><rect/></g>"

    def test_parent_namespace(self) -> None:
        """New element takes the namespace of its parent"""
        parent = constructors.new_element("svg", AttributeSet(xmlns=SVG_NAMESPACE))
        rect = constructors.new_sub_element(parent, "rect", AttributeSet(width=1))
        assert rect.tag == f"{{{SVG_NAMESPACE}}}rect"
        assert etree.tostring(parent) == (
            b'<svg xmlns="http://www.w3.org/2000/svg"><rect width="1"/></svg>'
        )


class TestUpdateElement:
    def test_new_params(self) -> None:
        """Add new params"""
        elem = constructors.new_element("line", AttributeSet(x=1))
        _ = constructors.update_element(elem, AttributeSet(y=2))
        assert etree.tostring(elem) == b'<line x="1" y="2"/>'

    def test_replace_params(self) -> None:
        """Replace existing params in place"""
        elem = etree.fromstring('<line x="1" y="2"/>')
        _ = constructors.update_element(elem, AttributeSet(x=3))
        assert etree.tostring(elem) == b'<line x="3" y="2"/>'

    def test_matching_xmlns(self) -> None:
        """Ignore an xmlns that matches the element's namespace"""
        elem = etree.fromstring(f'<svg xmlns="{SVG_NAMESPACE}"/>')
        _ = constructors.update_element(elem, AttributeSet(xmlns=SVG_NAMESPACE))
        assert etree.tostring(elem) == b'<svg xmlns="http://www.w3.org/2000/svg"/>'

    def test_undeclared_xmlns(self) -> None:
        """Move an element and its children into an undeclared namespace"""
        elem = etree.fromstring("<svg><circle/></svg>")
        elem = constructors.update_element(elem, AttributeSet(xmlns=SVG_NAMESPACE))
        assert elem.tag == f"{{{SVG_NAMESPACE}}}svg"
        assert elem[0].tag == f"{{{SVG_NAMESPACE}}}circle"
        assert etree.tostring(elem) == (
            b'<svg xmlns="http://www.w3.org/2000/svg"><circle/></svg>'
        )

    def test_undeclared_xmlns_in_tree(self) -> None:
        """Replace a nested element in its parent"""
        root = etree.fromstring("<g><svg/>tail</g>")
        elem = constructors.update_element(root[0], AttributeSet(xmlns=SVG_NAMESPACE))
        assert root[0] is elem
        assert elem.tail == "tail"
        assert elem.tag == f"{{{SVG_NAMESPACE}}}svg"

    def test_conflicting_xmlns(self) -> None:
        """Raise a StructureError if xmlns conflicts with the element"""
        elem = etree.fromstring(f'<svg xmlns="{SVG_NAMESPACE}"/>')
        with pytest.raises(StructureError, match="Cannot set xmlns"):
            _ = constructors.update_element(elem, AttributeSet(xmlns="urn:other"))


class TestInsertTitle:
    def test_before_first_child(self) -> None:
        """Insert title before existing children"""
        elem = etree.fromstring("<svg><circle/></svg>")
        _ = constructors.insert_title(elem, "Icon")
        assert etree.tostring(elem) == b"<svg><title>Icon</title><circle/></svg>"

    def test_only_child(self) -> None:
        """Append title to an empty element"""
        elem = etree.fromstring("<svg/>")
        _ = constructors.insert_title(elem, "Icon")
        assert etree.tostring(elem) == b"<svg><title>Icon</title></svg>"

    def test_before_text(self) -> None:
        """Insert title before leading text"""
        elem = etree.fromstring("<text>label</text>")
        _ = constructors.insert_title(elem, "Icon")
        assert etree.tostring(elem) == b"<text><title>Icon</title>label</text>"

    def test_empty_title(self) -> None:
        """Do nothing for an empty title"""
        elem = etree.fromstring("<svg><circle/></svg>")
        assert constructors.insert_title(elem, "") is None
        assert etree.tostring(elem) == b"<svg><circle/></svg>"

    def test_namespace(self) -> None:
        """Create title in the namespace of its parent"""
        elem = etree.fromstring(f'<svg xmlns="{SVG_NAMESPACE}"/>')
        title = constructors.insert_title(elem, "Icon")
        assert title is not None
        assert title.tag == f"{{{SVG_NAMESPACE}}}title"
