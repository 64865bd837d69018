"""SVG Element constructors. Create an lxml element from an AttributeSet.

:author: Shay Hill
:created: 1/31/2020

This is principally to allow passing values, rather than strings, as svg element
parameters. An AttributeSet holds validated values; these functions turn them into
lxml elements and attributes.

The ``title`` of an AttributeSet is never an xml attribute. It becomes a <title>
child element, always the first child.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

from svg_fluent.exceptions import StructureError
from svg_fluent.nsmap import get_declared_prefix, is_namespace_declaration
from svg_fluent.string_conversion import fix_key
from svg_fluent.tags import SvgTag

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from svg_fluent.attribute_set import AttributeSet


def _get_nsmap(attrib: AttributeSet) -> dict[str | None, str]:
    """Collect namespace declarations from an AttributeSet.

    :param attrib: attributes, some of which may be xmlns declarations
    :return: nsmap to pass to ``etree.Element``
    """
    nsmap: dict[str | None, str] = {}
    for name, value in attrib.renderable():
        if is_namespace_declaration(name):
            nsmap[get_declared_prefix(name)] = value
    return nsmap


def new_element(tag: str, attrib: AttributeSet | None = None) -> EtreeElement:
    """Create an etree.Element from an AttributeSet.

    :param tag: local name of the element
    :param attrib: attributes. ``xmlns`` entries become namespace declarations.
    :returns: new ``tag`` element

        >>> elem = new_element('line', AttributeSet(x1=0, y1=0, x2=5, y2=5))
        >>> etree.tostring(elem)
        b'<line x1="0" y1="0" x2="5" y2="5"/>'

    A default namespace declared with ``xmlns`` is the namespace of the element.

        >>> elem = new_element('svg', AttributeSet(xmlns=SVG_NAMESPACE))
        >>> etree.tostring(elem)
        b'<svg xmlns="http://www.w3.org/2000/svg"/>'
    """
    if attrib is None:
        return etree.Element(tag)
    nsmap = _get_nsmap(attrib)
    namespace = nsmap.get(None)
    qname = etree.QName(namespace, tag) if namespace else tag
    elem = etree.Element(qname, nsmap=nsmap or None)
    return update_element(elem, attrib)


def new_sub_element(
    parent: EtreeElement, tag: str, attrib: AttributeSet | None = None
) -> EtreeElement:
    """Create an etree.SubElement in the namespace of its parent.

    :param parent: parent element
    :param tag: local name of the element
    :param attrib: attributes
    :returns: new ``tag`` element

        >>> parent = etree.Element('g')
        >>> _ = new_sub_element(parent, 'rect')
        >>> etree.tostring(parent)
        b'<g><rect/></g>'
    """
    namespace = etree.QName(parent).namespace
    elem = etree.SubElement(parent, etree.QName(namespace, tag) if namespace else tag)
    if attrib is not None:
        elem = update_element(elem, attrib)
    return elem


def _declare_namespace(
    elem: EtreeElement, prefix: str | None, namespace: str
) -> EtreeElement:
    """Copy an element into a new element that declares one more namespace.

    :param elem: an etree element that does not declare ``prefix``
    :param prefix: None for the default namespace, else the declared prefix
    :param namespace: namespace uri
    :return: the new element. It replaces ``elem`` in the parent of ``elem``.

    lxml cannot add a declaration to an existing element. For a default namespace,
    the new element and every descendant without a namespace move into
    ``namespace``, as they would if the declaration were in the source markup.
    """
    tag = etree.QName(elem)
    if prefix is None and tag.namespace is None:
        tag = etree.QName(namespace, tag.localname)
    nsmap = {**elem.nsmap, prefix: namespace}
    new = etree.Element(tag, attrib=dict(elem.attrib), nsmap=nsmap)
    new.text = elem.text
    new.tail = elem.tail
    new.extend(list(elem))
    if prefix is None:
        for descendant in new.iterdescendants():
            if isinstance(descendant.tag, str) and "}" not in descendant.tag:
                descendant.tag = etree.QName(namespace, descendant.tag)
    parent = elem.getparent()
    if parent is not None:
        parent.replace(elem, new)
    return new


def update_element(elem: EtreeElement, attrib: AttributeSet) -> EtreeElement:
    """Set every renderable attribute on an existing element.

    :param elem: an etree element
    :param attrib: attributes. These replace any attributes of the same name.
    :returns: the element with updated attributes. This is a new element that
        replaces ``elem`` if an xmlns entry declares a namespace ``elem`` does not.
    :raise StructureError: if an xmlns entry conflicts with a namespace already
        declared on ``elem``
    """
    for name, value in attrib.renderable():
        if is_namespace_declaration(name):
            prefix = get_declared_prefix(name)
            declared = elem.nsmap.get(prefix)
            if declared is None:
                elem = _declare_namespace(elem, prefix, value)
            elif declared != value:
                msg = f"Cannot set {name}='{value}'. Element declares '{declared}'."
                raise StructureError(etree.QName(elem).localname, msg)
            continue
        elem.set(fix_key(name), value)
    return elem


def insert_title(elem: EtreeElement, title: str) -> EtreeElement | None:
    """Insert a <title> element as the first child of ``elem``.

    :param elem: element to receive the title
    :param title: text of the title. Empty to do nothing.
    :return: the new title element or None if title is empty

    Any text before the first child of ``elem`` moves to the tail of the title, so
    the title is the first node inside ``elem``.
    """
    if not title:
        return None
    namespace = etree.QName(elem).namespace
    tag = SvgTag.TITLE.value
    title_elem = etree.Element(etree.QName(namespace, tag) if namespace else tag)
    title_elem.text = title
    title_elem.tail, elem.text = elem.text, None
    elem.insert(0, title_elem)
    return title_elem
