"""Remove unsafe content from untrusted svg markup.

:author: Shay Hill
:created: 2025-10-20

The sanitizer works in two passes:

1. ``defusedxml`` parses the raw markup and raises if it declares entities or
   references external resources through a DTD. Those are the XXE and billion-laughs
   vectors, and the markup is rejected outright rather than cleaned.
2. lxml parses the same markup without resolving entities, without network access,
   and without comments or processing instructions. Script-bearing elements, event
   handler attributes, and (by default) remote references are then removed from the
   tree.

``sanitize`` returns the cleaned root element as a string, or an empty string when
nothing renderable is left. Malformed or entity-bearing markup raises.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, cast

import defusedxml.ElementTree as safe_etree
from lxml import etree

from svg_fluent.string_conversion import svg_tostring

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

_LOGGER = logging.getLogger(__name__)

# lowercase local names of elements removed with all of their descendants
_UNSAFE_ELEMENTS = frozenset(
    {"script", "foreignobject", "iframe", "object", "embed", "handler", "listener"}
)

# lowercase local names of animation elements that can write an unsafe value into
# another attribute
_ANIMATION_ELEMENTS = frozenset({"set", "animate", "animatemotion", "animatetransform"})

_SCRIPT_SCHEMES = re.compile(r"^\s*(javascript|vbscript|livescript)\s*:", re.IGNORECASE)
_DATA_IMAGE = re.compile(r"^\s*data:image/(png|gif|jpe?g|webp|bmp)[;,]", re.IGNORECASE)
_DATA_URI = re.compile(r"^\s*data:", re.IGNORECASE)
_LOCAL_REFERENCE = re.compile(r"^\s*#")
_URL_FUNCTION = re.compile(r"url\s*\(\s*['\"]?\s*(?P<target>[^)'\"]*)", re.IGNORECASE)
_UNSAFE_STYLE = re.compile(r"@import|javascript:|expression\s*\(", re.IGNORECASE)

# control characters and spaces, removed from a value before its scheme is checked
_URL_NOISE = re.compile(r"[\x00-\x20]+")


def _new_parser() -> etree.XMLParser:
    """Create an lxml parser that will not resolve or fetch anything.

    :return: a new XMLParser. Parsers are not shared between calls.
    """
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
        huge_tree=False,
        remove_comments=True,
        remove_pis=True,
    )


def _localname(name: str) -> str:
    """Strip the namespace or prefix from a tag or attribute name.

    :param name: a tag or attribute name in Clark notation (``{ns}href``), prefixed
        (``xlink:href``), or plain. May be empty.
    :return: the local name
    """
    return name.rpartition("}")[2].rpartition(":")[2]


def _strip_url_noise(value: str) -> str:
    """Remove control characters and spaces from a value.

    :param value: attribute value or style text
    :return: value as a browser reads its url scheme (``java\\tscript:`` becomes
        ``javascript:``)
    """
    return _URL_NOISE.sub("", value)


def _has_script_scheme(value: str) -> bool:
    """Determine if any ``;``-separated part of a value starts with a script scheme.

    :param value: attribute value, e.g., ``href`` or an animation ``values`` list
    :return: True if a part starts with ``javascript:`` or similar
    """
    parts = _strip_url_noise(value).split(";")
    return any(_SCRIPT_SCHEMES.match(x) for x in parts)


def _is_unsafe_href(value: str, *, remove_remote_references: bool) -> bool:
    """Determine if an href value should be removed.

    :param value: href or xlink:href value
    :param remove_remote_references: also treat anything that is not a local
        fragment or an embedded image as unsafe
    :return: True if the attribute should be removed
    """
    value = _strip_url_noise(value)
    if _SCRIPT_SCHEMES.match(value):
        return True
    if _DATA_URI.match(value) and not _DATA_IMAGE.match(value):
        return True
    if not remove_remote_references:
        return False
    return not (_LOCAL_REFERENCE.match(value) or _DATA_IMAGE.match(value))


def _has_remote_url(value: str) -> bool:
    """Determine if an attribute value references anything but a local fragment.

    :param value: any attribute value, e.g., ``fill="url(#grad)"``
    :return: True if the value has a ``url()`` pointing outside the document
    """
    for match in _URL_FUNCTION.finditer(value):
        if not _LOCAL_REFERENCE.match(match["target"]):
            return True
    return False


class Sanitizer:
    """Strip scripts, event handlers, entities, and remote references from svg."""

    def __init__(self, *, remove_remote_references: bool = True) -> None:
        """Configure the sanitizer.

        :param remove_remote_references: remove hrefs and ``url()`` values that
            point outside the document. Default True. Script and non-image data URIs
            are removed either way.
        """
        self.remove_remote_references = remove_remote_references

    def sanitize(self, markup: str) -> str:
        """Remove unsafe content from svg markup.

        :param markup: untrusted svg (or any xml) markup
        :return: the cleaned root element as a string. An empty string if the markup
            is blank or if the root element itself is unsafe.
        :raise defusedxml.DefusedXmlException: if the markup declares entities or
            references external entities
        :raise xml.etree.ElementTree.ParseError: if the markup is not well-formed
        """
        if not markup.strip():
            return ""
        as_bytes = markup.encode("utf-8")
        _ = safe_etree.fromstring(as_bytes)
        root = etree.fromstring(as_bytes, _new_parser())
        if self._is_unsafe_element(root):
            _LOGGER.debug("removed unsafe root element <%s>", _localname(root.tag))
            return ""
        self._clean_tree(root)
        return svg_tostring(root)

    def _is_unsafe_element(self, elem: EtreeElement) -> bool:
        """Determine if an element should be removed with its descendants.

        :param elem: an element from the parsed tree
        :return: True if the element is unsafe
        """
        name = _localname(elem.tag).lower()
        if name in _UNSAFE_ELEMENTS:
            return True
        if name == "style":
            text = "".join(elem.itertext())
            if _UNSAFE_STYLE.search(_strip_url_noise(text)):
                return True
            return self.remove_remote_references and _has_remote_url(text)
        if name in _ANIMATION_ELEMENTS:
            target = _localname(elem.get("attributeName", "")).lower()
            if target == "href" or target.startswith("on"):
                return True
            values = (elem.get(x, "") for x in ("to", "from", "values", "by"))
            return any(_has_script_scheme(x) for x in values)
        return False

    def _clean_tree(self, root: EtreeElement) -> None:
        """Remove unsafe nodes and attributes from a tree in place.

        :param root: root of the parsed tree. Must itself be safe.
        :effects: removes elements, entity references, and attributes
        """
        unsafe: list[EtreeElement] = []
        for node in root.iter():
            if not isinstance(node.tag, str):
                # entity references left by resolve_entities=False
                unsafe.append(node)
            elif self._is_unsafe_element(node):
                unsafe.append(node)
            else:
                self._clean_attributes(node)
        for node in unsafe:
            _LOGGER.debug("removed unsafe node %s", node.tag)
            _remove_keeping_tail(node)

    def _clean_attributes(self, elem: EtreeElement) -> None:
        """Remove unsafe attributes from one element.

        :param elem: an element from the parsed tree
        :effects: deletes attributes from ``elem.attrib``
        """
        for key, value in list(elem.attrib.items()):
            name = _localname(cast("str", key)).lower()
            if name.startswith("on"):
                unsafe = True
            elif name == "href":
                unsafe = _is_unsafe_href(
                    value, remove_remote_references=self.remove_remote_references
                )
            elif _has_script_scheme(value) or _UNSAFE_STYLE.search(
                _strip_url_noise(value)
            ):
                unsafe = True
            else:
                unsafe = self.remove_remote_references and _has_remote_url(value)
            if unsafe:
                _LOGGER.debug("removed attribute %s from <%s>", key, elem.tag)
                del elem.attrib[key]


def _remove_keeping_tail(node: EtreeElement) -> None:
    """Remove a node from its parent without losing the text that follows it.

    :param node: node to remove. Must have a parent.
    :effects: removes ``node`` from the tree. Moves ``node.tail`` to the previous
        sibling's tail or the parent's text.
    """
    parent = node.getparent()
    if parent is None:
        return
    if node.tail:
        previous = node.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + node.tail
        else:
            parent.text = (parent.text or "") + node.tail
    parent.remove(node)


def sanitize(markup: str) -> str:
    """Remove unsafe content from svg markup with the default Sanitizer.

    :param markup: untrusted svg markup
    :return: cleaned markup or an empty string
    """
    return Sanitizer().sanitize(markup)
