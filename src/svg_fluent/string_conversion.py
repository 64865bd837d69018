"""Quasi-private functions for high-level string conversion.

:author: Shay Hill
:created: 7/26/2020

Rounding some numbers to ensure quality svg rendering:
* Rounding floats to six digits after the decimal
"""

from __future__ import annotations

import enum
import keyword
import re
from typing import TYPE_CHECKING, cast

import svg_path_data
from lxml import etree

from svg_fluent.nsmap import NSMAP

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from svg_fluent.attrib_hints import ElemAttrib


_CAMEL_HUMP = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def format_number(num: float | str, resolution: int | None = 6) -> str:
    """Format a number into an svg-readable float string with resolution = 6.

    :param num: number to format (string or float)
    :param resolution: number of digits after the decimal point, defaults to 6. None
        to match behavior of `str(num)`.
    :return: string representation of the number with six digits after the decimal
        (if in fixed-point notation). Will return exponential notation when shorter.
    """
    return svg_path_data.format_number(num, resolution=resolution)


def format_attr_value(key: str, val: ElemAttrib) -> str | None:
    """Get the string an attribute value renders as.

    :param key: attribute name. The value of a True boolean attribute.
    :param val: attribute value
    :return: the rendered string or None if the attribute is not rendered

    * None and False are not rendered
    * True renders as the attribute name (``hidden="hidden"``)
    * Enum members render as their value
    * int and float values are formatted with ``format_number``
    * strings are rendered as is. lxml escapes them on output.
    """
    if val is None or val is False:
        return None
    if val is True:
        return key
    if isinstance(val, enum.Enum):
        return str(val.value)
    if isinstance(val, (int, float)):
        return format_number(val)
    return val


def fix_key(key: str) -> str:
    """Convert a `namespace:name` attribute key to a qualified name.

    :param key: attribute name as given to a setter
    :return: the key lxml will accept for ``elem.set``

    Keys with an unknown prefix are returned unchanged, which lxml will reject.
    """
    if ":" in key and not key.startswith("{"):
        namespace, name = key.split(":", 1)
        if namespace in NSMAP:
            return str(etree.QName(NSMAP[namespace], name))
    return key


def to_snake_case(name: str) -> str:
    """Convert an svg attribute name to a Python identifier.

    :param name: svg attribute name (``viewBox``, ``fill-opacity``, ``class``)
    :return: snake-case identifier (``view_box``, ``fill_opacity``, ``class_``)
    """
    snake = _CAMEL_HUMP.sub("_", name).replace("-", "_").replace(":", "_").lower()
    if keyword.iskeyword(snake):
        return snake + "_"
    return snake


def svg_tostring(xml: EtreeElement) -> str:
    """Serialize one element without its tail.

    :param xml: element to serialize. This may be a descendant of a larger tree.
    :return: unicode markup of the element and its descendants. No xml declaration
        or doctype.
    """
    as_str = etree.tostring(xml, encoding="unicode", with_tail=False)
    return cast("str", as_str)
