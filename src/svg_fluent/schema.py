"""Attribute names, their validators, and the attributes each element accepts.

:author: Shay Hill
:created: 2025-10-20

Validation is keyed on the attribute name, so ``set("opacity", 1.5)`` fails on any
element. The per-element tuples only decide which fluent setters a builder class
gets.
"""

from __future__ import annotations

import dataclasses
import functools as ft
from typing import TYPE_CHECKING, TypeAlias

from svg_fluent import validators as val
from svg_fluent.string_conversion import to_snake_case
from svg_fluent.values import (
    CoordinateUnits,
    Decoding,
    DominantBaseline,
    FetchPriority,
    FillRule,
    FontStyle,
    LengthAdjust,
    MarkerUnits,
    MaskType,
    Orient,
    PreserveAspectRatio,
    SpreadMethod,
    StrokeLineCap,
    StrokeLineJoin,
    TextAnchor,
    WritingMode,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from svg_fluent.attrib_hints import ElemAttrib

Validator: TypeAlias = "Callable[[ElemAttrib], ElemAttrib]"


@dataclasses.dataclass(frozen=True)
class AttributeSpec:
    """An svg attribute name and the validator applied before it is stored."""

    name: str
    validator: Validator | None = None

    @property
    def setter_name(self) -> str:
        """Name of the fluent setter method for this attribute."""
        return to_snake_case(self.name)

    def validate(self, value: ElemAttrib) -> ElemAttrib:
        """Validate a candidate value.

        :param value: candidate value
        :return: value
        :raise ValidationError: if the validator rejects value
        """
        if self.validator is None:
            return value
        return self.validator(value)


def _enum_spec(name: str, allowed: Iterable[str] | type) -> AttributeSpec:
    """Create an AttributeSpec for an enumerated attribute.

    :param name: attribute name
    :param allowed: Enum class or iterable of allowed strings
    :return: AttributeSpec that validates with ``one_of``
    """
    return AttributeSpec(name, ft.partial(val.one_of, allowed=allowed, attribute=name))


def _validate_orient(value: ElemAttrib) -> ElemAttrib:
    """Accept an Orient keyword or an angle.

    :param value: candidate value
    :return: value
    :raise ValidationError: if value is neither an angle nor an Orient keyword
    """
    if value is None or val.to_float(value) is not None:
        return value
    return val.one_of(value, Orient, "orient")


_UNITS = (
    "clipPathUnits",
    "filterUnits",
    "gradientUnits",
    "maskContentUnits",
    "maskUnits",
    "patternContentUnits",
    "patternUnits",
    "primitiveUnits",
)

_PLAIN = (
    "class",
    "cx",
    "cy",
    "d",
    "dx",
    "dy",
    "fill",
    "font-family",
    "font-size",
    "font-weight",
    "fr",
    "fx",
    "fy",
    "gradientTransform",
    "height",
    "href",
    "id",
    "lang",
    "letter-spacing",
    "markerHeight",
    "markerWidth",
    "patternTransform",
    "points",
    "r",
    "refX",
    "refY",
    "role",
    "rotate",
    "rx",
    "ry",
    "stop-color",
    "stroke",
    "stroke-dasharray",
    "stroke-width",
    "style",
    "tabindex",
    "text-decoration",
    "textLength",
    "transform",
    "viewBox",
    "width",
    "word-spacing",
    "x",
    "x1",
    "x2",
    "xmlns",
    "y",
    "y1",
    "y2",
)

ATTRIBUTES: dict[str, AttributeSpec] = {
    **{name: AttributeSpec(name) for name in _PLAIN},
    **{name: _enum_spec(name, CoordinateUnits) for name in _UNITS},
    "decoding": _enum_spec("decoding", Decoding),
    "dominant-baseline": _enum_spec("dominant-baseline", DominantBaseline),
    "fetchpriority": _enum_spec("fetchpriority", FetchPriority),
    "fill-opacity": AttributeSpec("fill-opacity", val.opacity_like),
    "fill-rule": _enum_spec("fill-rule", FillRule),
    "font-style": _enum_spec("font-style", FontStyle),
    "lengthAdjust": _enum_spec("lengthAdjust", LengthAdjust),
    "markerUnits": _enum_spec("markerUnits", MarkerUnits),
    "mask-type": _enum_spec("mask-type", MaskType),
    "offset": AttributeSpec("offset", val.offset_like),
    "opacity": AttributeSpec("opacity", val.opacity_like),
    "orient": AttributeSpec("orient", _validate_orient),
    "pathLength": AttributeSpec("pathLength", ft.partial(val.at_least, low=0)),
    "preserveAspectRatio": _enum_spec("preserveAspectRatio", PreserveAspectRatio),
    "spreadMethod": _enum_spec("spreadMethod", SpreadMethod),
    "stop-opacity": AttributeSpec("stop-opacity", val.opacity_like),
    "stroke-linecap": _enum_spec("stroke-linecap", StrokeLineCap),
    "stroke-linejoin": _enum_spec("stroke-linejoin", StrokeLineJoin),
    "stroke-miterlimit": AttributeSpec(
        "stroke-miterlimit", ft.partial(val.at_least, low=1)
    ),
    "stroke-opacity": AttributeSpec("stroke-opacity", val.opacity_like),
    "text-anchor": _enum_spec("text-anchor", TextAnchor),
    "title": AttributeSpec("title", val.is_text),
    "writing-mode": _enum_spec("writing-mode", WritingMode),
}


def validate_attribute(name: str, value: ElemAttrib) -> ElemAttrib:
    """Validate a value for any attribute name.

    :param name: attribute name
    :param value: candidate value
    :return: value
    :raise ValidationError: if the attribute has a validator that rejects value

    Names without an entry (``data-*``, ``aria-*``, ...) are not validated.
    """
    spec = ATTRIBUTES.get(name)
    if spec is None:
        return value
    return spec.validate(value)


# ===================================================================================
#   Attributes per element. Every element also accepts GLOBAL.
# ===================================================================================

GLOBAL = ("class", "id", "lang", "role", "style", "tabindex", "title")

_PAINT = (
    "fill",
    "fill-opacity",
    "fill-rule",
    "opacity",
    "stroke",
    "stroke-dasharray",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "transform",
)

_BOX = ("height", "width", "x", "y")

_SHAPE = (*_PAINT, "pathLength")

CIRCLE = ("cx", "cy", "r", *_PAINT)
CLIP_PATH = ("clipPathUnits", "opacity", "transform")
DEFS: tuple[str, ...] = ()
ELLIPSE = ("cx", "cy", "rx", "ry", *_SHAPE)
FILTER = (*_BOX, "filterUnits", "primitiveUnits")
FOREIGN_OBJECT = (*_BOX, "opacity", "transform")
G = _PAINT
IMAGE = (
    *_BOX,
    "decoding",
    "fetchpriority",
    "href",
    "opacity",
    "preserveAspectRatio",
    "transform",
)
LINE = ("x1", "x2", "y1", "y2", *_SHAPE)
LINEAR_GRADIENT = (
    "gradientTransform",
    "gradientUnits",
    "href",
    "spreadMethod",
    "x1",
    "x2",
    "y1",
    "y2",
)
MARKER = (
    "markerHeight",
    "markerUnits",
    "markerWidth",
    "opacity",
    "orient",
    "preserveAspectRatio",
    "refX",
    "refY",
    "transform",
    "viewBox",
)
MASK = (*_BOX, "mask-type", "maskContentUnits", "maskUnits")
PATH = ("d", *_SHAPE)
PATTERN = (
    *_BOX,
    "href",
    "patternContentUnits",
    "patternTransform",
    "patternUnits",
    "preserveAspectRatio",
    "viewBox",
)
POLYGON = ("points", *_SHAPE)
POLYLINE = ("points", *_SHAPE)
RADIAL_GRADIENT = (
    "cx",
    "cy",
    "fr",
    "fx",
    "fy",
    "gradientTransform",
    "gradientUnits",
    "href",
    "opacity",
    "r",
    "spreadMethod",
)
RECT = (*_BOX, "rx", "ry", *_SHAPE)
STOP = ("offset", "stop-color", "stop-opacity")
SVG = (*_BOX, *_PAINT, "preserveAspectRatio", "viewBox", "xmlns")
SYMBOL = (
    *_BOX,
    "opacity",
    "preserveAspectRatio",
    "refX",
    "refY",
    "transform",
    "viewBox",
)
TEXT = (
    *_PAINT,
    "dominant-baseline",
    "dx",
    "dy",
    "font-family",
    "font-size",
    "font-style",
    "font-weight",
    "lengthAdjust",
    "letter-spacing",
    "rotate",
    "text-anchor",
    "text-decoration",
    "textLength",
    "word-spacing",
    "writing-mode",
    "x",
    "y",
)
USE = (*_BOX, "href", "opacity", "transform")
