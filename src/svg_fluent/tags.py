"""Element names svg_fluent builders declare.

:author: Shay Hill
:created: 2025-10-20
"""

from __future__ import annotations

import enum


class SvgTag(enum.Enum):
    """Local name of each element an svg_fluent builder renders."""

    CIRCLE = "circle"
    CLIP_PATH = "clipPath"
    DEFS = "defs"
    ELLIPSE = "ellipse"
    FILTER = "filter"
    FOREIGN_OBJECT = "foreignObject"
    G = "g"
    IMAGE = "image"
    LINE = "line"
    LINEAR_GRADIENT = "linearGradient"
    MARKER = "marker"
    MASK = "mask"
    PATH = "path"
    PATTERN = "pattern"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    RADIAL_GRADIENT = "radialGradient"
    RECT = "rect"
    STOP = "stop"
    SVG = "svg"
    SYMBOL = "symbol"
    TEXT = "text"
    TITLE = "title"
    USE = "use"
