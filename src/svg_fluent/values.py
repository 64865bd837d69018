"""Closed sets of svg attribute values.

:author: Shay Hill
:created: 2025-10-20

Pass a member (``SpreadMethod.REFLECT``) or its string value (``"reflect"``) to a
setter. Either way, the string value is what is rendered.
"""

from __future__ import annotations

import enum


class CoordinateUnits(enum.Enum):
    """Geometry in user space or relative to the bounding box of an element.

    Used by clipPathUnits, filterUnits, primitiveUnits, gradientUnits, maskUnits,
    maskContentUnits, patternUnits, and patternContentUnits.
    """

    OBJECT_BOUNDING_BOX = "objectBoundingBox"
    USER_SPACE_ON_USE = "userSpaceOnUse"


class Decoding(enum.Enum):
    """Image decoding hint."""

    ASYNC = "async"
    AUTO = "auto"
    SYNC = "sync"


class DominantBaseline(enum.Enum):
    """Baseline used to align text."""

    ALPHABETIC = "alphabetic"
    AUTO = "auto"
    CENTRAL = "central"
    HANGING = "hanging"
    IDEOGRAPHIC = "ideographic"
    MATHEMATICAL = "mathematical"
    MIDDLE = "middle"
    TEXT_BOTTOM = "text-bottom"
    TEXT_TOP = "text-top"


class FetchPriority(enum.Enum):
    """Relative priority for fetching an external image."""

    AUTO = "auto"
    HIGH = "high"
    LOW = "low"


class FillRule(enum.Enum):
    """Algorithm to determine the inside of a shape."""

    EVENODD = "evenodd"
    NONZERO = "nonzero"


class FontStyle(enum.Enum):
    """Font style for text."""

    ITALIC = "italic"
    NORMAL = "normal"
    OBLIQUE = "oblique"


class LengthAdjust(enum.Enum):
    """How text is stretched to textLength."""

    SPACING = "spacing"
    SPACING_AND_GLYPHS = "spacingAndGlyphs"


class MarkerUnits(enum.Enum):
    """Coordinate system for markerWidth, markerHeight, and marker contents."""

    STROKE_WIDTH = "strokeWidth"
    USER_SPACE_ON_USE = "userSpaceOnUse"


class MaskType(enum.Enum):
    """Whether a mask uses luminance or alpha values."""

    ALPHA = "alpha"
    LUMINANCE = "luminance"


class Orient(enum.Enum):
    """Keyword orientations for a marker. Numeric angles are accepted as well."""

    AUTO = "auto"
    AUTO_START_REVERSE = "auto-start-reverse"


class PreserveAspectRatio(enum.Enum):
    """Alignment and scaling of a viewBox inside a viewport."""

    NONE = "none"
    X_MAX_Y_MAX = "xMaxYMax"
    X_MAX_Y_MAX_MEET = "xMaxYMax meet"
    X_MAX_Y_MAX_SLICE = "xMaxYMax slice"
    X_MAX_Y_MID = "xMaxYMid"
    X_MAX_Y_MID_MEET = "xMaxYMid meet"
    X_MAX_Y_MID_SLICE = "xMaxYMid slice"
    X_MAX_Y_MIN = "xMaxYMin"
    X_MAX_Y_MIN_MEET = "xMaxYMin meet"
    X_MAX_Y_MIN_SLICE = "xMaxYMin slice"
    X_MID_Y_MAX = "xMidYMax"
    X_MID_Y_MAX_MEET = "xMidYMax meet"
    X_MID_Y_MAX_SLICE = "xMidYMax slice"
    X_MID_Y_MID = "xMidYMid"
    X_MID_Y_MID_MEET = "xMidYMid meet"
    X_MID_Y_MID_SLICE = "xMidYMid slice"
    X_MID_Y_MIN = "xMidYMin"
    X_MID_Y_MIN_MEET = "xMidYMin meet"
    X_MID_Y_MIN_SLICE = "xMidYMin slice"
    X_MIN_Y_MAX = "xMinYMax"
    X_MIN_Y_MAX_MEET = "xMinYMax meet"
    X_MIN_Y_MAX_SLICE = "xMinYMax slice"
    X_MIN_Y_MID = "xMinYMid"
    X_MIN_Y_MID_MEET = "xMinYMid meet"
    X_MIN_Y_MID_SLICE = "xMinYMid slice"
    X_MIN_Y_MIN = "xMinYMin"
    X_MIN_Y_MIN_MEET = "xMinYMin meet"
    X_MIN_Y_MIN_SLICE = "xMinYMin slice"


class SpreadMethod(enum.Enum):
    """How a gradient fills outside its bounds."""

    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class StrokeLineCap(enum.Enum):
    """Shape at the end of open subpaths."""

    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class StrokeLineJoin(enum.Enum):
    """Shape at the corners of paths."""

    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"


class TextAnchor(enum.Enum):
    """Text alignment relative to the anchor point."""

    END = "end"
    MIDDLE = "middle"
    START = "start"


class WritingMode(enum.Enum):
    """Direction of text flow."""

    HORIZONTAL_TB = "horizontal-tb"
    SIDEWAYS_LR = "sideways-lr"
    SIDEWAYS_RL = "sideways-rl"
    VERTICAL_LR = "vertical-lr"
    VERTICAL_RL = "vertical-rl"
