"""Import functions into the package namespace.

:author: ShayHill
:created: 2019-12-22
"""

from svg_fluent.assembler import (
    SanitizationResult,
    SanitizationStatus,
    SvgAssembler,
    assemble,
)
from svg_fluent.attribute_set import AttributeSet
from svg_fluent.config import DEFAULT_CONFIG, AssemblerConfig
from svg_fluent.constructors import (
    insert_title,
    new_element,
    new_sub_element,
    update_element,
)
from svg_fluent.elements import (
    Circle,
    ClipPath,
    ContainerElement,
    Defs,
    Ellipse,
    Filter,
    ForeignObject,
    G,
    Image,
    Line,
    LinearGradient,
    Marker,
    Mask,
    Path,
    Pattern,
    Polygon,
    Polyline,
    RadialGradient,
    Rect,
    Stop,
    Svg,
    SvgElement,
    Symbol,
    Text,
    Use,
)
from svg_fluent.exceptions import (
    ConfigurationError,
    FileReadError,
    SanitizationError,
    StructureError,
    SvgFluentError,
    ValidationError,
)
from svg_fluent.nsmap import NSMAP
from svg_fluent.sanitizer import Sanitizer, sanitize
from svg_fluent.string_conversion import format_number
from svg_fluent.tags import SvgTag
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

__all__ = [
    "DEFAULT_CONFIG",
    "NSMAP",
    "AssemblerConfig",
    "AttributeSet",
    "Circle",
    "ClipPath",
    "ConfigurationError",
    "ContainerElement",
    "CoordinateUnits",
    "Decoding",
    "Defs",
    "DominantBaseline",
    "Ellipse",
    "FetchPriority",
    "FileReadError",
    "FillRule",
    "Filter",
    "FontStyle",
    "ForeignObject",
    "G",
    "Image",
    "LengthAdjust",
    "Line",
    "LinearGradient",
    "Marker",
    "MarkerUnits",
    "Mask",
    "MaskType",
    "Orient",
    "Path",
    "Pattern",
    "Polygon",
    "Polyline",
    "PreserveAspectRatio",
    "RadialGradient",
    "Rect",
    "SanitizationError",
    "SanitizationResult",
    "SanitizationStatus",
    "Sanitizer",
    "SpreadMethod",
    "Stop",
    "StrokeLineCap",
    "StrokeLineJoin",
    "StructureError",
    "Svg",
    "SvgAssembler",
    "SvgElement",
    "SvgFluentError",
    "SvgTag",
    "Symbol",
    "Text",
    "TextAnchor",
    "Use",
    "ValidationError",
    "WritingMode",
    "assemble",
    "format_number",
    "insert_title",
    "new_element",
    "new_sub_element",
    "sanitize",
    "update_element",
]
