"""Type hints for attribute values passed to svg_fluent builders.

:author: Shay Hill
:created: 2025-07-09
"""

from collections.abc import Mapping
from enum import Enum
from typing import TypeAlias

# Types svg_fluent can format into an attribute value. A bool is a presence flag:
# True renders as name="name", False is never rendered.
ElemAttrib: TypeAlias = str | float | bool | Enum | None

# Type for an optional dictionary of element attributes.
OptionalElemAttribMapping: TypeAlias = Mapping[str, ElemAttrib] | None
