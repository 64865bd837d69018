"""Validate attribute values before they are stored.

:author: Shay Hill
:created: 2025-10-20

Every validator returns the candidate unchanged or raises a ValidationError. None
always passes, because None unsets an attribute.
"""

from __future__ import annotations

import enum
import re
from typing import TYPE_CHECKING

from paragraphs import par

from svg_fluent.exceptions import ValidationError
from svg_fluent.string_conversion import format_number

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svg_fluent.attrib_hints import ElemAttrib

_NUMBER = re.compile(r"^\s*[-+]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][-+]?[0-9]+)?\s*$")


def to_float(value: ElemAttrib) -> float | None:
    """Read a number or a numeric string as a float.

    :param value: candidate attribute value
    :return: the float value or None if value is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and _NUMBER.match(value):
        return float(value)
    return None


def _allowed_tokens(allowed: type[enum.Enum] | Iterable[str]) -> list[str]:
    """Get the string values of an enum or an iterable of strings.

    :param allowed: an Enum class with str values or an iterable of strings
    :return: list of allowed strings
    """
    if isinstance(allowed, type) and issubclass(allowed, enum.Enum):
        return [str(x.value) for x in allowed]
    return list(allowed)


def one_of(
    value: ElemAttrib, allowed: type[enum.Enum] | Iterable[str], attribute: str
) -> ElemAttrib:
    """Require a value to be one of a closed set of tokens.

    :param value: candidate value. An Enum member or a string.
    :param allowed: an Enum class or an iterable of allowed strings
    :param attribute: attribute name for the error message
    :return: value
    :raise ValidationError: if value is not one of the allowed tokens
    """
    if value is None:
        return value
    tokens = _allowed_tokens(allowed)
    candidate = value.value if isinstance(value, enum.Enum) else value
    if isinstance(candidate, str) and candidate in tokens:
        return value
    quoted = ", ".join(f"'{x}'" for x in tokens)
    msg = par(
        f"""Invalid value '{candidate}' for attribute '{attribute}'. Allowed values
        are: {quoted}."""
    )
    raise ValidationError(msg)


def in_range(value: ElemAttrib, low: float, high: float) -> ElemAttrib:
    """Require a numeric value between low and high inclusive.

    :param value: candidate value. A number or a numeric string.
    :param low: minimum allowed value
    :param high: maximum allowed value
    :return: value
    :raise ValidationError: if value is not numeric or is out of bounds
    """
    if value is None:
        return value
    number = to_float(value)
    if number is None or not low <= number <= high:
        msg = par(
            f"""Value must be a number between '{format_number(low)}' and
            '{format_number(high)}' inclusive or None to unset."""
        )
        raise ValidationError(msg)
    return value


def at_least(value: ElemAttrib, low: float) -> ElemAttrib:
    """Require a numeric value greater than or equal to low.

    :param value: candidate value. A number or a numeric string.
    :param low: minimum allowed value
    :return: value
    :raise ValidationError: if value is not numeric or is less than low
    """
    if value is None:
        return value
    number = to_float(value)
    if number is None or number < low:
        if low == 0:
            msg = "Value must be a positive number or None to unset."
        else:
            msg = par(
                f"""Value must be a number greater than or equal to
                '{format_number(low)}' or None to unset."""
            )
        raise ValidationError(msg)
    return value


def opacity_like(value: ElemAttrib) -> ElemAttrib:
    """Require an opacity value from 0 to 1.

    :param value: candidate value
    :return: value
    :raise ValidationError: if value is not in [0, 1]
    """
    return in_range(value, 0, 1)


def offset_like(value: ElemAttrib) -> ElemAttrib:
    """Require a gradient stop offset, a number in [0, 1] or a percentage.

    :param value: candidate value. 0.5, "0.5", or "50%"
    :return: value
    :raise ValidationError: if value is out of bounds
    """
    if isinstance(value, str) and value.strip().endswith("%"):
        _ = in_range(value.strip()[:-1], 0, 100)
        return value
    return in_range(value, 0, 1)


def is_text(value: ElemAttrib) -> ElemAttrib:
    """Require a string value. Used for the title, which becomes element text.

    :param value: candidate value
    :return: value
    :raise ValidationError: if value is not a string or None
    """
    if value is None or isinstance(value, str):
        return value
    msg = "Title attribute must be a string or None."
    raise ValidationError(msg)
