"""Exceptions raised while building or rendering svg elements.

:author: Shay Hill
:created: 2025-10-20

Each exception also subclasses the builtin a caller would expect to catch, so
``except OSError`` still catches an unreadable svg file.
"""

from __future__ import annotations

import os


class SvgFluentError(Exception):
    """Base class for every svg_fluent exception."""


class ConfigurationError(SvgFluentError, ValueError):
    """An element cannot render with the configuration it was given."""


class ValidationError(SvgFluentError, ValueError):
    """An attribute value failed validation at the setter."""


class FileReadError(SvgFluentError, OSError):
    """An svg file could not be read."""

    def __init__(self, path: str | os.PathLike[str], reason: str = "") -> None:
        """Record the path that could not be read.

        :param path: path to the svg file
        :param reason: optional description appended to the message
        """
        self.path = os.fspath(path)
        msg = f"Failed to read file: '{self.path}'."
        if reason:
            msg = f"{msg} {reason}"
        super().__init__(msg)


class SanitizationError(SvgFluentError, RuntimeError):
    """Sanitizing an svg file left nothing to render."""

    def __init__(self, path: str | os.PathLike[str], reason: str = "") -> None:
        """Record the path that could not be sanitized.

        :param path: path to the svg file
        :param reason: optional description appended to the message
        """
        self.path = os.fspath(path)
        msg = f"Failed to sanitize SVG content from file: '{self.path}'."
        if reason:
            msg = f"{msg} {reason}"
        super().__init__(msg)


class StructureError(SvgFluentError, ValueError):
    """Markup does not have the structure an element needs."""

    def __init__(self, expected: str, reason: str = "") -> None:
        """Record the element name that was expected.

        :param expected: local name of the element that was expected
        :param reason: optional description. Defaults to a missing-element message.
        """
        self.expected = expected
        super().__init__(reason or f"Markup has no '{expected}' element.")
