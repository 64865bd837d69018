"""Load an svg file, sanitize it, and merge builder attributes into it.

:author: Shay Hill
:created: 2025-10-20

This is the "render from file" path of every svg_fluent element:

1. read the file
2. sanitize the markup
3. parse the cleaned markup and find the element the builder declares (``svg`` for
   an Svg builder, ``clipPath`` for a ClipPath builder, ...)
4. insert the builder's title as a <title> first child
5. set the builder's attributes on that element. Builder attributes replace file
   attributes of the same name.
6. serialize that element

Nothing is cached. Two calls with the same file contents and the same attributes
return identical strings.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from lxml import etree

from svg_fluent.config import DEFAULT_CONFIG, AssemblerConfig
from svg_fluent.constructors import insert_title, update_element
from svg_fluent.exceptions import FileReadError, SanitizationError, StructureError
from svg_fluent.sanitizer import Sanitizer
from svg_fluent.string_conversion import svg_tostring

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from svg_fluent.attribute_set import AttributeSet

_LOGGER = logging.getLogger(__name__)


class SupportsSanitize(Protocol):
    """Anything with a ``sanitize(markup) -> markup`` method."""

    def sanitize(self, markup: str) -> str:
        """Return cleaned markup or an empty string."""
        ...


class SanitizationStatus(enum.Enum):
    """Outcome of one sanitizer call."""

    CLEANED = "cleaned"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclasses.dataclass(frozen=True)
class SanitizationResult:
    """Cleaned markup, an empty result, or the reason the sanitizer failed."""

    status: SanitizationStatus
    markup: str = ""
    reason: str = ""
    error: Exception | None = None

    @classmethod
    def from_sanitizer(
        cls, sanitizer: SupportsSanitize, markup: str
    ) -> SanitizationResult:
        """Run a sanitizer and classify the outcome.

        :param sanitizer: object with a ``sanitize`` method
        :param markup: raw markup
        :return: CLEANED with the cleaned markup, EMPTY if the sanitizer returned
            nothing, or FAILURE with the exception if the sanitizer raised.
        """
        try:
            cleaned = sanitizer.sanitize(markup)
        except Exception as e:  # noqa: BLE001 any sanitizer failure is classified
            reason = f"{type(e).__name__}: {e}"
            return cls(SanitizationStatus.FAILURE, reason=reason, error=e)
        if not cleaned or not cleaned.strip():
            return cls(SanitizationStatus.EMPTY)
        return cls(SanitizationStatus.CLEANED, markup=cleaned)


def _new_parser() -> etree.XMLParser:
    """Create a parser for already-sanitized markup.

    :return: a new XMLParser that drops blank text and resolves nothing
    """
    return etree.XMLParser(
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def _read_file(path: Path, config: AssemblerConfig) -> str:
    """Read an svg file as text.

    :param path: path to the svg file
    :param config: read limit and encoding
    :return: file contents
    :raise FileReadError: if the file is missing, unreadable, too large, or not
        text in ``config.encoding``
    """
    try:
        if config.max_file_bytes is not None:
            size = path.stat().st_size
            if size > config.max_file_bytes:
                reason = f"File is {size} bytes. Limit is {config.max_file_bytes}."
                raise FileReadError(path, reason)
        return path.read_bytes().decode(config.encoding)
    except FileReadError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e


def find_element(root: EtreeElement, tag: str) -> EtreeElement:
    """Find the first element (in document order) with a local name.

    :param root: root of a parsed tree
    :param tag: local name to search for, e.g., "svg" or "clipPath"
    :return: root if its local name matches, else the first matching descendant
    :raise StructureError: if no element has that local name
    """
    for elem in root.iter():
        if isinstance(elem.tag, str) and etree.QName(elem).localname == tag:
            return elem
    raise StructureError(tag)


class SvgAssembler:
    """Render an svg file through a sanitizer with builder attributes merged in."""

    def __init__(
        self,
        sanitizer: SupportsSanitize | None = None,
        config: AssemblerConfig | None = None,
    ) -> None:
        """Configure the assembler.

        :param sanitizer: optional sanitizer. Defaults to a new Sanitizer.
        :param config: optional settings. Defaults to DEFAULT_CONFIG.
        """
        self.sanitizer = Sanitizer() if sanitizer is None else sanitizer
        self.config = DEFAULT_CONFIG if config is None else config

    def assemble(
        self, file_path: str | os.PathLike[str], attrib: AttributeSet, tag: str
    ) -> str:
        """Load, sanitize, merge, and serialize one svg file.

        :param file_path: path to an svg file
        :param attrib: builder attributes. Their title becomes a <title> element.
        :param tag: local name of the element to render
        :return: the serialized element. An empty string if the sanitizer raised and
            ``config.raise_on_sanitizer_error`` is False.
        :raise FileReadError: if the file cannot be read
        :raise SanitizationError: if the sanitizer returns nothing, or if the
            sanitizer raised and ``config.raise_on_sanitizer_error`` is True
        :raise StructureError: if the cleaned markup is not well-formed or has no
            ``tag`` element, or if an xmlns attribute conflicts with the file
        """
        path = Path(file_path)
        raw = _read_file(path, self.config)
        _LOGGER.debug("read %d characters from %s", len(raw), path)

        result = SanitizationResult.from_sanitizer(self.sanitizer, raw)
        if result.status is SanitizationStatus.FAILURE:
            if self.config.raise_on_sanitizer_error:
                raise SanitizationError(path, result.reason) from result.error
            _LOGGER.warning(
                "sanitizer failed on %s, rendering nothing: %s", path, result.reason
            )
            return ""
        if result.status is SanitizationStatus.EMPTY:
            raise SanitizationError(path)

        try:
            root = etree.fromstring(result.markup.encode("utf-8"), _new_parser())
        except etree.XMLSyntaxError as e:
            msg = f"Sanitized markup from '{path}' is not well-formed: {e}"
            raise StructureError(tag, msg) from e

        elem = find_element(root, tag)
        _ = insert_title(elem, attrib.title)
        elem = update_element(elem, attrib)
        return svg_tostring(elem)


def assemble(
    file_path: str | os.PathLike[str],
    attrib: AttributeSet,
    tag: str,
    *,
    sanitizer: SupportsSanitize | None = None,
    config: AssemblerConfig | None = None,
) -> str:
    """Load, sanitize, merge, and serialize one svg file.

    :param file_path: path to an svg file
    :param attrib: builder attributes
    :param tag: local name of the element to render
    :param sanitizer: optional sanitizer. Defaults to a new Sanitizer.
    :param config: optional settings. Defaults to DEFAULT_CONFIG.
    :return: the serialized element
    """
    return SvgAssembler(sanitizer, config).assemble(file_path, attrib, tag)
