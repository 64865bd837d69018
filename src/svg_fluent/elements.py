"""Immutable svg element builders.

:author: Shay Hill
:created: 2025-10-20

Each builder holds an AttributeSet, optional content, and an optional file path.
Every setter returns a new builder, so a partly configured builder can be reused.

    >>> icon = Svg().view_box("0 0 24 24").fill("none")
    >>> red = icon.stroke("red")
    >>> blue = icon.stroke("blue")

Fluent setters are installed from ``schema``: one snake-case method per attribute an
element accepts (``fill_opacity``, ``view_box``, ``clip_path_units``). ``set`` takes
any attribute name.

``render`` has two paths:

* with a file path, the file is loaded, sanitized, and the builder's attributes are
  merged into the element of the builder's tag (see ``assembler``).
* without one, the element is built from the builder's attributes and content.
"""

from __future__ import annotations

import dataclasses
import functools as ft
import os
from typing import TYPE_CHECKING, ClassVar

from lxml import etree
from typing_extensions import Self

from svg_fluent import schema
from svg_fluent.assembler import SvgAssembler
from svg_fluent.attribute_set import AttributeSet
from svg_fluent.constructors import insert_title, new_element, new_sub_element
from svg_fluent.exceptions import ConfigurationError, StructureError
from svg_fluent.string_conversion import svg_tostring
from svg_fluent.tags import SvgTag

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from svg_fluent.assembler import SupportsSanitize
    from svg_fluent.attrib_hints import ElemAttrib, OptionalElemAttribMapping
    from svg_fluent.config import AssemblerConfig

# wraps inline markup so a fragment with several top-level nodes can be parsed
_FRAGMENT = "fragment"


class _AttributeSetter:
    """A fluent setter for one attribute, bound to a builder on access."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.__doc__ = f"Return a new instance with the `{name}` attribute set."

    def __get__(
        self, instance: SvgElement | None, owner: type[SvgElement]
    ) -> Callable[[ElemAttrib], SvgElement] | _AttributeSetter:
        if instance is None:
            return self
        return ft.partial(instance.set, self.name)


def _install_setters(cls: type[SvgElement], names: Iterable[str]) -> None:
    """Add a fluent setter to a builder class for each attribute name.

    :param cls: builder class
    :param names: attribute names, each a key in ``schema.ATTRIBUTES``
    :effects: sets class attributes on ``cls``. Existing methods are not replaced.
    """
    for name in names:
        setter_name = schema.ATTRIBUTES[name].setter_name
        if not hasattr(cls, setter_name):
            setattr(cls, setter_name, _AttributeSetter(name))


def _append_text(elem: EtreeElement, text: str | None) -> None:
    """Append text after the last child of an element.

    :param elem: parent element
    :param text: text to append. None or "" to do nothing.
    :effects: updates ``elem.text`` or the tail of the last child
    """
    if not text:
        return
    if len(elem):
        elem[-1].tail = (elem[-1].tail or "") + text
    else:
        elem.text = (elem.text or "") + text


def _append_markup(elem: EtreeElement, markup: str) -> None:
    """Parse markup as a fragment and append its nodes to an element.

    :param elem: parent element. Fragment elements take its default namespace.
    :param markup: text, elements, or a mix (``"<circle r='1'/>label"``)
    :effects: appends text and children to ``elem``
    :raise StructureError: if markup is not a well-formed fragment
    """
    namespace = etree.QName(elem).namespace
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False)
    try:
        fragment = etree.fromstring(
            f"<{_FRAGMENT}{xmlns}>{markup}</{_FRAGMENT}>".encode(), parser
        )
    except etree.XMLSyntaxError as e:
        tag = etree.QName(elem).localname
        msg = f"Content of <{tag}> is not well-formed markup: {e}"
        raise StructureError(tag, msg) from e
    _append_text(elem, fragment.text)
    elem.extend(list(fragment))


@dataclasses.dataclass(frozen=True)
class SvgElement:
    """Base class for every svg element builder.

    :param attrib: the element's attributes
    :param items: content. Child builders and markup strings.
    :param file_path: optional svg file to render instead of ``items``
    """

    tag: ClassVar[SvgTag]
    attribute_names: ClassVar[tuple[str, ...]] = ()
    requires_source: ClassVar[bool] = False

    attrib: AttributeSet = dataclasses.field(default_factory=AttributeSet)
    items: tuple[SvgElement | str, ...] = ()
    file_path: str = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        _install_setters(cls, cls.attribute_names)

    def __str__(self) -> str:
        return self.render()

    def set(self, name: str, value: ElemAttrib) -> Self:
        """Return a new instance with one attribute set or removed.

        :param name: attribute name as it appears in svg (``stroke-width``)
        :param value: attribute value. None to remove the attribute.
        :return: new instance
        :raise ValidationError: if value fails validation for that attribute
        """
        return dataclasses.replace(self, attrib=self.attrib.set(name, value))

    def update(
        self, attrib: OptionalElemAttribMapping = None, /, **attributes: ElemAttrib
    ) -> Self:
        """Return a new instance with several attributes set or removed.

        :param attrib: optional mapping of svg attribute names to values
        :param attributes: attribute names and values
        :return: new instance
        :raise ValidationError: if any value fails validation
        """
        new_attrib = self.attrib.update(attrib, **attributes)
        return dataclasses.replace(self, attrib=new_attrib)

    def aria(self, name: str, value: ElemAttrib) -> Self:
        """Return a new instance with an ``aria-*`` attribute set or removed.

        :param name: name without the ``aria-`` prefix
        :param value: attribute value. None to remove the attribute.
        :return: new instance
        """
        return self.set(f"aria-{name}", value)

    def data(self, name: str, value: ElemAttrib) -> Self:
        """Return a new instance with a ``data-*`` attribute set or removed.

        :param name: name without the ``data-`` prefix
        :param value: attribute value. None to remove the attribute.
        :return: new instance
        """
        return self.set(f"data-{name}", value)

    def render(
        self,
        *,
        sanitizer: SupportsSanitize | None = None,
        config: AssemblerConfig | None = None,
    ) -> str:
        """Render the element as markup.

        :param sanitizer: optional sanitizer for the file path of this element and of
            file-based children
        :param config: optional file loading settings, also used for file-based
            children
        :return: markup of the element
        :raise ConfigurationError: if the element requires a file path or content
            and has neither
        """
        if self.requires_source and not self._has_source():
            tag = self.tag.value
            msg = f"File path and content cannot both be empty for <{tag}>."
            raise ConfigurationError(msg)
        if self.file_path:
            assembler = SvgAssembler(sanitizer, config)
            return assembler.assemble(self.file_path, self.attrib, self.tag.value)
        return svg_tostring(self.to_element(sanitizer=sanitizer, config=config))

    def _has_source(self) -> bool:
        """Determine if there is a file path or content that is not empty.

        :return: False if the file path is empty and every item is ""
        """
        if self.file_path:
            return True
        return any(not isinstance(x, str) or x for x in self.items)

    def to_element(
        self,
        *,
        sanitizer: SupportsSanitize | None = None,
        config: AssemblerConfig | None = None,
    ) -> EtreeElement:
        """Build the element from attributes and content.

        :param sanitizer: optional sanitizer for file-based children
        :param config: optional file loading settings for file-based children
        :return: a new lxml element. The file path of this element is ignored.
        """
        elem = new_element(self.tag.value, self.attrib)
        self._fill(elem, sanitizer, config)
        return elem

    def _append_to(
        self,
        parent: EtreeElement,
        sanitizer: SupportsSanitize | None,
        config: AssemblerConfig | None,
    ) -> None:
        """Render this element as the last child of ``parent``.

        :param parent: parent element
        :param sanitizer: sanitizer passed to ``render`` of the outermost element
        :param config: settings passed to ``render`` of the outermost element
        :effects: appends to ``parent``. A file-based element is rendered through
            the file path and appended as markup.
        """
        if self.file_path:
            _append_markup(parent, self.render(sanitizer=sanitizer, config=config))
            return
        elem = new_sub_element(parent, self.tag.value, self.attrib)
        self._fill(elem, sanitizer, config)

    def _fill(
        self,
        elem: EtreeElement,
        sanitizer: SupportsSanitize | None,
        config: AssemblerConfig | None,
    ) -> None:
        """Add the title and the content items to an element.

        :param elem: element built from this builder's attributes
        :param sanitizer: passed on to file-based children
        :param config: passed on to file-based children
        :effects: appends children and text to ``elem``
        """
        _ = insert_title(elem, self.attrib.title)
        for item in self.items:
            if isinstance(item, SvgElement):
                item._append_to(  # pyright: ignore[reportPrivateUsage]
                    elem, sanitizer, config
                )
            else:
                _append_markup(elem, item)


_install_setters(SvgElement, schema.GLOBAL)


class ContainerElement(SvgElement):
    """An element that takes content or a file path."""

    def content(self, *items: SvgElement | str) -> Self:
        """Return a new instance with its content replaced.

        :param items: child builders and markup strings, rendered in order
        :return: new instance
        """
        return dataclasses.replace(self, items=items)

    def file(self, path: str | os.PathLike[str]) -> Self:
        """Return a new instance that renders an svg file.

        :param path: path to an svg file. "" to render content instead.
        :return: new instance
        """
        return dataclasses.replace(self, file_path=os.fspath(path))


# ===================================================================================
#   Builders
# ===================================================================================


class Circle(SvgElement):
    """A ``<circle>`` element."""

    tag = SvgTag.CIRCLE
    attribute_names = schema.CIRCLE


class ClipPath(ContainerElement):
    """A ``<clipPath>`` element."""

    tag = SvgTag.CLIP_PATH
    attribute_names = schema.CLIP_PATH


class Defs(ContainerElement):
    """A ``<defs>`` element."""

    tag = SvgTag.DEFS
    attribute_names = schema.DEFS


class Ellipse(SvgElement):
    """An ``<ellipse>`` element."""

    tag = SvgTag.ELLIPSE
    attribute_names = schema.ELLIPSE


class Filter(ContainerElement):
    """A ``<filter>`` element."""

    tag = SvgTag.FILTER
    attribute_names = schema.FILTER


class ForeignObject(ContainerElement):
    """A ``<foreignObject>`` element."""

    tag = SvgTag.FOREIGN_OBJECT
    attribute_names = schema.FOREIGN_OBJECT


class G(ContainerElement):
    """A ``<g>`` element."""

    tag = SvgTag.G
    attribute_names = schema.G


class Image(SvgElement):
    """An ``<image>`` element."""

    tag = SvgTag.IMAGE
    attribute_names = schema.IMAGE


class Line(SvgElement):
    """A ``<line>`` element."""

    tag = SvgTag.LINE
    attribute_names = schema.LINE


class LinearGradient(ContainerElement):
    """A ``<linearGradient>`` element."""

    tag = SvgTag.LINEAR_GRADIENT
    attribute_names = schema.LINEAR_GRADIENT


class Marker(ContainerElement):
    """A ``<marker>`` element."""

    tag = SvgTag.MARKER
    attribute_names = schema.MARKER


class Mask(ContainerElement):
    """A ``<mask>`` element."""

    tag = SvgTag.MASK
    attribute_names = schema.MASK


class Path(SvgElement):
    """A ``<path>`` element."""

    tag = SvgTag.PATH
    attribute_names = schema.PATH


class Pattern(ContainerElement):
    """A ``<pattern>`` element."""

    tag = SvgTag.PATTERN
    attribute_names = schema.PATTERN


class Polygon(SvgElement):
    """A ``<polygon>`` element."""

    tag = SvgTag.POLYGON
    attribute_names = schema.POLYGON


class Polyline(SvgElement):
    """A ``<polyline>`` element."""

    tag = SvgTag.POLYLINE
    attribute_names = schema.POLYLINE


class RadialGradient(ContainerElement):
    """A ``<radialGradient>`` element."""

    tag = SvgTag.RADIAL_GRADIENT
    attribute_names = schema.RADIAL_GRADIENT


class Rect(SvgElement):
    """A ``<rect>`` element."""

    tag = SvgTag.RECT
    attribute_names = schema.RECT


class Stop(SvgElement):
    """A gradient ``<stop>`` element."""

    tag = SvgTag.STOP
    attribute_names = schema.STOP


class Svg(ContainerElement):
    """An ``<svg>`` element. Renders a file or content, and requires one of them.

    The title is rendered as a ``<title>`` first child, which screen readers
    announce, and never as a ``title`` attribute.
    """

    tag = SvgTag.SVG
    attribute_names = schema.SVG
    requires_source = True


class Symbol(ContainerElement):
    """A ``<symbol>`` element."""

    tag = SvgTag.SYMBOL
    attribute_names = schema.SYMBOL


class Text(ContainerElement):
    """A ``<text>`` element. Content is the text to display."""

    tag = SvgTag.TEXT
    attribute_names = schema.TEXT


class Use(SvgElement):
    """A ``<use>`` element."""

    tag = SvgTag.USE
    attribute_names = schema.USE
