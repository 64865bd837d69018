"""An immutable, ordered, validated mapping of attribute names to values.

:author: Shay Hill
:created: 2025-10-20

Every "setter" returns a new AttributeSet. The instance you hold never changes, so an
AttributeSet can be shared between builders without copying.

    >>> base = AttributeSet(fill="red")
    >>> bigger = base.set("r", 5)
    >>> dict(base), dict(bigger)
    ({'fill': 'red'}, {'fill': 'red', 'r': 5})

Setting a value to None removes it. Setting a value to "" stores "".
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from typing_extensions import Self

from svg_fluent.schema import validate_attribute
from svg_fluent.string_conversion import format_attr_value

if TYPE_CHECKING:
    from svg_fluent.attrib_hints import ElemAttrib, OptionalElemAttribMapping

# rendered as a <title> child element, never as an attribute
TITLE = "title"


class AttributeSet(Mapping[str, "ElemAttrib"]):
    """Immutable ordered attribute dictionary with copy-on-write setters."""

    __slots__ = ("_items",)

    def __init__(
        self, attrib: OptionalElemAttribMapping = None, /, **attributes: ElemAttrib
    ) -> None:
        """Validate and store initial attributes.

        :param attrib: optional mapping of attribute names to values. Use this for
            names that are not valid Python identifiers (``stroke-width``).
        :param attributes: attribute names and values
        :raise ValidationError: if any value fails validation
        """
        items: dict[str, ElemAttrib] = {}
        for name, value in {**(attrib or {}), **attributes}.items():
            if value is None:
                continue
            items[name] = validate_attribute(name, value)
        self._items = items

    @classmethod
    def _from_validated(cls, items: dict[str, ElemAttrib]) -> Self:
        """Create an instance without validating again.

        :param items: already-validated items. Will be owned by the new instance.
        :return: new AttributeSet
        """
        new = cls.__new__(cls)
        new._items = items
        return new

    def __getitem__(self, name: str) -> ElemAttrib:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeSet):
            return list(self._items.items()) == list(other._items.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def set(self, name: str, value: ElemAttrib) -> Self:
        """Return a new AttributeSet with one attribute set or removed.

        :param name: attribute name
        :param value: attribute value. None to remove the attribute.
        :return: new AttributeSet. Self is unchanged.
        :raise ValidationError: if value fails validation. Self is unchanged.

        An existing attribute keeps its position. A new attribute is added last.
        """
        if value is None:
            return self.remove(name)
        value = validate_attribute(name, value)
        return self._from_validated({**self._items, name: value})

    def remove(self, name: str) -> Self:
        """Return a new AttributeSet without an attribute.

        :param name: attribute name. Missing names are ignored.
        :return: new AttributeSet. Self is unchanged.
        """
        return self._from_validated(
            {k: v for k, v in self._items.items() if k != name}
        )

    def update(
        self, attrib: OptionalElemAttribMapping = None, /, **attributes: ElemAttrib
    ) -> Self:
        """Return a new AttributeSet with several attributes set or removed.

        :param attrib: optional mapping of attribute names to values
        :param attributes: attribute names and values
        :return: new AttributeSet. Self is unchanged.
        :raise ValidationError: if any value fails validation. Self is unchanged.
        """
        new = self
        for name, value in {**(attrib or {}), **attributes}.items():
            new = new.set(name, value)
        return new

    @property
    def title(self) -> str:
        """The text of the <title> child element or an empty string."""
        title = self._items.get(TITLE)
        return title if isinstance(title, str) else ""

    def renderable(self) -> Iterator[tuple[str, str]]:
        """Yield the name and string value of every attribute that is rendered.

        :yield: tuples of (attribute name, attribute value). Skips the title and
            False boolean attributes.
        """
        for name, value in self._items.items():
            if name == TITLE:
                continue
            formatted = format_attr_value(name, value)
            if formatted is not None:
                yield name, formatted
