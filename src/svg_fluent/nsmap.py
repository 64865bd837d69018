"""xml namespace entries for svg files.

:author: Shay Hill
:created: 1/14/2021

Only the namespaces an svg_fluent attribute name can reference with a prefix
(``xlink:href``, ``xml:lang``). Namespace declarations found in a loaded file are
kept as the file declares them.
"""

from __future__ import annotations

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
NSMAP = {
    None: SVG_NAMESPACE,
    "svg": SVG_NAMESPACE,
    "xlink": "http://www.w3.org/1999/xlink",
    "xml": "http://www.w3.org/XML/1998/namespace",
}


def is_namespace_declaration(name: str) -> bool:
    """Determine if an attribute name is an xmlns declaration.

    :param name: attribute name as the caller passed it
    :return: True for ``xmlns`` and ``xmlns:prefix``
    """
    return name == "xmlns" or name.startswith("xmlns:")


def get_declared_prefix(name: str) -> str | None:
    """Get the prefix declared by an xmlns attribute name.

    :param name: ``xmlns`` or ``xmlns:prefix``
    :return: None for the default namespace, else the prefix
    """
    _, _, prefix = name.partition(":")
    return prefix or None
