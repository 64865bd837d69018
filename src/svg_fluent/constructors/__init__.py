"""Raise the level of the constructors module.

:author: Shay Hill
created: 12/22/2019.
"""

from svg_fluent.constructors.new_element import (
    insert_title,
    new_element,
    new_sub_element,
    update_element,
)

__all__ = ["insert_title", "new_element", "new_sub_element", "update_element"]
