from rxselect.theme.theme import (
    ITEM_CLASS,
    ITEM_STYLE,
    LIST_CLASS,
    LIST_RADIUS,
    LIST_STYLE,
    SPACING_BORDERED,
    SPACING_UNBORDERED,
    label_style,
    list_spacing,
)
from rxselect.theme.tokens import THEME

__all__ = [
    "ITEM_CLASS",
    "ITEM_STYLE",
    "LIST_CLASS",
    "LIST_RADIUS",
    "LIST_STYLE",
    "SPACING_BORDERED",
    "SPACING_UNBORDERED",
    "THEME",
    "label_style",
    "list_spacing",
]
