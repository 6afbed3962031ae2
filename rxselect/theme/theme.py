"""
rxselect — Theme

Owns:
- Selection list styles (LIST_STYLE, SPACING_BORDERED, SPACING_UNBORDERED)
- Item styles (ITEM_CLASS, ITEM_STYLE, label_style)

Depends on tokens via absolute import: rxselect.theme.tokens
"""

from types import MappingProxyType

from rxselect.theme.tokens import SP, R

LIST_RADIUS = R.r_sm

LIST_CLASS = "list-group"

ITEM_CLASS = "list-group-item compact"

ITEM_STYLE = MappingProxyType({"cursor": "default"})

LIST_STYLE = MappingProxyType(
    {
        "overflow_x": "hidden",
        "overflow_y": "auto",
        "user_select": "none",
    }
)

SPACING_BORDERED = MappingProxyType(
    {
        "padding_top": SP.space_0,
        "padding_bottom": SP.space_0,
        "padding_left": SP.space_5,
        "padding_right": SP.space_5,
        "margin_top": SP.space_5,
        "margin_bottom": SP.space_5,
    }
)

SPACING_UNBORDERED = MappingProxyType(
    {
        "padding_left": SP.space_0,
        "padding_right": SP.space_5,
        "padding_top": SP.space_0,
        "padding_bottom": SP.space_0,
        "margin_top": SP.space_0,
        "margin_bottom": SP.space_0,
    }
)


def label_style(selected: bool, as_exclusions: bool) -> dict:
    """Style for an item label; selected items are struck out when the list shows exclusions."""
    # checkbox and radio labels sit 1px high without the margin
    base_style = {"margin_top": SP.space_1}
    if selected and as_exclusions:
        return {**base_style, "text_decoration": "line-through"}
    return base_style


def list_spacing(hide_border: bool) -> dict:
    """Padding/margin profile of the list for the given border mode."""
    return dict(SPACING_UNBORDERED if hide_border else SPACING_BORDERED)
