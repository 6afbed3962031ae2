import reflex as rx

from rxselect.theme.theme import LIST_CLASS
from rxselect.theme.tokens import C


def border(child, radius: str = "0px", border_style: str | None = None, on_mount=None) -> rx.Component:
    """
    Wrap a component in a bordered box.

    Args:
        child (rx.Component): The wrapped component.
        radius (str, optional): CSS border radius. Defaults to "0px".
        border_style (str | None, optional): CSS border shorthand, e.g. "none". Defaults to a thin solid line.
        on_mount (EventType | None, optional): Event fired once the box is mounted. Defaults to None.

    Returns:
        rx.Component: A Reflex box around `child`.
    """
    props = {}
    if on_mount is not None:
        props["on_mount"] = on_mount
    return rx.box(
        child,
        border=border_style if border_style is not None else f"1px solid {C.border}",
        border_radius=radius,
        **props,
    )


def list_group(*items, style: dict | None = None) -> rx.Component:
    """Vertical container for list items; `style` carries overflow, spacing and size hints."""
    return rx.box(*items, class_name=LIST_CLASS, style=style or {})


def item_box(child, class_name: str = "", style: dict | None = None) -> rx.Component:
    return rx.box(child, class_name=class_name, style=style or {}, padding="2px 4px")
