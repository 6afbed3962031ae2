from typing import Any, Callable

import reflex as rx

from rxselect.components.core.label import label as _label

_CHECKED = "checked"


def radio_button(
    model: Any,
    value: Any,
    on_change: Callable[[Any], Any],
    disabled: bool = False,
    label: str = "",
    label_style: dict | None = None,
) -> rx.Component:
    """
    Render a single radio button with a label.

    The button is checked when `model` equals `value`. Values never reach the browser, so choices do not need to be
    strings; a click calls `on_change(value)` on the server side.

    Args:
        model (Any): The currently chosen value, or None.
        value (Any): The value this button stands for.
        on_change (Callable[[Any], Any]): Called with `value` when clicked; must return a reflex event.
        disabled (bool, optional): Disable the button. Defaults to False.
        label (str, optional): Text shown next to the button. Defaults to "".
        label_style (dict | None, optional): Extra CSS for the label. Defaults to None.

    Returns:
        rx.Component: A Reflex label element containing the radio button and its text.
    """
    return rx.el.label(
        rx.hstack(
            rx.radio_group.root(
                rx.radio_group.item(value=_CHECKED),
                value=_CHECKED if model == value else "",
                disabled=disabled,
                on_change=lambda _v: on_change(value),
            ),
            _label(label, style=label_style, disabled=disabled),
            align="center",
            spacing="2",
        ),
        cursor="not-allowed" if disabled else "default",
    )
