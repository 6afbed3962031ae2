from typing import Any, Callable

import reflex as rx

from rxselect.components.core.label import label as _label


def checkbox(
    model: bool,
    on_change: Callable[[bool], Any],
    disabled: bool = False,
    label: str = "",
    label_style: dict | None = None,
) -> rx.Component:
    """
    Render a check box with a label, driven entirely by its caller.

    The check box holds no state: `model` is the rendered snapshot and a click always asks for its negation.

    Args:
        model (bool): Whether the box is ticked.
        on_change (Callable[[bool], Any]): Called with the new ticked state; must return a reflex event.
        disabled (bool, optional): Disable the box. Defaults to False.
        label (str, optional): Text shown next to the box. Defaults to "".
        label_style (dict | None, optional): Extra CSS for the label. Defaults to None.

    Returns:
        rx.Component: A Reflex label element containing the check box and its text.
    """
    ticked = not model
    return rx.el.label(
        rx.hstack(
            rx.checkbox(
                checked=model,
                disabled=disabled,
                on_change=lambda _checked: on_change(ticked),
            ),
            _label(label, style=label_style, disabled=disabled),
            align="center",
            spacing="2",
        ),
        cursor="not-allowed" if disabled else "default",
    )
