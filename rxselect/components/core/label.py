import reflex as rx

from rxselect.theme.tokens import C


def label(text, style: dict | None = None, disabled: bool = False) -> rx.Component:
    """
    Render a line of label text.

    Args:
        text (str): The label text.
        style (dict | None, optional): Extra CSS, e.g. the struck-out style of excluded items. Defaults to None.
        disabled (bool, optional): Render in the muted color. Defaults to False.

    Returns:
        rx.Component: A Reflex text component.
    """
    return rx.text(
        text,
        color=C.fg_muted if disabled else C.fg,
        style=style or {},
        size="2",
    )
