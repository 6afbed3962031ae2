"""Per-item rendering strategies of the selection list.

Every strategy is called as ``renderer(item, selections, on_change, disabled, label_fn, required, as_exclusions)``
and returns one component. The two built-ins draw through a `Primitives` implementation; a caller-supplied
``item_renderer`` may return anything its host can display.
"""

from typing import AbstractSet, Any, Callable, Hashable, Protocol

from rxselect.selection.reducer import check_clicked, radio_clicked
from rxselect.theme import ITEM_CLASS, ITEM_STYLE, label_style


class ItemRenderer(Protocol):
    def __call__(
        self,
        item: Hashable,
        selections: AbstractSet,
        on_change: Callable[[frozenset], Any],
        disabled: bool,
        label_fn: Callable[[Any], str],
        required: bool,
        as_exclusions: bool,
    ) -> Any: ...


class CheckboxItemRenderer:
    """Draws an item as a check box; ticking adds it to the selection, unticking removes it."""

    def __init__(self, primitives):
        self.primitives = primitives

    def __call__(self, item, selections, on_change, disabled, label_fn, required, as_exclusions):
        selected = item in selections

        def toggle(ticked: bool):
            return on_change(check_clicked(selections, item, ticked, required))

        return self.primitives.item_box(
            self.primitives.checkbox(
                model=selected,
                on_change=toggle,
                disabled=disabled,
                label=label_fn(item),
                label_style=label_style(selected, as_exclusions),
            ),
            class_name=ITEM_CLASS,
            style=dict(ITEM_STYLE),
        )


class RadioItemRenderer:
    """Draws an item as a radio button; clicking selects only that item."""

    def __init__(self, primitives):
        self.primitives = primitives

    def __call__(self, item, selections, on_change, disabled, label_fn, required, as_exclusions):
        def choose(value):
            return on_change(radio_clicked(selections, value, required))

        return self.primitives.item_box(
            self.primitives.radio_button(
                model=next(iter(selections), None),
                value=item,
                on_change=choose,
                disabled=disabled,
                label=label_fn(item),
                label_style=label_style(item in selections, as_exclusions),
            ),
            class_name=ITEM_CLASS,
            style=dict(ITEM_STYLE),
        )


def item_renderer_for(config, primitives) -> ItemRenderer:
    """The strategy used for every item of ``config``: the caller's renderer, else check boxes or radio buttons."""
    if config.item_renderer is not None:
        return config.item_renderer
    if config.multi_select:
        return CheckboxItemRenderer(primitives)
    return RadioItemRenderer(primitives)
