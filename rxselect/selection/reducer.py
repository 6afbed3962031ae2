"""Transitions of a selection set in response to a single click.

Both functions are pure: they never mutate ``selections`` and always return a ``frozenset``.
"""

from typing import AbstractSet, Hashable


def check_clicked(selections: AbstractSet, item: Hashable, ticked: bool, required: bool) -> frozenset:
    """Next selection after the checkbox of ``item`` was set to ``ticked``.

    When ``required`` is set and ``item`` is the only selected item, the selection is returned unchanged whatever the
    value of ``ticked``, so the list can never be emptied by a click.
    """
    selections = frozenset(selections)
    only_item = next(iter(selections)) if len(selections) == 1 else None
    if required and len(selections) == 1 and only_item == item:
        return selections
    if ticked:
        return selections | {item}
    return selections - {item}


def radio_clicked(selections: AbstractSet, item: Hashable, required: bool) -> frozenset:
    """Next selection after the radio button of ``item`` was clicked.

    Clicking the selected item deselects it unless ``required`` is set; clicking any other item selects only that item.
    """
    selections = frozenset(selections)
    if item in selections:
        return selections if required else frozenset()
    return frozenset({item})
