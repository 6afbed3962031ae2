"""
Primitive components the selection list is built from.

`SelectionList` only talks to them through the `Primitives` protocol, so any object
with these methods can stand in for `ReflexPrimitives`.
"""

from typing import Any, Callable, Iterable, Optional, Protocol

import reflex as rx

from rxselect.components.core import label as _label
from rxselect.components.inputs import checkbox as _checkbox
from rxselect.components.inputs import radio_button as _radio_button
from rxselect.components.layout import box as _box


class Primitives(Protocol):
    def border(self, *, child: Any, radius: str, border: Optional[str] = None, on_mount: Any = None) -> Any: ...

    def list_group(self, items: Iterable[Any], *, style: dict) -> Any: ...

    def item_box(self, child: Any, *, class_name: str, style: dict) -> Any: ...

    def checkbox(
        self,
        *,
        model: bool,
        on_change: Callable[[bool], Any],
        disabled: bool,
        label: str,
        label_style: dict,
    ) -> Any: ...

    def radio_button(
        self,
        *,
        model: Any,
        value: Any,
        on_change: Callable[[Any], Any],
        disabled: bool,
        label: str,
        label_style: dict,
    ) -> Any: ...

    def label(self, *, label: str, style: Optional[dict] = None) -> Any: ...


class ReflexPrimitives:
    """`Primitives` drawn with reflex components."""

    def border(self, *, child: Any, radius: str, border: Optional[str] = None, on_mount: Any = None) -> rx.Component:
        return _box.border(child, radius=radius, border_style=border, on_mount=on_mount)

    def list_group(self, items: Iterable[Any], *, style: dict) -> rx.Component:
        return _box.list_group(*items, style=style)

    def item_box(self, child: Any, *, class_name: str, style: dict) -> rx.Component:
        return _box.item_box(child, class_name=class_name, style=style)

    def checkbox(self, *, model, on_change, disabled, label, label_style) -> rx.Component:
        return _checkbox.checkbox(model=model, on_change=on_change, disabled=disabled, label=label, label_style=label_style)

    def radio_button(self, *, model, value, on_change, disabled, label, label_style) -> rx.Component:
        return _radio_button.radio_button(
            model=model, value=value, on_change=on_change, disabled=disabled, label=label, label_style=label_style
        )

    def label(self, *, label: str, style: Optional[dict] = None) -> rx.Component:
        return _label.label(label, style=style)
