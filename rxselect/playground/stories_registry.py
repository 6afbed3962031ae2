import reflex as rx

from rxselect.components.inputs.selection_list import selection_list
from rxselect.selection.validation import SELECTION_LIST_ARGS_DESC

FRUITS = ["apple", "banana", "cherry", "damson", "elderberry", "fig", "grape"]

PLANETS = {
    "mer": "Mercury",
    "ven": "Venus",
    "ear": "Earth",
    "mar": "Mars",
}


# ========== SHARED UI HELPERS (pure components) ==========


def _prop_switch(label: str, checked: bool, on_change):
    return rx.hstack(
        rx.switch(checked=checked, on_change=on_change),
        rx.text(label, size="2", color="#64748b"),
        spacing="2",
        align="center",
        width="100%",
    )


def _prop_input_text(label: str, value, on_change):
    return rx.vstack(
        rx.text(label, size="2", color="#64748b"),
        rx.input(value=value, on_change=on_change),
        spacing="1",
        width="100%",
    )


def _code_panel(title: str, code_text):
    return rx.box(
        rx.vstack(
            rx.text(title, weight="bold"),
            rx.box(
                rx.code_block(code_text, language="python", show_line_numbers=False),
                padding="0.75rem",
                background="#0b1020",
                color="#e2e8f0",
                border_radius="10px",
                width="100%",
            ),
            spacing="2",
            width="100%",
        ),
        width="100%",
    )


# ========= PER-STORY STATE =========


class SelectionListState(rx.State):
    """Owns the selection of the selection list story and every flag the controls panel can flip."""

    selected: list[str] = ["apple"]
    multi_select: bool = True
    required: bool = False
    as_exclusions: bool = False
    disabled: bool = False
    hide_border: bool = False
    max_height: str = "150px"

    def set_selected(self, selected: list[str]):
        self.selected = selected

    def toggle_multi_select(self, _checked: bool):
        self.multi_select = not self.multi_select

    def toggle_required(self, _checked: bool):
        self.required = not self.required

    def toggle_as_exclusions(self, _checked: bool):
        self.as_exclusions = not self.as_exclusions

    def toggle_disabled(self, _checked: bool):
        self.disabled = not self.disabled

    def toggle_hide_border(self, _checked: bool):
        self.hide_border = not self.hide_border

    def set_max_height(self, v: str):
        self.max_height = v

    @rx.var
    def fruit_list(self) -> rx.Component:
        return selection_list(
            choices=FRUITS,
            model=set(self.selected),
            on_change=lambda s: SelectionListState.set_selected(sorted(s)),
            multi_select=self.multi_select,
            required=self.required,
            as_exclusions=self.as_exclusions,
            disabled=self.disabled,
            hide_border=self.hide_border,
            max_height=self.max_height or None,
            width="220px",
        )

    @rx.var
    def code_text(self) -> str:
        return f"""import reflex as rx
from rxselect import selection_list

class FruitState(rx.State):
    selected: list[str] = {self.selected!r}

    def set_selected(self, selected: list[str]):
        self.selected = selected

    @rx.var
    def fruit_list(self) -> rx.Component:
        return selection_list(
            choices={FRUITS!r},
            model=set(self.selected),
            on_change=lambda s: FruitState.set_selected(sorted(s)),
            multi_select={self.multi_select},
            required={self.required},
            as_exclusions={self.as_exclusions},
            disabled={self.disabled},
            hide_border={self.hide_border},
            max_height={self.max_height or None!r},
        )
"""


class PlanetListState(rx.State):
    """Radio mode over ids shown through ``label_fn``."""

    selected: list[str] = ["ear"]

    def set_selected(self, selected: list[str]):
        self.selected = selected

    @rx.var
    def planet_list(self) -> rx.Component:
        return selection_list(
            choices=list(PLANETS),
            model=set(self.selected),
            on_change=lambda s: PlanetListState.set_selected(sorted(s)),
            multi_select=False,
            required=True,
            label_fn=PLANETS.get,
        )


# ========= STORIES =========


def story_selection_list_preview() -> rx.Component:
    return rx.vstack(
        SelectionListState.fruit_list,
        rx.text("Selected: ", rx.code(SelectionListState.selected.join(", ")), size="2", color="#64748b"),
        spacing="3",
    )


def story_selection_list_controls() -> rx.Component:
    return rx.vstack(
        _prop_switch("multi_select", SelectionListState.multi_select, SelectionListState.toggle_multi_select),
        _prop_switch("required", SelectionListState.required, SelectionListState.toggle_required),
        _prop_switch("as_exclusions", SelectionListState.as_exclusions, SelectionListState.toggle_as_exclusions),
        _prop_switch("disabled", SelectionListState.disabled, SelectionListState.toggle_disabled),
        _prop_switch("hide_border", SelectionListState.hide_border, SelectionListState.toggle_hide_border),
        _prop_input_text("max_height", SelectionListState.max_height, SelectionListState.set_max_height),
        spacing="2",
        width="100%",
    )


STORY_SELECTION_LIST = {
    "id": "selection_list",
    "name": "Selection list",
    "preview": story_selection_list_preview,
    "controls": story_selection_list_controls,
    "code": lambda: _code_panel("Selection list", SelectionListState.code_text),
}


def story_radio_list_preview() -> rx.Component:
    return rx.vstack(
        PlanetListState.planet_list,
        rx.text("Selected: ", rx.code(PlanetListState.selected.join(", ")), size="2", color="#64748b"),
        spacing="3",
    )


def story_args_table() -> rx.Component:
    """Reference table of the selection list attributes."""
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Name"),
                rx.table.column_header_cell("Type"),
                rx.table.column_header_cell("Default"),
                rx.table.column_header_cell("Description"),
            )
        ),
        rx.table.body(
            *[
                rx.table.row(
                    rx.table.cell(rx.code(arg["name"]), rx.text(" *", color="#EF4444") if arg["required"] else ""),
                    rx.table.cell(arg["type"]),
                    rx.table.cell(str(arg["default"]) if "default" in arg else ""),
                    rx.table.cell(arg["description"]),
                )
                for arg in SELECTION_LIST_ARGS_DESC
            ]
        ),
        width="100%",
    )


STORY_RADIO_LIST = {
    "id": "radio_list",
    "name": "Selection list (radio)",
    "preview": story_radio_list_preview,
    "controls": lambda: rx.text("Single select, required, labels from label_fn.", size="2", color="#64748b"),
    "code": story_args_table,
}


STORIES = [STORY_SELECTION_LIST, STORY_RADIO_LIST]
