"""Unit test methods for rxselect.components.primitives module."""

import reflex as rx

from rxselect.components.inputs.selection_list import SelectionList, selection_list
from rxselect.components.primitives import ReflexPrimitives
from rxselect.theme import LIST_CLASS


class PrimitivesOwnerState(rx.State):
    selected: list[str] = []
    ticked: bool = False
    chosen: str = ""

    def set_selected(self, selected: list[str]):
        self.selected = selected

    def set_ticked(self, ticked: bool):
        self.ticked = ticked

    def set_chosen(self, chosen: str):
        self.chosen = chosen


def _recording_owner(proposals: list):
    def on_change(selection):
        proposals.append(frozenset(selection))
        return PrimitivesOwnerState.set_selected(sorted(selection))

    return on_change


def _triggers_with(component, trigger: str) -> list:
    found = [component] if trigger in component.event_triggers else []
    for child in component.children:
        found.extend(_triggers_with(child, trigger))
    return found


def test_label_is_a_component():
    assert isinstance(ReflexPrimitives().label(label="apple", style={"margin_top": "1px"}), rx.Component)


def test_border_and_list_group_are_components():
    primitives = ReflexPrimitives()
    group = primitives.list_group([rx.text("a"), rx.text("b")], style={"overflow_y": "auto"})
    assert isinstance(group, rx.Component)
    assert isinstance(primitives.border(child=group, radius="4px"), rx.Component)
    assert isinstance(primitives.border(child=group, radius="4px", border="none"), rx.Component)


def test_list_group_carries_the_list_class():
    group = ReflexPrimitives().list_group([rx.text("a")], style={})
    assert LIST_CLASS in str(group.class_name)


def test_border_fires_the_mount_event():
    primitives = ReflexPrimitives()
    group = primitives.list_group([rx.text("a")], style={})
    boxed = primitives.border(child=group, radius="4px", on_mount=PrimitivesOwnerState.set_selected(["a"]))
    assert "on_mount" in boxed.event_triggers
    assert "on_mount" not in primitives.border(child=group, radius="4px").event_triggers


def test_item_box_is_a_component():
    box = ReflexPrimitives().item_box(rx.text("a"), class_name="list-group-item compact", style={"cursor": "default"})
    assert isinstance(box, rx.Component)


def test_checkbox_click_proposes_the_negated_model():
    proposed = []

    def on_change(ticked):
        proposed.append(ticked)
        return PrimitivesOwnerState.set_ticked(ticked)

    primitives = ReflexPrimitives()
    box = primitives.checkbox(model=True, on_change=on_change, disabled=False, label="apple", label_style={})
    assert isinstance(box, rx.Component)
    assert proposed == [False]
    assert _triggers_with(box, "on_change")

    proposed.clear()
    primitives.checkbox(model=False, on_change=on_change, disabled=True, label="apple", label_style={})
    assert proposed == [True]


def test_radio_button_click_proposes_its_own_value():
    proposed = []

    def on_change(value):
        proposed.append(value)
        return PrimitivesOwnerState.set_chosen(value)

    button = ReflexPrimitives().radio_button(
        model="ven", value="mar", on_change=on_change, disabled=False, label="Mars", label_style={}
    )
    assert isinstance(button, rx.Component)
    assert proposed == ["mar"]
    assert _triggers_with(button, "on_change")


class TestReflexSelectionList:
    def test_check_boxes_wire_one_click_per_item(self):
        proposals = []
        component = selection_list(
            choices=["apple", "banana"], model={"apple"}, on_change=_recording_owner(proposals)
        )
        assert isinstance(component, rx.Component)
        assert proposals == [frozenset(), frozenset({"apple", "banana"})]
        assert len(_triggers_with(component, "on_change")) == 2
        assert "on_mount" not in component.event_triggers

    def test_radio_buttons_propose_their_own_item(self):
        proposals = []
        component = selection_list(
            choices=["mer", "ven", "ear"],
            model={"ven"},
            on_change=_recording_owner(proposals),
            multi_select=False,
            required=True,
        )
        assert isinstance(component, rx.Component)
        assert proposals == [frozenset({"mer"}), frozenset({"ven"}), frozenset({"ear"})]
        assert len(_triggers_with(component, "on_change")) == 3

    def test_repair_reaches_the_owner_on_mount(self):
        proposals = []
        component = selection_list(
            choices=["mer", "ven", "ear"],
            model={"ven", "mer"},
            on_change=_recording_owner(proposals),
            multi_select=False,
        )
        assert isinstance(component, rx.Component)
        assert proposals[0] == frozenset({"mer"})
        assert proposals[1:] == [frozenset(), frozenset({"ven"}), frozenset({"ear"})]
        assert "on_mount" in component.event_triggers

    def test_widget_built_once_renders_for_a_state_owner(self):
        proposals = []
        planet_list = SelectionList(choices=["mer", "ven"], model=set(), on_change=print, multi_select=False)

        def on_change(selection):
            proposals.append(frozenset(selection))
            return PrimitivesOwnerState.set_chosen(next(iter(selection), ""))

        component = planet_list(choices=["mer", "ven"], model={"ven"}, on_change=on_change, multi_select=False)
        assert isinstance(component, rx.Component)
        assert proposals == [frozenset({"mer"}), frozenset()]
