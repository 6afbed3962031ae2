"""Unit test methods for rxselect.selection.renderers module."""

from unittest.mock import MagicMock

from rxselect.selection.config import configure
from rxselect.selection.renderers import CheckboxItemRenderer, RadioItemRenderer, item_renderer_for
from rxselect.theme import ITEM_CLASS


class TestCheckboxItemRenderer:
    def test_draws_a_checked_box_for_a_selected_item(self, primitives):
        on_change = MagicMock()
        item = CheckboxItemRenderer(primitives)("a", frozenset({"a"}), on_change, False, str.upper, False, False)

        assert item["kind"] == "item_box"
        assert item["class_name"] == ITEM_CLASS
        assert item["style"] == {"cursor": "default"}
        box = item["child"]
        assert box["kind"] == "checkbox"
        assert box["model"] is True
        assert box["label"] == "A"
        assert box["disabled"] is False
        assert box["label_style"] == {"margin_top": "1px"}

    def test_strikes_out_selected_exclusions_only(self, primitives):
        renderer = CheckboxItemRenderer(primitives)
        selected = renderer("a", frozenset({"a"}), MagicMock(), False, str, False, True)["child"]
        unselected = renderer("b", frozenset({"a"}), MagicMock(), False, str, False, True)["child"]
        assert selected["label_style"]["text_decoration"] == "line-through"
        assert "text_decoration" not in unselected["label_style"]

    def test_toggle_proposes_the_reduced_selection(self, primitives):
        on_change = MagicMock(return_value="event")
        box = CheckboxItemRenderer(primitives)("b", frozenset({"a"}), on_change, False, str, False, False)["child"]

        assert box["on_change"](True) == "event"
        on_change.assert_called_once_with(frozenset({"a", "b"}))

    def test_passes_disabled_through(self, primitives):
        box = CheckboxItemRenderer(primitives)("a", frozenset(), MagicMock(), True, str, False, False)["child"]
        assert box["disabled"] is True


class TestRadioItemRenderer:
    def test_draws_against_the_single_selected_item(self, primitives):
        renderer = RadioItemRenderer(primitives)
        chosen = renderer("x", frozenset({"x"}), MagicMock(), False, str, False, False)["child"]
        other = renderer("y", frozenset({"x"}), MagicMock(), False, str, False, False)["child"]

        assert chosen["kind"] == "radio_button"
        assert chosen["model"] == "x" and chosen["value"] == "x"
        assert other["model"] == "x" and other["value"] == "y"

    def test_nothing_selected_gives_no_model(self, primitives):
        button = RadioItemRenderer(primitives)("x", frozenset(), MagicMock(), False, str, False, False)["child"]
        assert button["model"] is None

    def test_click_proposes_the_reduced_selection(self, primitives):
        on_change = MagicMock()
        button = RadioItemRenderer(primitives)("y", frozenset({"x"}), on_change, False, str, False, False)["child"]

        button["on_change"]("y")
        on_change.assert_called_once_with(frozenset({"y"}))


class TestItemRendererFor:
    def _config(self, **attrs):
        return configure({"choices": ["a"], "model": set(), "on_change": MagicMock(), **attrs})

    def test_multi_select_uses_check_boxes(self, primitives):
        assert isinstance(item_renderer_for(self._config(), primitives), CheckboxItemRenderer)

    def test_single_select_uses_radio_buttons(self, primitives):
        assert isinstance(item_renderer_for(self._config(multi_select=False), primitives), RadioItemRenderer)

    def test_custom_renderer_wins_in_either_mode(self, primitives):
        custom = MagicMock()
        assert item_renderer_for(self._config(item_renderer=custom), primitives) is custom
        assert item_renderer_for(self._config(item_renderer=custom, multi_select=False), primitives) is custom
