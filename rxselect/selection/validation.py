from typing import Iterable

from rxselect.core.exceptions import ConfigurationError

SELECTION_LIST_ARGS_DESC = [
    {"name": "choices", "required": True, "type": "list", "description": "the selectable items. Elements can be strings or more interesting hashable data items like ``Fruit(label='apple', sort=5)``. Also see ``label_fn`` below."},
    {"name": "model", "required": True, "type": "set", "description": "the currently selected items. Note: items are considered distinct."},
    {"name": "on_change", "required": True, "type": "(frozenset) -> Any", "description": "a callback which will be passed the set of selected items. In a reflex app it returns an event, e.g. ``State.set_selected``."},
    {"name": "multi_select", "required": False, "default": True, "type": "bool", "description": "when True, use check boxes, otherwise radio buttons."},
    {"name": "as_exclusions", "required": False, "default": False, "type": "bool", "description": "when True, selected items are shown with struck-out labels."},
    {"name": "required", "required": False, "default": False, "type": "bool", "description": "when True, at least one item must stay selected. Note: being able to un-select a radio button is not a common use case, so this should probably be set to True in single select mode."},
    {"name": "width", "required": False, "type": "str | int", "description": "a CSS size e.g. \"250px\". When specified, item labels may be clipped. Otherwise based on the widest label."},
    {"name": "height", "required": False, "type": "str | int", "description": "a CSS size e.g. \"150px\". Size beyond which items will scroll."},
    {"name": "max_height", "required": False, "type": "str | int", "description": "a CSS size e.g. \"150px\". If there are fewer items than this height the box shrinks, if there are more the items scroll."},
    {"name": "disabled", "required": False, "default": False, "type": "bool", "description": "when True, all items are disabled. Can be a Cell or a value."},
    {"name": "hide_border", "required": False, "default": False, "type": "bool", "description": "when True, the list is displayed without a border."},
    {"name": "item_renderer", "required": False, "type": "ItemRenderer", "description": "called for each element with ``(item, selections, on_change, disabled, label_fn, required, as_exclusions)``; the returned component renders the element and responds to clicks."},
    {"name": "label_fn", "required": False, "default": "str", "type": "(choice) -> str", "description": "called for each element to get its label string."},
]

SELECTION_LIST_ARGS = frozenset(arg["name"] for arg in SELECTION_LIST_ARGS_DESC)

REQUIRED_SELECTION_LIST_ARGS = frozenset(arg["name"] for arg in SELECTION_LIST_ARGS_DESC if arg["required"])


def validate_arguments(
    allowed: Iterable[str],
    supplied: Iterable[str],
    required: Iterable[str] = REQUIRED_SELECTION_LIST_ARGS,
) -> bool:
    """Check supplied attribute names against an allow-list.

    Args:
        allowed: Names the widget accepts.
        supplied: Names the caller passed.
        required: Names that must be present.

    Returns:
        True when every supplied name is allowed and every required name is supplied.

    Raises:
        ConfigurationError: Naming every unknown and every missing attribute.
    """
    allowed = set(allowed)
    supplied = set(supplied)
    unknown = sorted(supplied - allowed)
    missing = sorted(set(required) - supplied)

    problems = []
    if unknown:
        problems.append(f"unknown argument(s) {', '.join(unknown)}")
    if missing:
        problems.append(f"missing required argument(s) {', '.join(missing)}")
    if problems:
        raise ConfigurationError("Invalid arguments: " + "; ".join(problems) + ".")
    return True
