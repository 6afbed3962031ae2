"""Selection state of the selection list: click transitions, attribute resolution and validation, item strategies."""

from rxselect.selection.config import SELECTION_LIST_DEFAULTS, ResolvedConfig, configure
from rxselect.selection.reducer import check_clicked, radio_clicked
from rxselect.selection.renderers import CheckboxItemRenderer, ItemRenderer, RadioItemRenderer, item_renderer_for
from rxselect.selection.validation import (
    REQUIRED_SELECTION_LIST_ARGS,
    SELECTION_LIST_ARGS,
    SELECTION_LIST_ARGS_DESC,
    validate_arguments,
)

__all__ = [
    "CheckboxItemRenderer",
    "ItemRenderer",
    "RadioItemRenderer",
    "REQUIRED_SELECTION_LIST_ARGS",
    "ResolvedConfig",
    "SELECTION_LIST_ARGS",
    "SELECTION_LIST_ARGS_DESC",
    "SELECTION_LIST_DEFAULTS",
    "check_clicked",
    "configure",
    "item_renderer_for",
    "radio_clicked",
    "validate_arguments",
]
