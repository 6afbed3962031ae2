"""rxselect: a reflex selection list whose selection is owned by the caller."""

from rxselect.components.inputs.selection_list import SelectionList, list_container, selection_list
from rxselect.core import Cell, ConfigurationError
from rxselect.selection import check_clicked, configure, radio_clicked, validate_arguments

__all__ = [
    "Cell",
    "ConfigurationError",
    "SelectionList",
    "check_clicked",
    "configure",
    "list_container",
    "radio_clicked",
    "selection_list",
    "validate_arguments",
]
