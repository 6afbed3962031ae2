from collections.abc import Hashable
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from rxselect.core.exceptions import ConfigurationError
from rxselect.core.observables import deref_or_value
from rxselect.core.utils import fmap

SELECTION_LIST_DEFAULTS = {
    "multi_select": True,
    "as_exclusions": False,
    "required": False,
    "disabled": False,
    "hide_border": False,
    "label_fn": str,
}


class ResolvedConfig(BaseModel):
    """Snapshot of a selection list's attributes for one render pass.

    Attributes:
        choices: The selectable items, in display order.
        model: The currently selected items.
        on_change: Called with a proposed new selection.
        multi_select: Check boxes when True, radio buttons otherwise.
        as_exclusions: Strike out the labels of selected items.
        required: Refuse clicks that would empty the selection.
        disabled: Disable every item.
        hide_border: Draw the list without a border.
        label_fn: Label text of a choice.
        item_renderer: Replaces the built-in check box / radio item when given.
        width: CSS width of the list.
        height: CSS height of the list.
        max_height: CSS max height of the list.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    choices: tuple[Any, ...]
    model: frozenset[Any]
    on_change: Callable[[frozenset], Any]
    multi_select: bool = True
    as_exclusions: bool = False
    required: bool = False
    disabled: bool = False
    hide_border: bool = False
    label_fn: Callable[[Any], str] = str
    item_renderer: Optional[Callable[..., Any]] = None
    width: Optional[Union[str, int]] = None
    height: Optional[Union[str, int]] = None
    max_height: Optional[Union[str, int]] = None

    @field_validator("choices", mode="before")
    @classmethod
    def _choices_to_tuple(cls, value):
        choices = tuple(value)
        for choice in choices:
            if not isinstance(choice, Hashable):
                raise ValueError(f"choices must be hashable, got {type(choice).__name__}: {choice!r}")
        return choices

    @field_validator("model", mode="before")
    @classmethod
    def _model_to_frozenset(cls, value):
        return frozenset(value)

    @property
    def bounds(self) -> dict:
        """The size hints that were given, keyed by style name."""
        sizes = {"width": self.width, "height": self.height, "max_height": self.max_height}
        return {key: value for key, value in sizes.items() if value is not None}


def configure(attributes: Mapping[str, Any]) -> ResolvedConfig:
    """Augment passed attributes with defaults and deref any cells.

    Args:
        attributes: Attribute bag of a selection list. Values may be plain values or `Cell` instances.

    Returns:
        ResolvedConfig: The typed snapshot used for one render pass.

    Raises:
        ConfigurationError: If an attribute value has the wrong type, e.g. an unhashable choice or model item.
    """
    resolved = {**SELECTION_LIST_DEFAULTS, **fmap(deref_or_value, attributes)}
    try:
        return ResolvedConfig(**resolved)
    except (ValidationError, TypeError) as e:
        raise ConfigurationError(f"Invalid selection list attributes: {e}") from e
