"""
Selection list: a bordered, scrollable list of check boxes or radio buttons over a set of choices.

The caller owns the selection. The list only proposes new selections through `on_change` and is rendered again
with whatever model the caller then holds. Example, with the selection kept in a reflex state::

    import reflex as rx
    from rxselect.components.inputs.selection_list import selection_list

    class FruitState(rx.State):
        selected: list[str] = ["apple"]

        def set_selected(self, selected: list[str]):
            self.selected = selected

        @rx.var
        def fruit_list(self) -> rx.Component:
            return selection_list(
                choices=["apple", "banana", "cherry"],
                model=set(self.selected),
                on_change=lambda s: FruitState.set_selected(sorted(s)),
                required=True,
            )
"""

from typing import Any, Optional

from rxselect.components.primitives import Primitives, ReflexPrimitives
from rxselect.core.base import RxSelectBase
from rxselect.core.exceptions import ConfigurationError
from rxselect.core.logging.logger import get_logger
from rxselect.core.utils import first_member
from rxselect.selection.config import ResolvedConfig, configure
from rxselect.selection.renderers import item_renderer_for
from rxselect.selection.validation import SELECTION_LIST_ARGS, validate_arguments
from rxselect.theme import LIST_RADIUS, LIST_STYLE, list_spacing

logger = get_logger(__name__)


def effective_selection(config: ResolvedConfig) -> frozenset:
    """The selection the list is drawn with: the model itself, or at most one of its items in single select mode."""
    if config.multi_select:
        return config.model
    if not config.model:
        return frozenset()
    return frozenset({first_member(config.model, config.choices)})


def list_container(config: ResolvedConfig, primitives: Optional[Primitives] = None) -> Any:
    """Render one pass of a selection list.

    In single select mode a model holding several items is cut down to one, and the owner is told through
    `on_change` before anything is drawn. That causes a second render, after which model and selection agree and
    nothing more is proposed. Whatever `on_change` returns for that proposal (a reflex event) is fired when the list
    mounts.

    Args:
        config: The resolved attributes for this pass.
        primitives: Building blocks to draw with. Defaults to `ReflexPrimitives`.

    Returns:
        The bordered list, as built by `primitives.border`.
    """
    primitives = primitives if primitives is not None else ReflexPrimitives()
    selected = effective_selection(config)

    repair = None
    if selected != config.model:
        logger.debug(f"Single select model {set(config.model)!r} reduced to {set(selected)!r}; notifying owner.")
        repair = config.on_change(selected)

    renderer = item_renderer_for(config, primitives)
    items = [
        renderer(
            choice,
            selected,
            config.on_change,
            config.disabled,
            config.label_fn,
            config.required,
            config.as_exclusions,
        )
        for choice in config.choices
    ]

    style = {**LIST_STYLE, **config.bounds, **list_spacing(config.hide_border)}
    return primitives.border(
        child=primitives.list_group(items, style=style),
        radius=LIST_RADIUS,
        border="none" if config.hide_border else None,
        on_mount=repair,
    )


class SelectionList(RxSelectBase):
    """A selection list that checks its attribute names once when built and renders on every call.

    Example::

        import reflex as rx
        from rxselect.components.inputs.selection_list import SelectionList

        planet_list = SelectionList(choices=["mer", "ven"], model=set(), on_change=print, multi_select=False)

        class PlanetState(rx.State):
            planet: str = "ven"

            def set_planet(self, planet: str):
                self.planet = planet

            @rx.var
            def planets(self) -> rx.Component:
                return planet_list(
                    choices=["mer", "ven"],
                    model={self.planet},
                    on_change=lambda s: PlanetState.set_planet(next(iter(s), "")),
                    multi_select=False,
                )

    Args:
        primitives: Building blocks to draw with. Defaults to `ReflexPrimitives`.
        **attrs: The selection list attributes, see `SELECTION_LIST_ARGS_DESC`.

    Raises:
        ConfigurationError: If an attribute name is unknown or a required one is missing.
    """

    def __init__(self, *, primitives: Optional[Primitives] = None, **attrs):
        super().__init__()
        self.primitives = primitives if primitives is not None else ReflexPrimitives()
        self.validate(attrs)

    def validate(self, attrs: dict) -> None:
        try:
            validate_arguments(SELECTION_LIST_ARGS, attrs.keys())
        except ConfigurationError as e:
            self.logger.error(f"{self.name} rejected its attributes: {e}")
            raise

    def resolve(self, attrs: dict) -> ResolvedConfig:
        self.validate(attrs)
        try:
            return configure(attrs)
        except ConfigurationError as e:
            self.logger.error(f"{self.name} could not resolve its attributes: {e}")
            raise

    def __call__(self, **attrs) -> Any:
        return list_container(self.resolve(attrs), primitives=self.primitives)


def selection_list(*, primitives: Optional[Primitives] = None, **attrs) -> Any:
    """
    Produce a list box with items arranged vertically.

    Args:
        primitives (Primitives, optional): Building blocks to draw with. Defaults to `ReflexPrimitives`.
        **attrs: The selection list attributes, see `SELECTION_LIST_ARGS_DESC`.

    Returns:
        rx.Component: The rendered list (or whatever `primitives` build).
    """
    return SelectionList(primitives=primitives, **attrs)(**attrs)
