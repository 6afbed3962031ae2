from typing import Any, Callable, Generic, TypeVar

from rxselect.core.observables.event_bus import EventBus

T = TypeVar("T")


class Cell(Generic[T]):
    """A mutable value owned outside of the widgets that read it.

    Widgets never subscribe to a cell; they only read its current value when they render. The owner subscribes to
    ``"changed"`` and re-renders, which keeps re-rendering driven by the owner.

    Example::

        from rxselect.core import Cell

        selected = Cell({"a"})
        selected.subscribe(lambda old, new: print(old, "->", new))
        selected.reset({"a", "b"})  # {'a'} -> {'a', 'b'}
    """

    def __init__(self, value: T):
        self._value = value
        self._event_bus = EventBus()

    @property
    def value(self) -> T:
        return self._value

    def deref(self) -> T:
        return self._value

    def reset(self, value: T) -> T:
        """Replace the value, notifying subscribers when it actually changed."""
        old = self._value
        self._value = value
        if old != value:
            self._event_bus.emit("changed", old=old, new=value)
        return value

    def swap(self, fn: Callable[..., T], *args, **kwargs) -> T:
        """Set the value to ``fn(current, *args, **kwargs)``."""
        return self.reset(fn(self._value, *args, **kwargs))

    def subscribe(self, handler: Callable[..., Any]) -> str:
        """Call ``handler(old=..., new=...)`` after every change. Returns the subscription ID."""
        return self._event_bus.subscribe("changed", handler)

    def unsubscribe(self, handler_or_id: str | Callable[..., Any]):
        self._event_bus.unsubscribe("changed", handler_or_id)

    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


def deref_or_value(value: Any) -> Any:
    """Return the current value of ``value`` if it is a Cell, else ``value`` itself."""
    if isinstance(value, Cell):
        return value.deref()
    return value
