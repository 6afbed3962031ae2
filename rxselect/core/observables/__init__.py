from rxselect.core.observables.cell import Cell, deref_or_value
from rxselect.core.observables.event_bus import EventBus

__all__ = ["Cell", "EventBus", "deref_or_value"]
