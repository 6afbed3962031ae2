"""Unit test methods for rxselect.core.observables.cell module."""

from rxselect.core import Cell, deref_or_value


def test_cell_holds_a_value():
    cell = Cell({"a"})
    assert cell.value == {"a"}
    assert cell.deref() == {"a"}
    assert repr(cell) == "Cell({'a'})"


def test_reset_notifies_subscribers_on_change():
    cell = Cell(1)
    seen = []
    cell.subscribe(lambda old, new: seen.append((old, new)))

    assert cell.reset(2) == 2
    cell.reset(2)

    assert seen == [(1, 2)]


def test_swap_applies_a_function():
    cell = Cell(frozenset({"a"}))
    cell.swap(lambda s, item: s | {item}, "b")
    assert cell.value == {"a", "b"}


def test_unsubscribe_by_handler_and_id():
    cell = Cell(0)
    calls = []

    def handler(**kwargs):
        calls.append(kwargs)

    handler_id = cell.subscribe(handler)
    cell.unsubscribe(handler_id)
    cell.reset(1)
    cell.subscribe(handler)
    cell.unsubscribe(handler)
    cell.reset(2)

    assert calls == []


def test_handler_may_reset_the_cell_it_listens_to():
    cell = Cell(3)

    def clamp(old, new):
        if new > 1:
            cell.reset(1)

    cell.subscribe(clamp)
    cell.reset(5)
    assert cell.value == 1


def test_deref_or_value():
    assert deref_or_value(Cell("x")) == "x"
    assert deref_or_value("x") == "x"
    assert deref_or_value(None) is None
