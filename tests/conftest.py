import logging

import pytest


def by_slow_marker(item):
    # Check if test is marked as slow
    is_slow = 0 if item.get_closest_marker("slow") is None else 1

    # Check if test is integration test
    is_integration = 1 if "integration" in str(item.fspath) else 0

    # Sort unit tests first, then slow unit tests, then integration tests, then slow integration tests
    return (is_integration, is_slow)


def pytest_addoption(parser):
    parser.addoption("--slow-last", action="store_true", default=False)


def pytest_collection_modifyitems(items, config):
    if config.getoption("--slow-last"):
        items.sort(key=by_slow_marker)


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Configure logging to work properly with caplog fixture.

    This fixture ensures that all rxselect loggers propagate their messages to the root logger so that caplog can
    capture them properly.
    """
    caplog.set_level(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)

    rxselect_logger = logging.getLogger("rxselect")
    original_propagate = rxselect_logger.propagate
    rxselect_logger.propagate = True

    yield

    root_logger.setLevel(original_level)
    rxselect_logger.propagate = original_propagate


class RecordingPrimitives:
    """Primitives that build plain dicts and remember every call, in order."""

    def __init__(self):
        self.calls = []

    def _record(self, kind, **props):
        self.calls.append(kind)
        return {"kind": kind, **props}

    def border(self, *, child, radius, border=None, on_mount=None):
        return self._record("border", child=child, radius=radius, border=border, on_mount=on_mount)

    def list_group(self, items, *, style):
        return self._record("list_group", items=list(items), style=style)

    def item_box(self, child, *, class_name, style):
        return self._record("item_box", child=child, class_name=class_name, style=style)

    def checkbox(self, *, model, on_change, disabled, label, label_style):
        return self._record(
            "checkbox", model=model, on_change=on_change, disabled=disabled, label=label, label_style=label_style
        )

    def radio_button(self, *, model, value, on_change, disabled, label, label_style):
        return self._record(
            "radio_button",
            model=model,
            value=value,
            on_change=on_change,
            disabled=disabled,
            label=label,
            label_style=label_style,
        )

    def label(self, *, label, style=None):
        return self._record("label", label=label, style=style)


@pytest.fixture
def primitives():
    return RecordingPrimitives()
