from typing import Any, Iterable, TypeVar

T = TypeVar("T")


def ifnone(val: T | None, default: T) -> T:
    """Return the given value if it is not None, else return the default."""
    return val if val is not None else default


def first_member(members: Iterable, order: Iterable, default: Any = None):
    """Returns the first item of ``order`` contained in ``members``.

    Falls back to an arbitrary element of ``members`` when none of them appear in ``order``, and to ``default`` when
    ``members`` is empty.
    """
    members = frozenset(members)
    if not members:
        return default
    found = next((item for item in order if item in members), None)
    if found is not None or None in members:
        return found
    return next(iter(members))
