from typing import Any, Callable, Mapping


def fmap(fn: Callable[[Any], Any], mapping: Mapping) -> dict:
    """Apply ``fn`` to every value of ``mapping``, keeping the keys."""
    return {key: fn(value) for key, value in mapping.items()}
