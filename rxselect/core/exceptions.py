class RxSelectError(Exception):
    """Base exception for rxselect errors."""
    pass


class ConfigurationError(RxSelectError, ValueError):
    """Raised when a widget is given unknown, missing or ill-typed attributes."""
    pass
