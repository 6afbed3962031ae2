from rxselect.core.utils.checks import first_member, ifnone
from rxselect.core.utils.mappings import fmap
from rxselect.core.config import CoreSettings, get_settings
from rxselect.core.exceptions import ConfigurationError, RxSelectError
from rxselect.core.logging.logger import get_logger, setup_logger

setup_logger()  # Initialize the default logger

from rxselect.core.base import RxSelectBase, RxSelectMeta
from rxselect.core.observables import Cell, EventBus, deref_or_value


__all__ = [
    "Cell",
    "ConfigurationError",
    "CoreSettings",
    "deref_or_value",
    "EventBus",
    "first_member",
    "fmap",
    "get_logger",
    "get_settings",
    "ifnone",
    "RxSelectBase",
    "RxSelectError",
    "RxSelectMeta",
    "setup_logger",
]
