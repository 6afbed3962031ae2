"""RxSelectBase class. Provides a unified, per-class logger."""

from rxselect.core.logging.logger import get_logger

LOGGER_PARAM_NAMES = {
    "log_dir",
    "logger_level",
    "stream_level",
    "file_level",
    "file_mode",
    "propagate",
    "max_bytes",
    "backup_count",
    "use_structlog",
    "structlog_json",
    "structlog_bind",
}


class RxSelectMeta(type):
    """Metaclass for RxSelectBase.

    Lets classes deriving from RxSelectBase use the same logger from class methods as from instance methods::

        from rxselect.core import RxSelectBase

        class MyWidget(RxSelectBase):
            @classmethod
            def class_method(cls):
                cls.logger.info(f"Using logger: {cls.logger.name}")  # Using logger: rxselect.my_module.MyWidget
    """

    def __init__(cls, name, bases, attr_dict):
        super().__init__(name, bases, attr_dict)
        cls._logger = None
        cls._logger_kwargs = None

    @property
    def logger(cls):
        if cls._logger is None:
            cls._logger = get_logger(cls.unique_name, **(cls._logger_kwargs or {}))
        return cls._logger

    @logger.setter
    def logger(cls, new_logger):
        cls._logger = new_logger

    @property
    def unique_name(cls) -> str:
        return cls.__module__ + "." + cls.__name__


class RxSelectBase(metaclass=RxSelectMeta):
    """Base class for rxselect classes that log.

    Logger-related keyword arguments (see ``LOGGER_PARAM_NAMES``) are forwarded to `get_logger`; anything else is
    passed on to the next class in the MRO.
    """

    def __init__(self, **kwargs):
        logger_kwargs = {k: v for k, v in kwargs.items() if k in LOGGER_PARAM_NAMES}
        remaining_kwargs = {k: v for k, v in kwargs.items() if k not in LOGGER_PARAM_NAMES}
        super().__init__(**remaining_kwargs)

        if logger_kwargs:
            type(self)._logger_kwargs = logger_kwargs
            type(self)._logger = None
        self.logger = type(self).logger

    @property
    def unique_name(self) -> str:
        return self.__module__ + "." + type(self).__name__

    @property
    def name(self) -> str:
        return type(self).__name__
