import configparser
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class RXSELECT_DIR_PATHS(BaseModel):
    ROOT: str
    LOGGER_DIR: str
    STRUCT_LOGGER_DIR: str


class RXSELECT_LOGGER(BaseModel):
    USE_STRUCTLOG: bool = False


def load_ini_as_dict(ini_path: Path) -> Dict[str, Any]:
    """
    Load and parse an INI file into a nested dictionary with normalized keys.

    Sections and keys are converted to uppercase for uniform access. Tilde (`~`)
    in values is expanded to the user home directory.

    Args:
        ini_path (Path): Path to the `.ini` configuration file.

    Returns:
        Dict[str, Any]: A dictionary where each section is a key mapped to another
        dictionary of key-value pairs from that section.

    Example:
        .. code-block:: ini

            [RXSELECT_DIR_PATHS]
            LOGGER_DIR = ~/logs

        .. code-block:: python

            config = load_ini_as_dict(Path("config.ini"))
            print(config["RXSELECT_DIR_PATHS"]["LOGGER_DIR"])
    """
    if not ini_path.exists():
        return {}

    config = configparser.ConfigParser(interpolation=configparser.ExtendedInterpolation())
    config.optionxform = str
    config.read(ini_path)

    result = {}
    for section in config.sections():
        result[section.upper()] = {
            key.upper(): os.path.expanduser(value) if value.startswith("~") else value
            for key, value in config[section].items()
        }
    return result


def load_ini_settings() -> Dict[str, Any]:
    ini_path = Path(__file__).parent / "config.ini"
    return load_ini_as_dict(ini_path)


class CoreSettings(BaseSettings):
    RXSELECT_DIR_PATHS: RXSELECT_DIR_PATHS
    RXSELECT_LOGGER: RXSELECT_LOGGER

    model_config = {
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        def _expand_tilde(obj):
            if isinstance(obj, str):
                return os.path.expanduser(obj) if obj.startswith("~") else obj
            if isinstance(obj, dict):
                return {k: _expand_tilde(v) for k, v in obj.items()}
            if isinstance(obj, (list, tuple, set)):
                t = type(obj)
                return t(_expand_tilde(v) for v in obj)
            return obj

        def env_settings_expanded():
            data = env_settings()
            return _expand_tilde(data)

        return (
            init_settings,           # constructor kwargs
            env_settings_expanded,   # env vars (with '~' expanded) take precedence
            dotenv_settings,         # then .env
            load_ini_settings,       # then INI file (lowest precedence)
            file_secret_settings,
        )


@lru_cache(maxsize=1)
def get_settings() -> CoreSettings:
    """Return the process-wide settings, loaded once."""
    return CoreSettings()
