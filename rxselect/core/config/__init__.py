"""
Core configuration module for rxselect.

Provides settings for directory paths and logger behaviour, loaded from the
environment, a `.env` file and the packaged `config.ini`.
"""

from rxselect.core.config.config import CoreSettings, get_settings

__all__ = ["CoreSettings", "get_settings"]
