"""
Utility functions for the rxselect core package.
"""

from .checks import first_member, ifnone
from .mappings import fmap

__all__ = [
    "first_member",
    "fmap",
    "ifnone",
]
