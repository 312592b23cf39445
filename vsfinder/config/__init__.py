"""
Configuration for vsfinder.
"""

from .parser import (
    CONFIG_FILENAME,
    FinderConfig,
    find_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "FinderConfig",
    "find_config",
    "parse_config",
]
