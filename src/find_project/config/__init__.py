"""
Configuration management package for find-project.

This package provides settings file parsing and search root resolution.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    load_config
)
from .roots import resolve_search_root, debug_enabled
from ..exceptions import ConfigurationError

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config',
    'resolve_search_root',
    'debug_enabled'
]
