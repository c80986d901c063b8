"""
Exception hierarchy for find-project.

Only ConfigurationError (and its PathError subclass) and NotFoundError are
meant to reach callers. PartialReadError is raised while listing a single
directory and is absorbed by the walker.
"""

from typing import Optional


class FindProjectError(Exception):
    """Base class for all find-project errors."""
    pass


class ConfigurationError(FindProjectError):
    """Raised when the search root or settings cannot be resolved."""
    pass


class PathError(ConfigurationError):
    """Raised when the search root is missing or is not a directory."""
    
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(FindProjectError):
    """Raised when a traversal finished without finding the folder."""
    
    def __init__(self, target_name: str, root: str):
        super().__init__(f'Folder "{target_name}" not found inside {root}')
        self.target_name = target_name
        self.root = root


class PartialReadError(FindProjectError):
    """Raised when one directory cannot be listed during a traversal."""
    
    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Unable to read directory {path}: {cause}")
        self.path = path
        self.cause = cause
