"""
Search root resolution for find-project.

The root comes from $FP_FOLDER, or from $GOPATH with "src" appended, or from
the settings file. Whatever is chosen must resolve to an existing directory.
"""

import os
import logging
from pathlib import Path
from typing import Mapping, Optional

from ..exceptions import ConfigurationError, PathError


logger = logging.getLogger(__name__)

FOLDER_ENV_VAR = "FP_FOLDER"
GOPATH_ENV_VAR = "GOPATH"
GOPATH_SUBDIR = "src"
DEBUG_ENV_VAR = "FP_DEBUG"

MISSING_ROOT_MESSAGE = (
    "Please set the $FP_FOLDER environment variable or the $GOPATH "
    "environment variable to a location that find-project can search. "
    "Neither are set."
)


def resolve_search_root(environ: Optional[Mapping[str, str]] = None,
                        fallback: Optional[str] = None) -> str:
    """
    Resolve the directory a search starts from.
    
    Args:
        environ: Environment mapping (defaults to os.environ)
        fallback: Root from the settings file, used when no variable is set
    
    Returns:
        Absolute path of an existing directory
    
    Raises:
        ConfigurationError: If no root is configured
        PathError: If the configured root is missing or is not a directory
    """
    if environ is None:
        environ = os.environ
    
    folder = environ.get(FOLDER_ENV_VAR)
    gopath = environ.get(GOPATH_ENV_VAR)
    
    if folder:
        source = f"${FOLDER_ENV_VAR}"
        location = Path(folder).expanduser()
    elif gopath:
        # Only the first entry of a list-style GOPATH is searched
        first_gopath = gopath.split(os.pathsep)[0]
        source = f"${GOPATH_ENV_VAR}/{GOPATH_SUBDIR}"
        location = Path(first_gopath).expanduser() / GOPATH_SUBDIR
    elif fallback:
        source = "settings file"
        location = Path(fallback).expanduser()
    else:
        raise ConfigurationError(MISSING_ROOT_MESSAGE)
    
    try:
        resolved = location.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathError(f"Unable to get absolute path to {source} ({location}): {e}", str(location)) from e
    
    if not resolved.is_dir():
        raise PathError(f"Path from {source} is not a directory: {resolved}", str(resolved))
    
    logger.debug(f"Search root resolved from {source}: {resolved}")
    return str(resolved)


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether $FP_DEBUG asks for traversal tracing."""
    if environ is None:
        environ = os.environ
    return DEBUG_ENV_VAR in environ
