"""
Search tools for find-project.

This module contains the directory walker that performs the folder search.
"""

from .dir_walker import DirectoryWalker, find_directory, locate_directory

__all__ = ['DirectoryWalker', 'find_directory', 'locate_directory']
