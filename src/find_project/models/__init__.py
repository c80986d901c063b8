"""
Data models for find-project.

This module contains all the core data structures used throughout the system.
"""

from .search_request import SearchRequest, TraversalOrder
from .search_results import DirectoryEntry, SearchResult
from .config import FinderSettings

__all__ = ['SearchRequest', 'TraversalOrder', 'DirectoryEntry', 'SearchResult', 'FinderSettings']
