"""
Directory walker for find-project.

This module traverses a directory tree looking for a folder with a given base
name. Folders are filtered (vendor and dot folders by default), optionally
sorted, and matched by exact name. The walk stops at the first match: the
children of a directory are always checked before any of them is descended
into, so a shallower folder wins over a deeper one in the same branch.
"""

import os
import logging
from collections import deque
from pathlib import Path
from typing import Deque, Dict, Iterator, List, Optional, Set, Tuple

from ..exceptions import PartialReadError, PathError
from ..models.search_request import SearchRequest, TraversalOrder
from ..models.search_results import DirectoryEntry, SearchResult


logger = logging.getLogger(__name__)


class DirectoryWalker:
    """
    Walks a directory tree and returns the first folder matching a name.
    
    This class provides:
    - Depth-first (default) or breadth-first exploration
    - Vendor and hidden folder filtering
    - Optional alphabetical ordering of siblings
    - Best-effort traversal: unreadable subtrees are skipped, not fatal
    - Optional symlink following with loop protection
    """
    
    def __init__(self, request: SearchRequest):
        """
        Initialize the directory walker.
        
        Args:
            request: Search request describing root, target and options
        """
        self.request = request
        self._visited: Set[Tuple[int, int]] = set()
        self._unreadable: List[str] = []
        self._stats = {
            'directories_scanned': 0,
            'directories_skipped': 0,
            'read_errors': 0,
            'symlink_loops': 0,
            'symlinks_followed': 0
        }
    
    def search(self) -> SearchResult:
        """
        Run the search described by the request.
        
        Returns:
            SearchResult with the matched path, or without one when nothing matched
        
        Raises:
            PathError: If the root is missing, is not a directory or cannot be listed
        """
        self.reset_stats()
        self._visited = set()
        self._unreadable = []
        
        root_path = Path(self.request.root)
        if not root_path.exists():
            raise PathError(f"Search root does not exist: {root_path}", str(root_path))
        if not root_path.is_dir():
            raise PathError(f"Search root is not a directory: {root_path}", str(root_path))
        
        try:
            root_children = self.list_directories(str(root_path))
        except PartialReadError as e:
            raise PathError(f"Search root cannot be read: {root_path}", str(root_path)) from e
        
        if self.request.order == TraversalOrder.BREADTH_FIRST:
            match = self._search_breadth_first(root_children)
        else:
            match = self._search_depth_first(root_children)
        
        return SearchResult(
            target_name=self.request.target_name,
            root=str(root_path),
            path=match,
            directories_scanned=self._stats['directories_scanned'],
            unreadable_directories=list(self._unreadable)
        )
    
    def _search_depth_first(self, root_children: List[DirectoryEntry]) -> Optional[str]:
        """
        Depth-first, pre-order walk with an explicit stack of sibling iterators.
        
        Args:
            root_children: Filtered and ordered children of the root
        
        Returns:
            Path of the first match or None
        """
        match = self._first_match(root_children)
        if match:
            return match
        
        stack: List[Iterator[DirectoryEntry]] = [iter(root_children)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue
            
            children = self._read_children(child.path)
            match = self._first_match(children)
            if match:
                return match
            
            if children:
                stack.append(iter(children))
        
        return None
    
    def _search_breadth_first(self, root_children: List[DirectoryEntry]) -> Optional[str]:
        """
        Level-by-level walk; the globally shallowest match wins.
        
        Args:
            root_children: Filtered and ordered children of the root
        
        Returns:
            Path of the first match or None
        """
        match = self._first_match(root_children)
        if match:
            return match
        
        queue: Deque[DirectoryEntry] = deque(root_children)
        while queue:
            child = queue.popleft()
            
            children = self._read_children(child.path)
            match = self._first_match(children)
            if match:
                return match
            
            queue.extend(children)
        
        return None
    
    def _first_match(self, entries: List[DirectoryEntry]) -> Optional[str]:
        """Return the path of the first entry whose name is the target."""
        for entry in entries:
            if self.request.matches(entry.name):
                logger.debug(f"Found: {entry.path}")
                return entry.path
        return None
    
    def _read_children(self, path: str) -> List[DirectoryEntry]:
        """
        List a directory below the root, treating read failures as an empty folder.
        
        Args:
            path: Directory to list
        
        Returns:
            Filtered and ordered child directories
        """
        try:
            return self.list_directories(path)
        except PartialReadError as e:
            logger.debug(f"Skipping unreadable directory {e.path}: {e.cause}")
            self._stats['read_errors'] += 1
            self._unreadable.append(e.path)
            return []
    
    def list_directories(self, path: str) -> List[DirectoryEntry]:
        """
        List the child directories of a folder that pass the request's filters.
        
        Args:
            path: Directory to list
        
        Returns:
            Child directories, sorted by name when the request asks for it
        
        Raises:
            PartialReadError: If the directory cannot be listed
        """
        if self.request.follow_symlinks and not self._mark_visited(path):
            logger.debug(f"Already visited, not descending again: {path}")
            self._stats['symlink_loops'] += 1
            return []
        
        logger.debug(f"Searching in: {path}")
        self._stats['directories_scanned'] += 1
        
        directories = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    dir_entry = self._to_directory_entry(entry)
                    if not dir_entry.is_directory:
                        continue
                    
                    if self.request.is_excluded(dir_entry):
                        self._stats['directories_skipped'] += 1
                        continue
                    
                    if dir_entry.is_symlink:
                        logger.debug(f"Following symlinked folder: {dir_entry.path}")
                        self._stats['symlinks_followed'] += 1
                    
                    directories.append(dir_entry)
        except OSError as e:
            raise PartialReadError(path, e) from e
        
        if self.request.sort_alphabetically:
            directories.sort(key=lambda d: d.name)
        
        return directories
    
    def _to_directory_entry(self, entry: os.DirEntry) -> DirectoryEntry:
        """
        Convert an os.DirEntry into a DirectoryEntry.
        
        Symlinks count as directories only when the request follows them.
        Entries whose type cannot be determined are treated as non-directories.
        """
        try:
            is_symlink = entry.is_symlink()
            is_directory = entry.is_dir(follow_symlinks=self.request.follow_symlinks)
        except OSError as e:
            logger.debug(f"Cannot determine type of {entry.path}: {e}")
            is_symlink = False
            is_directory = False
        
        return DirectoryEntry(
            name=entry.name,
            path=entry.path,
            is_directory=is_directory,
            is_symlink=is_symlink
        )
    
    def _mark_visited(self, path: str) -> bool:
        """
        Record a directory by device and inode.
        
        Returns:
            False if the directory was already visited during this search
        """
        try:
            stat_result = os.stat(path)
        except OSError as e:
            raise PartialReadError(path, e) from e
        
        key = (stat_result.st_dev, stat_result.st_ino)
        if key in self._visited:
            return False
        
        self._visited.add(key)
        return True
    
    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the walking operation.
        
        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()
    
    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = {
            'directories_scanned': 0,
            'directories_skipped': 0,
            'read_errors': 0,
            'symlink_loops': 0,
            'symlinks_followed': 0
        }


def find_directory(root: str, target_name: str, **options) -> Optional[str]:
    """
    Find the first folder named target_name under root.
    
    Args:
        root: Directory to start from
        target_name: Folder name to look for
        **options: Any other SearchRequest field (include_vendor, include_hidden, ...)
    
    Returns:
        Absolute path of the match or None
    
    Raises:
        PathError: If root is missing or is not a directory
    """
    request = SearchRequest(root=root, target_name=target_name, **options)
    return DirectoryWalker(request).search().path


def locate_directory(root: str, target_name: str, **options) -> str:
    """
    Like find_directory, but a missing folder is an error.
    
    Raises:
        PathError: If root is missing or is not a directory
        NotFoundError: If no folder named target_name exists under root
    """
    request = SearchRequest(root=root, target_name=target_name, **options)
    return DirectoryWalker(request).search().raise_if_missing()
