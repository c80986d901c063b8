"""
Search results data models for find-project.

This module defines the transient directory entries produced while listing a
folder and the single-outcome result of a search.
"""

from typing import List, Optional
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .search_request import HIDDEN_PREFIX, VENDOR_FOLDER_NAME
from ..exceptions import NotFoundError


class DirectoryEntry(BaseModel):
    """
    One child of a directory being scanned.
    
    Attributes:
        name: Base name of the entry
        path: Full path of the entry
        is_directory: Whether the entry is a directory (symlinks resolved only when following them)
        is_symlink: Whether the entry itself is a symbolic link
    """
    
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., min_length=1, description="Base name of the entry")
    path: str = Field(..., description="Full path of the entry")
    is_directory: bool = Field(..., description="Whether the entry is a directory")
    is_symlink: bool = Field(False, description="Whether the entry is a symbolic link")
    
    def is_hidden(self) -> bool:
        """Check if this is a dot folder."""
        return self.name.startswith(HIDDEN_PREFIX)
    
    def is_vendor(self) -> bool:
        """Check if this is a vendor folder."""
        return self.name == VENDOR_FOLDER_NAME


class SearchResult(BaseModel):
    """
    Outcome of a single folder search.
    
    Either carries the absolute path of the first match or no path at all.
    There is no representation for multiple matches: the walker stops at the
    first hit.
    
    Attributes:
        target_name: Folder name that was searched for
        root: Directory the search started from
        path: Absolute path of the match, or None when nothing matched
        directories_scanned: Number of directories whose children were listed
        unreadable_directories: Directories that could not be listed and were skipped
    """
    
    target_name: str = Field(..., description="Folder name that was searched for")
    root: str = Field(..., description="Directory the search started from")
    path: Optional[str] = Field(None, description="Absolute path of the match")
    directories_scanned: int = Field(0, ge=0, description="Directories listed during the search")
    unreadable_directories: List[str] = Field(
        default_factory=list,
        description="Directories that could not be listed"
    )
    
    @property
    def found(self) -> bool:
        """Whether the search produced a match."""
        return self.path is not None
    
    def raise_if_missing(self) -> str:
        """
        Return the matched path or raise when there is none.
        
        Raises:
            NotFoundError: If the search finished without a match
        """
        if self.path is None:
            raise NotFoundError(self.target_name, self.root)
        return self.path
    
    def relative_path(self) -> Optional[str]:
        """Path of the match relative to the search root."""
        if self.path is None:
            return None
        return str(Path(self.path).relative_to(self.root))
    
    def __str__(self) -> str:
        """String representation of the search result."""
        if self.found:
            return f"Found '{self.target_name}': {self.path}"
        return f"'{self.target_name}' not found inside {self.root}"
