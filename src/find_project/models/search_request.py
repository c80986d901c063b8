"""
Search request data models for find-project.

This module defines the immutable description of a single folder search:
where to start, what base name to look for, and which filtering and
ordering rules the traversal applies.
"""

import os
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from .search_results import DirectoryEntry


VENDOR_FOLDER_NAME = "vendor"
HIDDEN_PREFIX = "."


class TraversalOrder(Enum):
    """Order in which the directory tree is explored."""
    DEPTH_FIRST = "depth-first"
    BREADTH_FIRST = "breadth-first"


class SearchRequest(BaseModel):
    """
    Represents one folder search with all of its options.
    
    A request is created once per invocation from the resolved configuration
    and never changes while the traversal runs.
    
    Attributes:
        root: Absolute path of the directory the search starts from
        target_name: Base name to look for (exact, case-sensitive)
        include_vendor: Also match and descend into folders named "vendor"
        include_hidden: Also match and descend into folders starting with "."
        sort_alphabetically: Visit the children of every directory sorted by name
        order: Depth-first (default) or breadth-first exploration
        follow_symlinks: Treat symlinks to directories as directories
    """
    
    model_config = ConfigDict(frozen=True)
    
    root: str = Field(..., min_length=1, description="Directory the search starts from")
    target_name: str = Field(..., min_length=1, description="Folder name to look for")
    include_vendor: bool = Field(False, description="Search inside vendor folders")
    include_hidden: bool = Field(False, description="Search inside hidden (dot) folders")
    sort_alphabetically: bool = Field(False, description="Sort folders alphabetically")
    order: TraversalOrder = Field(TraversalOrder.DEPTH_FIRST, description="Traversal order")
    follow_symlinks: bool = Field(False, description="Follow symlinked directories")
    
    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Expand and normalize the root path; existence is checked by the walker."""
        if not v.strip():
            raise ValueError("Search root cannot be empty")
        return str(Path(v).expanduser().resolve())
    
    @field_validator('target_name')
    @classmethod
    def validate_target_name(cls, v: str) -> str:
        """A target is a single path component, compared verbatim."""
        if not v:
            raise ValueError("Folder name cannot be empty")
        
        separators = {'/', os.sep}
        if os.altsep:
            separators.add(os.altsep)
        if any(sep in v for sep in separators):
            raise ValueError(f"Folder name must not contain a path separator: {v!r}")
        
        if v in ('.', '..'):
            raise ValueError(f"Folder name must name a real folder, got {v!r}")
        
        return v
    
    @field_validator('order', mode='before')
    @classmethod
    def validate_order(cls, v) -> TraversalOrder:
        """Validate and convert order to enum."""
        if isinstance(v, str):
            try:
                return TraversalOrder(v)
            except ValueError:
                raise ValueError(f"Invalid traversal order: {v}")
        return v
    
    def is_excluded(self, entry: "DirectoryEntry") -> bool:
        """Check whether a folder is filtered out by the vendor/hidden rules."""
        if not self.include_hidden and entry.is_hidden():
            return True
        if not self.include_vendor and entry.is_vendor():
            return True
        return False
    
    def matches(self, name: str) -> bool:
        """Check whether a folder name is the one being searched for."""
        return name == self.target_name
    
    def __str__(self) -> str:
        """String representation of the search request."""
        parts = [f"Folder: '{self.target_name}'", f"Root: {self.root}"]
        
        flags = [
            flag for flag, enabled in (
                ('vendor', self.include_vendor),
                ('hidden', self.include_hidden),
                ('sorted', self.sort_alphabetically),
                ('symlinks', self.follow_symlinks),
            ) if enabled
        ]
        if flags:
            parts.append(f"Options: {', '.join(flags)}")
        
        parts.append(f"Order: {self.order.value}")
        
        return " | ".join(parts)
