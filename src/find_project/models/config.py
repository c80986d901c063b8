"""
Configuration data models for find-project.

This module defines the persistent defaults a user can keep in a settings
file: an optional search root and the default state of every search flag.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .search_request import SearchRequest, TraversalOrder


class FinderSettings(BaseModel):
    """
    Default search options loaded from a settings file.
    
    Attributes:
        root: Directory to search when neither $FP_FOLDER nor $GOPATH is set
        include_vendor: Default for --include-vendor
        include_hidden: Default for --include-hidden
        sort_alphabetically: Default for --sort-alphabetically
        order: Default traversal order
        follow_symlinks: Default for --follow-symlinks
    """
    
    model_config = ConfigDict(extra='forbid')
    
    root: Optional[str] = Field(None, description="Fallback search root")
    include_vendor: bool = Field(False, description="Search inside vendor folders")
    include_hidden: bool = Field(False, description="Search inside hidden (dot) folders")
    sort_alphabetically: bool = Field(False, description="Sort folders alphabetically")
    order: TraversalOrder = Field(TraversalOrder.DEPTH_FIRST, description="Traversal order")
    follow_symlinks: bool = Field(False, description="Follow symlinked directories")
    
    @field_validator('root')
    @classmethod
    def validate_root(cls, v: Optional[str]) -> Optional[str]:
        """Expand user path; blank roots count as unset."""
        if v is None or not v.strip():
            return None
        return str(Path(v.strip()).expanduser())
    
    @field_validator('order', mode='before')
    @classmethod
    def validate_order(cls, v) -> TraversalOrder:
        """Validate and convert order to enum."""
        if isinstance(v, str):
            try:
                return TraversalOrder(v.lower())
            except ValueError:
                valid = [o.value for o in TraversalOrder]
                raise ValueError(f"Invalid traversal order '{v}'. Must be one of: {valid}")
        return v
    
    def build_request(self, target_name: str, root: str, **overrides: Any) -> SearchRequest:
        """
        Create a SearchRequest from these defaults.
        
        Args:
            target_name: Folder name to look for
            root: Resolved search root
            **overrides: Options that take precedence over the settings (None values are ignored)
        
        Returns:
            Immutable search request
        """
        options = {
            'include_vendor': self.include_vendor,
            'include_hidden': self.include_hidden,
            'sort_alphabetically': self.sort_alphabetically,
            'order': self.order,
            'follow_symlinks': self.follow_symlinks,
        }
        options.update({key: value for key, value in overrides.items() if value is not None})
        
        return SearchRequest(root=root, target_name=target_name, **options)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinderSettings':
        """Create settings from dictionary representation."""
        return cls.model_validate(data)
    
    def __str__(self) -> str:
        """String representation of the settings."""
        parts = [f"Root: {self.root or '(environment)'}"]
        parts.append(f"Vendor: {self.include_vendor}")
        parts.append(f"Hidden: {self.include_hidden}")
        parts.append(f"Sorted: {self.sort_alphabetically}")
        parts.append(f"Order: {self.order.value}")
        
        return " | ".join(parts)
