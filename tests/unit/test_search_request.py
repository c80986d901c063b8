"""
Unit tests for the SearchRequest data model.
"""

import pytest
from pathlib import Path
from pydantic import ValidationError
from find_project.models.search_request import SearchRequest, TraversalOrder
from find_project.models.search_results import DirectoryEntry


def _entry(name):
    return DirectoryEntry(name=name, path=f"/tmp/{name}", is_directory=True)


class TestSearchRequest:
    """Test cases for SearchRequest model."""
    
    def test_basic_request_creation(self):
        """Test creating a request with default options."""
        request = SearchRequest(root="/home/user/go/src", target_name="autoscaler")
        
        assert request.target_name == "autoscaler"
        assert request.include_vendor is False
        assert request.include_hidden is False
        assert request.sort_alphabetically is False
        assert request.follow_symlinks is False
        assert request.order == TraversalOrder.DEPTH_FIRST
    
    def test_root_is_normalized(self, tmp_path):
        """Test that the root is expanded and made absolute."""
        request = SearchRequest(root=str(tmp_path / "a" / ".." / "b"), target_name="x")
        assert request.root == str((tmp_path / "b").resolve())
        
        request = SearchRequest(root="~", target_name="x")
        assert request.root == str(Path.home().resolve())
    
    def test_request_is_immutable(self):
        """Test that a request cannot change once created."""
        request = SearchRequest(root="/tmp", target_name="x")
        
        with pytest.raises(ValidationError):
            request.include_vendor = True
    
    def test_empty_target_rejected(self):
        """Test that empty folder names are rejected."""
        with pytest.raises(ValidationError):
            SearchRequest(root="/tmp", target_name="")
    
    def test_whitespace_target_accepted(self):
        """Test that a whitespace-only name is a legal folder name."""
        request = SearchRequest(root="/tmp", target_name="  ")
        assert request.target_name == "  "
    
    def test_target_with_separator_rejected(self):
        """Test that folder names must be a single path component."""
        with pytest.raises(ValidationError, match="path separator"):
            SearchRequest(root="/tmp", target_name="kubernetes/autoscaler")
    
    def test_dot_targets_rejected(self):
        """Test that '.' and '..' are not valid folder names."""
        for name in ('.', '..'):
            with pytest.raises(ValidationError, match="real folder"):
                SearchRequest(root="/tmp", target_name=name)
    
    def test_target_kept_verbatim(self):
        """Test that the folder name is not normalized in any way."""
        request = SearchRequest(root="/tmp", target_name="My Project ")
        assert request.target_name == "My Project "
    
    def test_empty_root_rejected(self):
        """Test that an empty root is rejected."""
        with pytest.raises(ValidationError):
            SearchRequest(root="", target_name="x")
    
    def test_order_from_string(self):
        """Test that traversal order accepts its string value."""
        request = SearchRequest(root="/tmp", target_name="x", order="breadth-first")
        assert request.order == TraversalOrder.BREADTH_FIRST
        
        with pytest.raises(ValidationError, match="Invalid traversal order"):
            SearchRequest(root="/tmp", target_name="x", order="random")
    
    def test_is_excluded_defaults(self):
        """Test the default vendor and hidden filters."""
        request = SearchRequest(root="/tmp", target_name="x")
        
        assert request.is_excluded(_entry("vendor"))
        assert request.is_excluded(_entry(".git"))
        assert not request.is_excluded(_entry("vendors"))
        assert not request.is_excluded(_entry("Vendor"))
        assert not request.is_excluded(_entry("src"))
    
    def test_is_excluded_with_includes(self):
        """Test that include flags disable the filters."""
        request = SearchRequest(root="/tmp", target_name="x", include_vendor=True, include_hidden=True)
        
        assert not request.is_excluded(_entry("vendor"))
        assert not request.is_excluded(_entry(".git"))
    
    def test_matches_is_exact(self):
        """Test that matching is exact and case-sensitive."""
        request = SearchRequest(root="/tmp", target_name="tgen")
        
        assert request.matches("tgen")
        assert not request.matches("TGEN")
        assert not request.matches("tgen2")
        assert not request.matches("tge")
    
    def test_string_representation(self):
        """Test the human-readable representation."""
        request = SearchRequest(root="/tmp", target_name="tgen", include_vendor=True)
        text = str(request)
        
        assert "Folder: 'tgen'" in text
        assert "vendor" in text
        assert "depth-first" in text
