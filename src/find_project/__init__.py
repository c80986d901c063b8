"""
find-project - Core Package

Locates a folder by name inside a large directory tree (typically $GOPATH/src
or $FP_FOLDER) and prints the first matching path.
"""

__version__ = "0.1.0"
__author__ = "find-project Team"
