"""
Resume generator MCP server.
"""

from .security import resolve_in_root, sanitize_path
from .workspace import FolderListing, ResumeFile, ResumeWorkspace, SavedResume

__all__ = [
    "FolderListing",
    "ResumeFile",
    "ResumeWorkspace",
    "SavedResume",
    "resolve_in_root",
    "sanitize_path",
]
