"""
Organization module for in-place directory reorganization.

Moves files into category folders next to where they are found, renaming
alias folders to canonical names and never overwriting an existing file.
"""

from .normalizer import find_alias_folders, normalize_category_folders
from .organizer import (
    DirectoryOrganizer,
    OrganizationResult,
    OrganizerState,
    organize,
    organize_with_fallback,
)
from .path_safety import (
    atomic_transfer,
    ensure_directory,
    fallback_transfer,
    unique_destination,
    validate_path,
)

__all__ = [
    "find_alias_folders",
    "normalize_category_folders",
    "DirectoryOrganizer",
    "OrganizationResult",
    "OrganizerState",
    "organize",
    "organize_with_fallback",
    "atomic_transfer",
    "ensure_directory",
    "fallback_transfer",
    "unique_destination",
    "validate_path",
]
