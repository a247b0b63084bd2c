"""
Core classification data: category tables, configuration and status types.
"""

from .categories import CATEGORY_ALIASES, CATEGORY_EXTENSIONS, OTHERS_CATEGORY
from .classifier import classify, extension_of
from .config import CategoryConfig, OrganizerSettings, default_config
from .types import (
    DirectoryStatus,
    FileOutcome,
    OrganizeStatus,
    PathStatus,
    TransferMode,
    TransferStatus,
)

__all__ = [
    "CATEGORY_ALIASES",
    "CATEGORY_EXTENSIONS",
    "OTHERS_CATEGORY",
    "classify",
    "extension_of",
    "CategoryConfig",
    "OrganizerSettings",
    "default_config",
    "DirectoryStatus",
    "FileOutcome",
    "OrganizeStatus",
    "PathStatus",
    "TransferMode",
    "TransferStatus",
]
