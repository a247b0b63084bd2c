"""
Type definitions for the organizer.

Every filesystem operation reports one of these statuses instead of raising,
so callers can decide how to report or recover.
"""

from enum import Enum


class PathStatus(str, Enum):
    """Result of validating a root path before traversal."""

    OK = "ok"
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN = "unknown"


class DirectoryStatus(str, Enum):
    """Result of ensuring a category directory exists."""

    ALREADY_EXISTS = "already_exists"
    CREATED = "created"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN = "unknown"

    @property
    def is_usable(self) -> bool:
        return self in (DirectoryStatus.ALREADY_EXISTS, DirectoryStatus.CREATED)


class TransferStatus(str, Enum):
    """Result of moving a single file."""

    SUCCESS = "success"
    PERMISSION_DENIED = "permission_denied"
    CROSS_DEVICE = "cross_device"  # atomic rename only
    UNKNOWN = "unknown"


class TransferMode(str, Enum):
    """How files are moved."""

    ATOMIC = "atomic"  # os.rename, same device only
    FALLBACK = "fallback"  # copy, verify, then delete


class FileOutcome(str, Enum):
    """Per-file decision taken by the organizer."""

    MOVED = "moved"
    ALREADY_CORRECT = "already_correct"
    FAILED = "failed"


class OrganizeStatus(str, Enum):
    """Terminal outcome of a whole organize run."""

    SUCCESS = "success"
    PATH_NOT_FOUND = "path_not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    DIRECTORY_CREATION_FAILED = "directory_creation_failed"
    ATOMIC_TRANSFER_FAILED = "atomic_transfer_failed"
    FALLBACK_TRANSFER_FAILED = "fallback_transfer_failed"
    UNKNOWN_ERROR = "unknown_error"

    @property
    def is_success(self) -> bool:
        return self is OrganizeStatus.SUCCESS

    @property
    def is_retryable_in_fallback(self) -> bool:
        """Whether re-running in fallback mode may recover from this status."""
        return self is OrganizeStatus.ATOMIC_TRANSFER_FAILED

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS = {
    OrganizeStatus.SUCCESS: "Files are organized successfully",
    OrganizeStatus.PATH_NOT_FOUND: "The selected path does not exist",
    OrganizeStatus.NOT_A_DIRECTORY: "The selected path is not a directory",
    OrganizeStatus.PERMISSION_DENIED: "Permission denied while accessing files",
    OrganizeStatus.DIRECTORY_CREATION_FAILED: "Failed to create a category folder",
    OrganizeStatus.ATOMIC_TRANSFER_FAILED: (
        "Atomic move failed, files may live on different devices"
    ),
    OrganizeStatus.FALLBACK_TRANSFER_FAILED: "Copy and delete fallback move failed",
    OrganizeStatus.UNKNOWN_ERROR: "An unknown error occurred",
}


# Root validation result -> run status
PATH_STATUS_TO_ORGANIZE_STATUS = {
    PathStatus.OK: OrganizeStatus.SUCCESS,
    PathStatus.NOT_FOUND: OrganizeStatus.PATH_NOT_FOUND,
    PathStatus.NOT_A_DIRECTORY: OrganizeStatus.NOT_A_DIRECTORY,
    PathStatus.PERMISSION_DENIED: OrganizeStatus.PERMISSION_DENIED,
    PathStatus.UNKNOWN: OrganizeStatus.UNKNOWN_ERROR,
}
