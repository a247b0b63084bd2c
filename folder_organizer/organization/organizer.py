"""
Directory organizer.

Walks a directory tree with an explicit stack (no recursion), normalizes
alias folders at each level and moves every misplaced file into the folder
for its category. The first hard failure stops the run; a second run over an
unchanged tree moves nothing.
"""

import logging
import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, Field

from ..core.classifier import classify
from ..core.config import CategoryConfig, default_config
from ..core.types import (
    PATH_STATUS_TO_ORGANIZE_STATUS,
    DirectoryStatus,
    FileOutcome,
    OrganizeStatus,
    TransferMode,
    TransferStatus,
)
from .normalizer import normalize_category_folders
from .path_safety import (
    atomic_transfer,
    ensure_directory,
    fallback_transfer,
    folder_name,
    validate_path,
)

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."

_DIRECTORY_FAILURES = {
    DirectoryStatus.PERMISSION_DENIED: OrganizeStatus.PERMISSION_DENIED,
    DirectoryStatus.UNKNOWN: OrganizeStatus.DIRECTORY_CREATION_FAILED,
}

_ATOMIC_FAILURES = {
    TransferStatus.PERMISSION_DENIED: OrganizeStatus.PERMISSION_DENIED,
    TransferStatus.CROSS_DEVICE: OrganizeStatus.ATOMIC_TRANSFER_FAILED,
    TransferStatus.UNKNOWN: OrganizeStatus.UNKNOWN_ERROR,
}

_FALLBACK_FAILURES = {
    TransferStatus.PERMISSION_DENIED: OrganizeStatus.PERMISSION_DENIED,
    TransferStatus.CROSS_DEVICE: OrganizeStatus.FALLBACK_TRANSFER_FAILED,
    TransferStatus.UNKNOWN: OrganizeStatus.FALLBACK_TRANSFER_FAILED,
}


class OrganizerState(str, Enum):
    """Lifecycle of a single organize run."""

    IDLE = "idle"
    VALIDATING_ROOT = "validating_root"
    WALKING = "walking"
    DONE = "done"
    FAILED = "failed"


class OrganizationResult(BaseModel):
    """Result of an organize run."""

    root: Path
    mode: TransferMode
    status: OrganizeStatus = OrganizeStatus.SUCCESS
    files_moved: int = 0
    files_skipped: int = 0
    folders_renamed: int = 0
    directories_visited: int = 0
    failed_path: Optional[Path] = None
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def succeeded(self) -> bool:
        return self.status.is_success

    @property
    def duration_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()


class _Entry(NamedTuple):
    path: Path
    is_file: bool
    is_dir: bool
    is_symlink: bool


class DirectoryOrganizer:
    """Organize a directory tree into category folders."""

    def __init__(
        self,
        config: Optional[CategoryConfig] = None,
        verify_copies: bool = True,
    ):
        """
        Initialize the organizer.

        Args:
            config: Category tables (defaults to the built-in tables)
            verify_copies: Checksum fallback copies before deleting originals
        """
        self.config = config or default_config()
        self.verify_copies = verify_copies
        self.state = OrganizerState.IDLE
        self.last_result: Optional[OrganizationResult] = None

    def run(
        self,
        root_path: Union[str, Path],
        mode: TransferMode = TransferMode.ATOMIC,
    ) -> OrganizationResult:
        """
        Organize everything below root_path.

        Blocks until the whole tree is processed or the first failure.

        Args:
            root_path: Directory to organize
            mode: ATOMIC (rename) or FALLBACK (copy, verify, delete)

        Returns:
            Organization result with the terminal status and statistics
        """
        root = Path(root_path)
        mode = TransferMode(mode)
        result = OrganizationResult(root=root, mode=mode)

        logger.info(f"Organizing {root} ({mode.value} mode)")

        self.state = OrganizerState.VALIDATING_ROOT
        status = PATH_STATUS_TO_ORGANIZE_STATUS[validate_path(root)]
        if not status.is_success:
            result.failed_path = root
            return self._finish(result, status)

        self.state = OrganizerState.WALKING
        status = self._walk(root, mode, result)
        return self._finish(result, status)

    def _finish(
        self, result: OrganizationResult, status: OrganizeStatus
    ) -> OrganizationResult:
        result.status = status
        result.completed_at = datetime.now()
        self.last_result = result

        if status.is_success:
            self.state = OrganizerState.DONE
            logger.info(
                f"Organized {result.root}: {result.files_moved} moved, "
                f"{result.files_skipped} already in place, "
                f"{result.folders_renamed} folders renamed"
            )
        else:
            self.state = OrganizerState.FAILED
            logger.error(
                f"Organizing {result.root} failed with {status.value}"
                + (f" at {result.failed_path}" if result.failed_path else "")
            )
        return result

    def _walk(
        self, root: Path, mode: TransferMode, result: OrganizationResult
    ) -> OrganizeStatus:
        # LIFO: the most recently discovered directory is processed next
        pending: List[Path] = [root]

        while pending:
            current = pending.pop()
            result.directories_visited += 1

            renamed = normalize_category_folders(current, self.config)
            result.folders_renamed += len(renamed)

            try:
                entries = self._list_entries(current)
            except PermissionError as e:
                logger.error(f"Permission denied listing {current}: {e}")
                result.failed_path = current
                return OrganizeStatus.PERMISSION_DENIED
            except OSError as e:
                logger.error(f"Failed to list {current}: {e}")
                result.failed_path = current
                return OrganizeStatus.UNKNOWN_ERROR

            for entry in entries:
                if entry.is_symlink:
                    logger.debug(f"Skipping symlink {entry.path}")
                    continue

                if entry.is_file:
                    outcome, status = self.handle_file(current, entry.path, mode, root)
                    if outcome is FileOutcome.MOVED:
                        result.files_moved += 1
                    elif outcome is FileOutcome.ALREADY_CORRECT:
                        result.files_skipped += 1
                    else:
                        result.failed_path = entry.path
                        return status
                elif entry.is_dir and not entry.path.name.startswith(HIDDEN_PREFIX):
                    pending.append(entry.path)

        return OrganizeStatus.SUCCESS

    @staticmethod
    def _list_entries(directory: Path) -> List[_Entry]:
        """Snapshot one directory level so moves cannot disturb the listing."""
        with os.scandir(directory) as entries:
            return [
                _Entry(
                    path=Path(entry.path),
                    is_file=entry.is_file(follow_symlinks=False),
                    is_dir=entry.is_dir(follow_symlinks=False),
                    is_symlink=entry.is_symlink(),
                )
                for entry in entries
            ]

    def handle_file(
        self,
        current_directory: Union[str, Path],
        file_path: Union[str, Path],
        mode: TransferMode,
        root: Optional[Union[str, Path]] = None,
    ) -> Tuple[FileOutcome, OrganizeStatus]:
        """
        Put one file where it belongs.

        A file already inside its category folder, or inside an alias folder
        of its category, is left alone. A file inside a category folder it
        does not belong to is moved out to the parent level, never into a
        nested category folder. Otherwise it goes into a category folder at
        the current level.

        The root is the one exception: it is never evicted from, even when it
        is named like a category. Misplaced files at the root of a run over
        "Image Files" therefore land in "Image Files/Text Files". This is the
        only case where a category folder ends up nested in another.

        Args:
            current_directory: Directory being processed (the file's parent)
            file_path: File to place
            mode: Transfer mode
            root: Root of the run; files are never evicted above it

        Returns:
            (outcome, status) where status is SUCCESS unless outcome is FAILED
        """
        current = Path(current_directory)
        mode = TransferMode(mode)
        category = classify(file_path, self.config)
        parent_name = folder_name(current)

        if category == parent_name or self.config.resolve_alias(parent_name) == category:
            logger.debug(f"{file_path} already in {parent_name}")
            return FileOutcome.ALREADY_CORRECT, OrganizeStatus.SUCCESS

        at_root = root is not None and current == Path(root)
        if self.config.canonical_for_folder(parent_name) is not None and not at_root:
            # Inside another category's folder: move out, not deeper
            base_location = current.parent
        else:
            base_location = current

        destination = base_location / category

        directory_status = ensure_directory(destination)
        if not directory_status.is_usable:
            return FileOutcome.FAILED, _DIRECTORY_FAILURES[directory_status]

        if mode is TransferMode.ATOMIC:
            transfer_status = atomic_transfer(file_path, destination)
            failures = _ATOMIC_FAILURES
        else:
            transfer_status = fallback_transfer(
                file_path, destination, verify=self.verify_copies
            )
            failures = _FALLBACK_FAILURES

        if transfer_status is TransferStatus.SUCCESS:
            return FileOutcome.MOVED, OrganizeStatus.SUCCESS
        return FileOutcome.FAILED, failures[transfer_status]


def organize(
    root_path: Union[str, Path],
    mode: TransferMode = TransferMode.ATOMIC,
    config: Optional[CategoryConfig] = None,
) -> OrganizeStatus:
    """
    Organize a directory tree and report a single terminal status.

    Args:
        root_path: Directory to organize
        mode: ATOMIC or FALLBACK transfer mode
        config: Category tables (defaults to the built-in tables)

    Returns:
        Terminal organize status
    """
    return DirectoryOrganizer(config=config).run(root_path, mode).status


def organize_with_fallback(
    root_path: Union[str, Path],
    config: Optional[CategoryConfig] = None,
    verify_copies: bool = True,
) -> OrganizationResult:
    """
    Organize with atomic moves, retrying once in fallback mode if needed.

    The retry only happens when the atomic run stopped at a cross-device
    move; every other failure is returned as-is.

    Args:
        root_path: Directory to organize
        config: Category tables
        verify_copies: Checksum fallback copies before deleting originals

    Returns:
        Result of the last run performed
    """
    organizer = DirectoryOrganizer(config=config, verify_copies=verify_copies)
    result = organizer.run(root_path, TransferMode.ATOMIC)

    if result.status.is_retryable_in_fallback:
        logger.warning(
            f"Atomic move failed at {result.failed_path}, retrying in fallback mode"
        )
        result = organizer.run(root_path, TransferMode.FALLBACK)

    return result
