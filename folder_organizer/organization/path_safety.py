"""
Safe filesystem operations for the organizer.

This layer decides nothing about categories. It validates paths, creates
category directories, picks collision-free names and moves files. Every
OSError is caught here and reported as a typed status, so no raw filesystem
fault reaches the organizer.
"""

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import Union

from ..core.types import DirectoryStatus, PathStatus, TransferStatus
from ..core.utils import compute_checksum

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# ERROR_NOT_SAME_DEVICE, raised by os.rename on Windows instead of EXDEV
_WINERROR_NOT_SAME_DEVICE = 17

_COPY_BUFFER_SIZE = 1024 * 1024


def folder_name(path: PathLike) -> str:
    """Name of the final component of a path ("/a/Documents" -> "Documents")."""
    return Path(path).name


def validate_path(root_path: PathLike) -> PathStatus:
    """
    Check that a root path exists, is a directory and can be listed.

    Existence and accessibility are checked separately: the directory is
    actually opened for listing, which needs traversal rights.

    Args:
        root_path: Directory the organizer is about to walk

    Returns:
        PathStatus describing the first problem found, or OK
    """
    path = Path(root_path)

    try:
        if not path.exists():
            return PathStatus.NOT_FOUND
        if not path.is_dir():
            return PathStatus.NOT_A_DIRECTORY

        with os.scandir(path) as entries:
            next(entries, None)
    except PermissionError as e:
        logger.debug(f"Permission denied validating {path}: {e}")
        return PathStatus.PERMISSION_DENIED
    except OSError as e:
        logger.debug(f"Could not validate {path}: {e}")
        return PathStatus.UNKNOWN

    return PathStatus.OK


def ensure_directory(target_directory: PathLike) -> DirectoryStatus:
    """
    Create a directory unless it already exists.

    A symbolic link holding the name is refused rather than followed.

    Args:
        target_directory: Directory to create (its parent must exist)

    Returns:
        ALREADY_EXISTS or CREATED on success, otherwise the failure kind
    """
    path = Path(target_directory)

    # Never a category folder, even when the link points at a directory
    if os.path.islink(path):
        logger.error(f"Cannot use {path}: it is a symbolic link")
        return DirectoryStatus.UNKNOWN

    if os.path.isdir(path):
        return DirectoryStatus.ALREADY_EXISTS

    try:
        path.mkdir()
    except FileExistsError:
        # Lost a race with another creator, or a file holds the name
        if os.path.isdir(path) and not os.path.islink(path):
            return DirectoryStatus.ALREADY_EXISTS
        logger.error(f"Cannot create {path}: a non-directory entry has that name")
        return DirectoryStatus.UNKNOWN
    except PermissionError as e:
        logger.error(f"Permission denied creating {path}: {e}")
        return DirectoryStatus.PERMISSION_DENIED
    except OSError as e:
        logger.error(f"Failed to create {path}: {e}")
        return DirectoryStatus.UNKNOWN

    logger.info(f"Created directory {path}")
    return DirectoryStatus.CREATED


def unique_destination(destination_dir: PathLike, filename: str) -> Path:
    """
    Collision-free path for a file inside a directory.

    Naming: "file.txt" -> "file(1).txt" -> "file(2).txt" -> ...
    The counter has no upper bound; it grows until a free name is found.

    Args:
        destination_dir: Directory the file is headed for
        filename: Original file name

    Returns:
        Path inside destination_dir that does not exist yet
    """
    destination_dir = Path(destination_dir)
    target_path = destination_dir / filename

    if not os.path.lexists(target_path):
        return target_path

    stem = Path(filename).stem
    suffix = Path(filename).suffix

    counter = 1
    while True:
        target_path = destination_dir / f"{stem}({counter}){suffix}"
        if not os.path.lexists(target_path):
            return target_path
        counter += 1


def _is_cross_device(error: OSError) -> bool:
    return (
        error.errno == errno.EXDEV
        or getattr(error, "winerror", None) == _WINERROR_NOT_SAME_DEVICE
    )


def atomic_transfer(source_path: PathLike, destination_dir: PathLike) -> TransferStatus:
    """
    Move a file with a single rename.

    The rename is all-or-nothing, but only works within one filesystem.

    Args:
        source_path: File to move
        destination_dir: Existing directory to move it into

    Returns:
        SUCCESS, PERMISSION_DENIED, CROSS_DEVICE or UNKNOWN
    """
    source = Path(source_path)
    target = unique_destination(destination_dir, source.name)

    try:
        os.rename(source, target)
    except PermissionError as e:
        logger.error(f"Permission denied moving {source} -> {target}: {e}")
        return TransferStatus.PERMISSION_DENIED
    except OSError as e:
        if _is_cross_device(e):
            logger.warning(f"Cannot rename across devices: {source} -> {target}")
            return TransferStatus.CROSS_DEVICE
        logger.error(f"Failed to move {source} -> {target}: {e}")
        return TransferStatus.UNKNOWN

    logger.info(f"Moved {source} → {target}")
    return TransferStatus.SUCCESS


def _discard(path: Path) -> None:
    """Remove a partial or redundant copy, logging if that fails too."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Could not remove {path}: {e}")


def _copy_verified(source: Path, target: Path, verify: bool) -> bool:
    """
    Copy bytes and metadata into a new file, then check the copy.

    Raises:
        OSError if reading, creating or writing fails
    """
    # "xb" refuses to open an existing file, so nothing is ever overwritten
    with open(source, "rb") as src, open(target, "xb") as dst:
        shutil.copyfileobj(src, dst, _COPY_BUFFER_SIZE)
    shutil.copystat(source, target)

    if os.path.getsize(source) != os.path.getsize(target):
        logger.error(f"Size mismatch after copying {source} -> {target}")
        return False

    if verify:
        source_checksum = compute_checksum(source)
        target_checksum = compute_checksum(target)
        if source_checksum is None or source_checksum != target_checksum:
            logger.error(
                f"Checksum mismatch after copying {source} -> {target}: "
                f"expected {source_checksum}, got {target_checksum}"
            )
            return False

    return True


def fallback_transfer(
    source_path: PathLike, destination_dir: PathLike, verify: bool = True
) -> TransferStatus:
    """
    Move a file by copying it and deleting the original.

    Slower than a rename but works across devices. The source is deleted
    only after the copy is complete and verified; if anything fails before
    that, the partial copy is removed and the source is left untouched.

    Args:
        source_path: File to move
        destination_dir: Existing directory to move it into
        verify: Compare SHA-256 checksums before deleting the source

    Returns:
        SUCCESS, PERMISSION_DENIED or UNKNOWN
    """
    source = Path(source_path)
    target = unique_destination(destination_dir, source.name)

    try:
        copied = _copy_verified(source, target, verify)
    except PermissionError as e:
        logger.error(f"Permission denied copying {source} -> {target}: {e}")
        _discard(target)
        return TransferStatus.PERMISSION_DENIED
    except FileExistsError as e:
        # Another writer took the name between probing and opening it
        logger.error(f"Destination appeared while copying {source}: {e}")
        return TransferStatus.UNKNOWN
    except OSError as e:
        logger.error(f"Failed to copy {source} -> {target}: {e}")
        _discard(target)
        return TransferStatus.UNKNOWN

    if not copied:
        _discard(target)
        return TransferStatus.UNKNOWN

    try:
        source.unlink()
    except OSError as e:
        logger.error(f"Copied {source} but could not delete it: {e}")
        # Keep exactly one copy: the untouched original
        _discard(target)
        if isinstance(e, PermissionError):
            return TransferStatus.PERMISSION_DENIED
        return TransferStatus.UNKNOWN

    logger.info(f"Copied and removed {source} → {target}")
    return TransferStatus.SUCCESS
