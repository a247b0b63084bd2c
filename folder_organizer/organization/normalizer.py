"""
Alias folder normalization for a single directory level.

Users create folders like "pics", "Photos" or "camera roll". Rather than add
another "Image Files" next to them, the first alias folder found for each
category is renamed to the canonical name. Normalization never creates or
merges folders and never recurses; it is advisory, so failures are logged
and ignored.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..core.config import CategoryConfig, default_config

logger = logging.getLogger(__name__)


def find_alias_folders(
    directory: Union[str, Path], config: Optional[CategoryConfig] = None
) -> Dict[str, Path]:
    """
    First alias folder per category among the immediate subdirectories.

    Args:
        directory: Directory level to inspect
        config: Category tables

    Returns:
        Mapping of canonical category name -> alias folder to promote,
        in directory listing order
    """
    config = config or default_config()
    chosen: Dict[str, Path] = {}

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_dir(follow_symlinks=False):
                    continue
                if config.is_canonical(entry.name):
                    continue

                category = config.resolve_alias(entry.name)
                if category is not None and category not in chosen:
                    chosen[category] = Path(entry.path)
    except OSError as e:
        logger.warning(f"Cannot list {directory} for normalization: {e}")

    return chosen


def normalize_category_folders(
    directory: Union[str, Path], config: Optional[CategoryConfig] = None
) -> List[Tuple[Path, Path]]:
    """
    Rename alias folders at one directory level to their canonical names.

    At most one alias per category is renamed. A category whose canonical
    folder already exists here is left alone, as is every other alias folder
    of the same category.

    Args:
        directory: Directory level to normalize
        config: Category tables

    Returns:
        (old_path, new_path) for every folder actually renamed
    """
    config = config or default_config()
    renamed: List[Tuple[Path, Path]] = []

    for canonical_name, old_path in find_alias_folders(directory, config).items():
        if old_path.name == canonical_name:
            continue

        new_path = old_path.parent / canonical_name
        if os.path.lexists(new_path):
            logger.debug(
                f"Keeping alias folder {old_path}: {canonical_name} already exists"
            )
            continue

        try:
            old_path.rename(new_path)
        except OSError as e:
            logger.warning(f"Could not rename {old_path} to {canonical_name}: {e}")
            continue

        logger.info(f"Renamed folder {old_path} → {new_path}")
        renamed.append((old_path, new_path))

    return renamed
