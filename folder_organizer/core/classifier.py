"""
Extension based file classification.

Answers one question: given a file, which category folder does it belong to?
No filesystem access happens here.
"""

from pathlib import PurePath
from typing import Optional, Union

from .config import CategoryConfig, default_config


def extension_of(path: Union[str, PurePath]) -> str:
    """
    Normalized extension of the final path component.

    Only the last suffix counts, so "archive.tar.gz" gives "gz".

    Args:
        path: File path or bare file name

    Returns:
        Lowercase extension without the dot, or "" if there is none
    """
    return PurePath(path).suffix.lower().lstrip(".")


def classify(
    path: Union[str, PurePath], config: Optional[CategoryConfig] = None
) -> str:
    """
    Category name for a file, based on its extension.

    Args:
        path: File path or bare file name
        config: Category tables (defaults to the built-in tables)

    Returns:
        Canonical category name, or the "Others" category when the extension
        is missing or unknown
    """
    config = config or default_config()

    extension = extension_of(path)
    if not extension:
        return config.others_category

    return config.extension_lookup.get(extension, config.others_category)
