"""
Pytest configuration and fixtures for folder_organizer tests.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

import pytest

from folder_organizer.core.config import CategoryConfig


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """
    Build a directory tree from relative file paths.

    Each file gets its own relative path as content, so moved files can be
    traced back to where they came from. Paths ending in "/" create empty
    directories.
    """

    def _make(paths: Iterable[str], root: Optional[Path] = None) -> Path:
        base = root if root is not None else tmp_path / "root"
        base.mkdir(parents=True, exist_ok=True)

        for rel in paths:
            target = base / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"content of {rel}")

        return base

    return _make


@pytest.fixture
def snapshot() -> Callable[[Path], Dict[str, Optional[str]]]:
    """
    Capture a tree as {relative posix path: file content or None for dirs}.
    """

    def _snapshot(root: Path) -> Dict[str, Optional[str]]:
        state: Dict[str, Optional[str]] = {}
        for path in sorted(root.rglob("*")):
            rel = path.relative_to(root).as_posix()
            if path.is_symlink():
                state[rel] = f"-> {path.readlink()}"
            elif path.is_dir():
                state[rel] = None
            else:
                state[rel] = path.read_text()
        return state

    return _snapshot


@pytest.fixture
def small_config() -> CategoryConfig:
    """Minimal category tables for tests that substitute the built-in ones."""
    return CategoryConfig(
        category_extensions={
            "Image Files": {"jpg", "png"},
            "Text Files": {"txt", "md"},
        },
        category_aliases={
            "Image Files": {"pics", "photos"},
            "Text Files": {"notes"},
        },
    )
