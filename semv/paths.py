"""Path utilities for finding the git repository root and config files."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


GIT_DIRNAME = ".git"
LOCAL_CONFIG_FILENAME = ".semv.yaml"


def find_repo_root(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find the git repository root by walking up the directory tree.

    A ``.git`` entry may be a directory, or a file for worktrees and
    submodules.

    Args:
        start_path: Starting directory (defaults to current working directory)

    Returns:
        Path to the repository root, or None if not inside a repository

    Example:
        >>> # From REPO/src/foo/bar, finds REPO
        >>> root = find_repo_root()
        >>> print(root)
        /path/to/REPO
    """
    if start_path is None:
        start_path = Path.cwd()

    current = Path(start_path).resolve()

    for parent in [current] + list(current.parents):
        if (parent / GIT_DIRNAME).exists():
            return parent

    return None


def get_repo_config_path(start_path: Optional[Path] = None) -> Optional[Path]:
    """Get the local config file path for the current repo.

    Returns:
        Path to <repo>/.semv.yaml (which may not exist yet), or None if not in a repo
    """
    root = find_repo_root(start_path)
    if root:
        return root / LOCAL_CONFIG_FILENAME
    return None
