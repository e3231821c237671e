from __future__ import annotations

import getpass
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from ..errors import MetadataError, TagSourceError


logger = logging.getLogger(__name__)


def _git(args: List[str], cwd: Optional[Union[str, Path]] = None) -> str:
    cmd = ["git"] + args
    logger.debug(f"Running {' '.join(cmd)}")
    return subprocess.check_output(cmd, cwd=cwd, text=True, stderr=subprocess.PIPE).strip()


def list_local_tags(cwd: Optional[Union[str, Path]] = None) -> List[str]:
    """Return all tags of the git repository at ``cwd``."""
    try:
        out = _git(["tag", "--list"], cwd=cwd)
    except FileNotFoundError as e:
        raise TagSourceError("git executable not found") from e
    except subprocess.CalledProcessError as e:
        raise TagSourceError(f"git tag failed: {(e.stderr or '').strip() or e}") from e
    return [line.strip() for line in out.splitlines() if line.strip()]


class GitMetadata:
    """Build metadata read from the local git checkout.

    - latest_commit: short hash of HEAD (`git rev-parse --short HEAD`).
    - current_user: `git config user.name`, falling back to the OS login name.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None) -> None:
        self.cwd = cwd

    def latest_commit(self) -> str:
        try:
            out = _git(["rev-parse", "--short", "HEAD"], cwd=self.cwd)
        except FileNotFoundError as e:
            raise MetadataError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise MetadataError(
                f"Cannot read latest commit (not a git repository, or no commits yet): "
                f"{(e.stderr or '').strip() or e}"
            ) from e
        if not out:
            raise MetadataError("Cannot read latest commit: empty output from git")
        return out

    def current_user(self) -> str:
        try:
            out = _git(["config", "user.name"], cwd=self.cwd)
            if out:
                return out
        except (FileNotFoundError, subprocess.CalledProcessError) as e:
            logger.info(f"git user.name not available, using login name: {e}")
        try:
            return getpass.getuser()
        except Exception as e:
            raise MetadataError(f"Cannot determine current user: {e}") from e
