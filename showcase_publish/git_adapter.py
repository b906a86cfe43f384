"""
Git integration for showcase-publish.

This module wraps the git CLI calls needed to turn a plain folder into
a repository with a single commit on the default branch. Every call
goes through _run_git so failures are logged and raised the same way.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .errors import GitError

LOG = logging.getLogger(__name__)


def _run_git(
    args: list[str],
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command and return the completed process.

    Raises GitError if git cannot be executed or exits non-zero. The
    error message carries git's stderr, which usually explains what the
    operator has to fix (for example a missing user.email).
    """

    cmd = ["git", *args]
    LOG.debug("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:
        raise GitError(f"failed to execute git: {exc}") from exc

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        LOG.debug("git stderr: %s", stderr)
        message = f"git command failed: {' '.join(cmd)}"
        if stderr:
            message = f"{message}: {stderr}"
        raise GitError(message)

    return completed


def is_repository(directory: str = ".") -> bool:
    """
    Return True if directory already holds git repository metadata.
    """

    return (Path(directory) / ".git").exists()


def init_repository(directory: str = ".", branch: str = "main") -> bool:
    """
    Initialize a repository in directory and name its default branch.

    Returns False without running git when the repository already
    exists, True when a new one was created.
    """

    if is_repository(directory):
        LOG.info("Repository already initialized in %s", directory)
        return False

    _run_git(["init"], cwd=directory)
    _run_git(["branch", "-M", branch], cwd=directory)
    return True


def stage_all(directory: str = ".") -> None:
    """
    Stage every file in the working tree.
    """

    _run_git(["add", "."], cwd=directory)


def create_commit(message: str, directory: str = ".") -> None:
    """
    Create a git commit with the given commit message.
    """

    _run_git(["commit", "-m", message], cwd=directory)
