"""
GitHub CLI integration for showcase-publish.

Creating the remote repository and pushing to it happen in a single
`gh repo create --push` call. Only the exit status is inspected: a
repository that was created but not pushed is indistinguishable from a
plain failure.
"""

from __future__ import annotations

import logging
import subprocess

LOG = logging.getLogger(__name__)


def create_remote_repository(
    repo_name: str,
    remote: str = "origin",
    directory: str = ".",
    available: bool = True,
) -> bool:
    """
    Create a public GitHub repository from directory and push to it.

    Returns True when gh exited successfully. Returns False without
    running anything when the GitHub CLI is not available.
    """

    if not available:
        LOG.info("GitHub CLI unavailable; skipping automatic repository creation")
        return False

    cmd = [
        "gh",
        "repo",
        "create",
        repo_name,
        "--public",
        "--source=.",
        f"--remote={remote}",
        "--push",
    ]
    LOG.debug("Running gh command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=directory,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:
        LOG.warning("failed to execute gh: %s", exc)
        return False

    if completed.returncode != 0:
        LOG.warning("gh repo create failed: %s", (completed.stderr or "").strip())
        return False

    return True
