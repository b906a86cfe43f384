"""
Prerequisite checks for showcase-publish.

git is required for every run. The GitHub CLI is optional and only
decides whether the remote repository is created automatically or the
operator gets manual instructions.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

LOG = logging.getLogger(__name__)

GIT_DOWNLOAD_URL = "https://git-scm.com/downloads"
GITHUB_CLI_URL = "https://cli.github.com/"


@dataclass
class ToolStatus:
    """
    Outcome of probing an external command-line tool.

    version holds the first line the tool printed for --version, or
    None when the tool could not be run.
    """

    name: str
    available: bool
    version: Optional[str] = None


def probe_tool(executable: str) -> ToolStatus:
    """
    Run `<executable> --version` and report whether it succeeded.
    """

    cmd = [executable, "--version"]
    LOG.debug("Probing tool: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:
        LOG.debug("%s could not be executed: %s", executable, exc)
        return ToolStatus(name=executable, available=False)

    if completed.returncode != 0:
        LOG.debug("%s --version exited with %d: %s", executable, completed.returncode, completed.stderr)
        return ToolStatus(name=executable, available=False)

    lines = completed.stdout.strip().splitlines()
    version = lines[0] if lines else ""
    return ToolStatus(name=executable, available=True, version=version)


def check_git() -> ToolStatus:
    return probe_tool("git")


def check_github_cli() -> ToolStatus:
    return probe_tool("gh")
