"""
Configuration model for showcase-publish.

The CLI constructs a Config instance and passes it down into the
workflow so every step reads its parameters from one place instead of
relying on global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_REPO_NAME = "ea-showcase"
DEFAULT_BRANCH = "main"
DEFAULT_REMOTE = "origin"
COMMIT_MESSAGE = "Initial commit: EA showcase presentation"
ACCESS_CODE = "EA-Showcase-2024"


@dataclass
class Config:
    """
    Top-level configuration for a showcase-publish run.

    username is the GitHub handle used to build URLs and commands in the
    printed instructions; when empty the operator is prompted for it.
    """

    username: Optional[str] = None
    repo_name: str = DEFAULT_REPO_NAME
    show_help: bool = False
    directory: str = "."
    pause: bool = True
    verbosity: int = 0
    branch: str = DEFAULT_BRANCH
    remote: str = DEFAULT_REMOTE
    commit_message: str = COMMIT_MESSAGE
    access_code: str = ACCESS_CODE

    @property
    def repo_slug(self) -> str:
        return f"{self.username}/{self.repo_name}"

    @property
    def repo_url(self) -> str:
        return f"https://github.com/{self.repo_slug}"
