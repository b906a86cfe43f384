"""
High-level orchestration for showcase-publish.

The workflow runs each setup step strictly in order:
  - check that git (required) and the GitHub CLI (optional) exist,
  - initialize the repository and write the ignore file,
  - commit everything,
  - create the GitHub repository automatically or print manual steps,
  - print Netlify instructions and a closing summary.

Fatal steps raise a PublishError subclass and stop the run; the ignore
file and the automatic GitHub step only report their failures.
"""

from __future__ import annotations

import dataclasses
import logging

from rich.prompt import Prompt

from .config import Config
from .console import Reporter
from .errors import GitError, MissingInputError, PrerequisiteError
from .git_adapter import create_commit, init_repository, stage_all
from .github_cli import create_remote_repository
from .ignore_file import IGNORE_FILENAME, write_ignore_file
from .instructions import (
    render_hosting_instructions,
    render_manual_instructions,
    render_summary,
    wait_for_keypress,
)
from .preflight import GIT_DOWNLOAD_URL, GITHUB_CLI_URL, check_git, check_github_cli

LOG = logging.getLogger(__name__)

TITLE = "EA Showcase: GitHub + Netlify setup"


def run_publish(config: Config, reporter: Reporter, usage: str = "") -> None:
    """
    Run the complete setup sequence described by config.

    When config.show_help is set only the header and usage are printed.
    """

    reporter.header(TITLE)

    if config.show_help:
        reporter.plain(usage)
        return

    config = dataclasses.replace(config, username=resolve_username(config, reporter))
    LOG.info("Publishing %s for %s", config.repo_name, config.username)

    gh_available = _check_prerequisites(reporter)

    reporter.section("Initializing git repository")
    if init_repository(config.directory, config.branch):
        reporter.success(f"Initialized repository on branch {config.branch}")
    else:
        reporter.info("Git repository already initialized")

    if write_ignore_file(config.directory):
        reporter.success(f"Wrote {IGNORE_FILENAME}")
    else:
        reporter.error(f"Could not write {IGNORE_FILENAME}; continuing without it")

    _commit_all(config, reporter)

    reporter.section("Creating GitHub repository")
    created = create_remote_repository(
        config.repo_name,
        remote=config.remote,
        directory=config.directory,
        available=gh_available,
    )
    if created:
        reporter.success(f"Created {config.repo_url} and pushed {config.branch}")
    else:
        reporter.warning("Automatic GitHub setup was not possible; follow the manual steps below.")
        render_manual_instructions(reporter, config)
        if config.pause:
            wait_for_keypress(reporter)

    render_hosting_instructions(reporter, config)
    render_summary(reporter, config)


def resolve_username(config: Config, reporter: Reporter) -> str:
    """
    Return the configured GitHub username, prompting when it is missing.
    """

    username = (config.username or "").strip()
    if not username:
        try:
            username = Prompt.ask(
                "Enter your GitHub username",
                console=reporter.console,
                default="",
                show_default=False,
            ).strip()
        except EOFError:
            # stdin closed or redirected from an empty file
            username = ""
    if not username:
        raise MissingInputError("a GitHub username is required")
    return username


def _check_prerequisites(reporter: Reporter) -> bool:
    """
    Verify git is installed and report whether the GitHub CLI is.
    """

    reporter.section("Checking prerequisites")

    git = check_git()
    if not git.available:
        reporter.error("git is not installed or not on PATH.")
        reporter.info(f"Download it from {GIT_DOWNLOAD_URL} and run this tool again.")
        raise PrerequisiteError("git is required")
    reporter.success(f"Found {git.version}")

    gh = check_github_cli()
    if gh.available:
        reporter.success(f"Found GitHub CLI: {gh.version}")
    else:
        reporter.info(
            "GitHub CLI not found; the GitHub repository will have to be created manually.",
            f"Install it from {GITHUB_CLI_URL} to automate this step next time.",
        )
    return gh.available


def _commit_all(config: Config, reporter: Reporter) -> None:
    reporter.section("Committing files")
    try:
        stage_all(config.directory)
        create_commit(config.commit_message, config.directory)
    except GitError:
        reporter.warning(
            "If git reported a missing identity, set it and re-run:",
        )
        reporter.command(
            'git config --global user.name "Your Name"',
            'git config --global user.email "you@example.com"',
        )
        raise
    reporter.success(f'Committed all files: "{config.commit_message}"')
