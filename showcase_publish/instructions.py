"""
Instructional text printed to the operator.

These renderers only print; they never run commands or touch the
filesystem. The operator's GitHub handle and repository name are
interpolated into URLs and commands so they can be copied as-is.
"""

from __future__ import annotations

import sys

import readchar

from .config import Config
from .console import Reporter

NETLIFY_URL = "https://app.netlify.com/"


def render_manual_instructions(reporter: Reporter, config: Config) -> None:
    reporter.header("Manual GitHub setup")

    reporter.section("Step 1: Create the repository on GitHub")
    reporter.plain(
        "  1. Open https://github.com/new",
        f"  2. Sign in as {config.username}",
        f"  3. Repository name: {config.repo_name}",
        "  4. Visibility: Public",
        "  5. Do NOT add a README, .gitignore or license (they already exist locally)",
        "  6. Click 'Create repository'",
    )

    reporter.section("Step 2: Link and push the local repository")
    reporter.plain("  Run these commands in this folder:")
    reporter.command(
        f"git remote add {config.remote} {config.repo_url}.git",
        f"git branch -M {config.branch}",
        f"git push -u {config.remote} {config.branch}",
    )

    reporter.section("Step 3: Authenticate")
    reporter.plain(
        f"  Username: {config.username}",
        "  Password: a personal access token, not your GitHub password",
        "  Create one at https://github.com/settings/tokens with the 'repo' scope.",
    )

    reporter.blank()
    reporter.info(f"Your repository will be available at {config.repo_url}")


def wait_for_keypress(reporter: Reporter) -> None:
    """
    Block until the operator presses any key.

    readchar needs a terminal; when stdin is a pipe or a file a single
    character is read instead, and end of input also resumes.
    """

    reporter.blank()
    reporter.warning("Press any key once the code has been pushed to GitHub...")
    if sys.stdin is None or not sys.stdin.isatty():
        if sys.stdin is not None:
            sys.stdin.read(1)
        return
    readchar.readkey()


def render_hosting_instructions(reporter: Reporter, config: Config) -> None:
    reporter.header("Netlify setup")

    reporter.section("Step 1: Sign in")
    reporter.plain(
        f"  1. Open {NETLIFY_URL}",
        "  2. Sign up or log in with your GitHub account",
    )

    reporter.section("Step 2: Import the repository")
    reporter.plain(
        "  1. Click 'Add new site' > 'Import an existing project'",
        "  2. Choose 'Deploy with GitHub' and authorize Netlify",
        f"  3. Select the repository {config.repo_slug}",
    )

    reporter.section("Step 3: Build settings")
    reporter.plain(
        f"  Branch to deploy:   {config.branch}",
        "  Base directory:     (leave empty)",
        "  Build command:      (leave empty)",
        "  Publish directory:  .",
        "  The site is static, so no build step is needed.",
    )

    reporter.section("Step 4: Deploy")
    reporter.plain(
        "  1. Click 'Deploy site' and wait for the first deploy to finish",
        "  2. Optional: 'Site configuration' > 'Change site name' to pick a nicer URL",
    )
    reporter.blank()
    reporter.info(
        f"Your site will be live at https://{config.repo_name}.netlify.app (or the name Netlify assigns)",
        f"Every push to {config.branch} redeploys the site automatically.",
    )


def render_summary(reporter: Reporter, config: Config) -> None:
    reporter.header("Setup complete")
    reporter.success(
        "Local repository initialized and committed.",
        f"GitHub repository: {config.repo_url}",
    )
    reporter.blank()
    reporter.plain("Presentation access code:")
    reporter.command(config.access_code)
    reporter.blank()
    reporter.info(
        "Run `showcase-publish --help` for all options; "
        "the showcase-publish README covers troubleshooting."
    )
