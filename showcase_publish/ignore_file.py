"""
Standard .gitignore for a static site folder.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG = logging.getLogger(__name__)

IGNORE_FILENAME = ".gitignore"

IGNORE_FILE_CONTENT = """\
# OS files
.DS_Store
.DS_Store?
._*
.Spotlight-V100
.Trashes
ehthumbs.db
Thumbs.db
desktop.ini

# Editor files
.vscode/
.idea/
*.swp
*.swo
*.sublime-project
*.sublime-workspace

# Logs
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Temporary files
*.tmp
*.temp
tmp/
temp/

# Environment files
.env
.env.local
.env.*.local

# Build output
dist/
build/
out/

# Dependencies
node_modules/
bower_components/

# Backups
*.bak
*.backup
*~
"""


def write_ignore_file(directory: str = ".") -> bool:
    """
    Write the standard ignore file into directory, replacing any existing one.

    Returns False when the file could not be written; callers treat that
    as a non-fatal problem.
    """

    path = Path(directory) / IGNORE_FILENAME
    try:
        # newline="\n" keeps the bytes identical on every platform.
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(IGNORE_FILE_CONTENT)
    except OSError as exc:
        LOG.warning("could not write %s: %s", path, exc)
        return False

    LOG.debug("Wrote %s", path)
    return True
