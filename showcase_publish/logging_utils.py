"""
Logging helpers for showcase-publish.

Diagnostic logging goes to stderr and stays separate from the colored
instructions printed for the operator, so -v output never interleaves
with text meant to be copied.
"""

from __future__ import annotations

import logging
import sys

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger from the number of -v flags given.

    0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG (every git/gh command).
    """

    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
