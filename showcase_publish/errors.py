"""
Custom exception types used across showcase-publish.

Fatal steps raise one of these so the CLI can report a clean message
and exit with status 1, while unexpected bugs still surface with a
traceback.
"""

from __future__ import annotations


class PublishError(Exception):
    """Base class for all showcase-publish specific errors."""


class PrerequisiteError(PublishError):
    """Raised when a required external tool is not installed."""


class GitError(PublishError):
    """Raised when git operations fail."""


class MissingInputError(PublishError):
    """Raised when a required value was not supplied by the operator."""
