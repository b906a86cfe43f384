"""Prepare a static site folder for publishing on GitHub and Netlify."""

__version__ = "0.1.0"
