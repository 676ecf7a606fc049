# src/__init__.py - v1
"""faviconcache: persistent build cache for favicon and app icon generation."""

from faviconcache.version import __version__

__all__ = ["__version__"]
