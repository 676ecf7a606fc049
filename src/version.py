# src/version.py - v1
"""Tool version. Stored in every cache record; a bump invalidates all records."""

__version__ = "0.1.0"
