"""
ytsync - YouTube playlist synchronizer.

A small client for the YouTube Data API that walks every page of a
playlist and returns its videos as flat, normalized records.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "ytsync"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
