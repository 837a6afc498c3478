"""
Configuration management module for ytsync.

Handles application settings, the TOML configuration file, environment
variables and the playlist file.
"""

from __future__ import annotations

__all__: list[str] = []
