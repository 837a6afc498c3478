"""
CLI interface module for ytsync.

Provides the Typer-based command-line interface for fetching playlists.
"""

from __future__ import annotations

__all__: list[str] = []
