"""
Data models for ytsync.

Wire models mirror the YouTube Data API response shape; ``Video`` is the
flat record handed back to callers.
"""

from __future__ import annotations

from ytsync.models.playlist_page import (
    ContentDescription,
    PlaylistItem,
    PlaylistPage,
    ResourceId,
)
from ytsync.models.video import YOUTUBE_VIDEO_URL, Video

__all__ = [
    "ContentDescription",
    "PlaylistItem",
    "PlaylistPage",
    "ResourceId",
    "Video",
    "YOUTUBE_VIDEO_URL",
]
