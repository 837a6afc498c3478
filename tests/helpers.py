"""
Builders for YouTube API payloads and a canned-response transport.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from ytsync.exceptions import TransportError


def make_item(
    video_id: str = "abc123",
    title: str = "Test Video",
    description: str = "A test video",
    channel_title: Optional[str] = "Test Channel",
) -> dict[str, Any]:
    """Build a ``playlistItems`` item as the API returns it."""
    snippet: dict[str, Any] = {
        "publishedAt": "2023-01-01T00:00:00Z",
        "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
        "title": title,
        "description": description,
        "playlistId": "PLbALbm1g5VzAqShkgKwo0NIVkwV9bZE8t",
        "position": 0,
        "resourceId": {"kind": "youtube#video", "videoId": video_id},
    }
    if channel_title is not None:
        snippet["videoOwnerChannelTitle"] = channel_title
        snippet["videoOwnerChannelId"] = "UCuAXFkgsw1L7xaCfnd5JJOw"
    return {
        "kind": "youtube#playlistItem",
        "etag": "etag",
        "id": f"item-{video_id}",
        "snippet": snippet,
    }


def make_page(
    items: list[dict[str, Any]], next_page_token: Optional[str] = None
) -> str:
    """Build a ``playlistItems`` response body."""
    page: dict[str, Any] = {
        "kind": "youtube#playlistItemListResponse",
        "etag": "etag",
        "items": items,
        "pageInfo": {"totalResults": len(items), "resultsPerPage": 50},
    }
    if next_page_token is not None:
        page["nextPageToken"] = next_page_token
    return json.dumps(page)


class FakeTransport:
    """Transport that replays canned bodies and records requested URLs."""

    def __init__(self, bodies: list[str | Exception]) -> None:
        self.bodies = list(bodies)
        self.urls: list[str] = []

    async def get(self, url: str) -> str:
        self.urls.append(url)
        if not self.bodies:
            raise TransportError("No more canned responses", url=url)
        body = self.bodies.pop(0)
        if isinstance(body, Exception):
            raise body
        return body
