"""
Service layer for ytsync.

Request construction, response decoding, HTTP transport and the
pagination loop over the playlistItems endpoint.
"""

from __future__ import annotations

from ytsync.services.decoder import decode_page, to_video
from ytsync.services.playlist_fetcher import PlaylistFetcher, fetch_all
from ytsync.services.playlist_items_request import PlaylistItemsRequest
from ytsync.services.transport import HttpxTransport, Transport

__all__ = [
    "HttpxTransport",
    "PlaylistFetcher",
    "PlaylistItemsRequest",
    "Transport",
    "decode_page",
    "fetch_all",
    "to_video",
]
