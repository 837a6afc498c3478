"""
Decoding of ``playlistItems.list`` responses into ``Video`` records.
"""

from __future__ import annotations

import logging
from typing import Union

from pydantic import ValidationError

from ytsync.exceptions import DecodeError
from ytsync.models.playlist_page import PlaylistItem, PlaylistPage
from ytsync.models.video import Video

logger = logging.getLogger(__name__)

_EXCERPT_LENGTH = 200


def decode_page(body: Union[str, bytes]) -> PlaylistPage:
    """
    Decode a raw response body into a ``PlaylistPage``.

    Parameters
    ----------
    body : str | bytes
        The JSON response body.

    Returns
    -------
    PlaylistPage
        The decoded page.

    Raises
    ------
    DecodeError
        If the body is not valid JSON or does not match the page schema.
        No partial page is returned.
    """
    try:
        return PlaylistPage.model_validate_json(body)
    except ValidationError as e:
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        logger.error("Failed to decode playlist page: %d error(s)", e.error_count())
        raise DecodeError(
            message=f"Playlist page could not be decoded: {e}",
            body_excerpt=text[:_EXCERPT_LENGTH],
        ) from e


def to_video(item: PlaylistItem) -> Video:
    """
    Flatten a playlist item into a ``Video``.

    The watch URL is the fixed YouTube prefix followed by the video id,
    without escaping. The author is only set when the item carries a
    channel title.
    """
    snippet = item.snippet
    return Video.from_video_id(
        snippet.resource_id.video_id,
        title=snippet.title,
        description=snippet.description,
        author=snippet.video_owner_channel_title,
    )

