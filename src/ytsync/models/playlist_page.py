"""
Pydantic models for the ``playlistItems.list`` response.

YouTube splits a page into a deeply nested structure: the page holds items,
each item holds a snippet (the content description), and the snippet holds
the resource id used to build the watch URL. These models exist only to
decode that structure; callers receive ``Video`` records instead.

Wire names are camelCase. A single alias generator translates them, so
``nextPageToken`` decodes into ``next_page_token`` and so on.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ResourceId(BaseModel):
    """Identifier of the video an item points at."""

    model_config = _WIRE_CONFIG

    video_id: str
    kind: str


class ContentDescription(BaseModel):
    """
    The ``snippet`` of a playlist item.

    Holds every part of the video except the watch link itself.
    """

    model_config = _WIRE_CONFIG

    title: str
    description: str
    video_owner_channel_title: Optional[str] = None
    resource_id: ResourceId


class PlaylistItem(BaseModel):
    """A single entry of a playlist page."""

    model_config = _WIRE_CONFIG

    snippet: ContentDescription


class PlaylistPage(BaseModel):
    """
    One page of a ``playlistItems.list`` response.

    Attributes
    ----------
    items : list[PlaylistItem]
        Entries in playlist order.
    next_page_token : Optional[str]
        Cursor of the next page; None on the last page.
    """

    model_config = _WIRE_CONFIG

    items: list[PlaylistItem]
    next_page_token: Optional[str] = None
