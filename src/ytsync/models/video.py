"""
The normalized video record returned to callers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

YOUTUBE_VIDEO_URL = "https://youtube.com/watch?v="


class Video(BaseModel):
    """
    A playlist entry flattened into the fields callers care about.

    Attributes
    ----------
    url : str
        Watch URL of the video. Always present and non-empty.
    title : Optional[str]
        Video title.
    description : Optional[str]
        Video description.
    author : Optional[str]
        Title of the channel that owns the video, when YouTube reports one.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_video_id(cls, video_id: str, **fields: Optional[str]) -> Video:
        """Create a record whose URL points at ``video_id``."""
        return cls(url=f"{YOUTUBE_VIDEO_URL}{video_id}", **fields)
