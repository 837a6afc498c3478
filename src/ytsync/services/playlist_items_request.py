"""
Request builder for the YouTube Data API ``playlistItems`` endpoint.

Builds the request URL handed to the transport. Setters return a new
request so earlier values stay usable; ``build()`` consumes the request it
is called on.

Parameters are emitted in a fixed order (``part``, ``playlistId``,
``maxResults``, ``pageToken``, credential) and values are not
percent-encoded; playlist ids, page tokens and credentials issued by
YouTube are already URL-safe.
"""

from __future__ import annotations

from typing import Optional

from ytsync.auth.states import Authorized
from ytsync.exceptions import MissingCollectionIdError, RequestAlreadyBuiltError

YT_API_URL = "https://youtube.googleapis.com/youtube/v3"
PLAYLIST_ITEMS_PART = "snippet"


class PlaylistItemsRequest:
    """
    A single-use ``playlistItems.list`` request.

    Parameters
    ----------
    auth : Authorized
        The credential of the client that created the request. The request
        keeps a reference to it and never copies the token elsewhere.

    Examples
    --------
    >>> url = (
    ...     youtube.playlist_items()
    ...     .playlist_id("PLbALbm1g5VzAqShkgKwo0NIVkwV9bZE8t")
    ...     .max_results(50)
    ...     .build()
    ... )
    """

    __slots__ = ("_auth", "_playlist_id", "_max_results", "_page_token", "_built")

    def __init__(
        self,
        auth: Authorized,
        playlist_id: Optional[str] = None,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> None:
        self._auth = auth
        self._playlist_id = playlist_id
        self._max_results = max_results
        self._page_token = page_token
        self._built = False

    def _replace(self, **changes: object) -> PlaylistItemsRequest:
        values: dict[str, object] = {
            "playlist_id": self._playlist_id,
            "max_results": self._max_results,
            "page_token": self._page_token,
        }
        values.update(changes)
        return PlaylistItemsRequest(self._auth, **values)  # type: ignore[arg-type]

    def playlist_id(self, playlist_id: str) -> PlaylistItemsRequest:
        """Return a copy of this request targeting ``playlist_id``."""
        return self._replace(playlist_id=playlist_id)

    def max_results(self, max_results: int) -> PlaylistItemsRequest:
        """
        Return a copy of this request asking for ``max_results`` items per page.

        Raises
        ------
        ValueError
            If ``max_results`` is lower than 1.
        """
        if max_results < 1:
            raise ValueError(f"max_results must be positive, got {max_results}")
        return self._replace(max_results=max_results)

    def page_token(self, page_token: str) -> PlaylistItemsRequest:
        """Return a copy of this request continuing from ``page_token``."""
        return self._replace(page_token=page_token)

    @property
    def is_built(self) -> bool:
        """Whether ``build()`` has already been called on this request."""
        return self._built

    def build(self) -> str:
        """
        Build the request URL and consume this request.

        Returns
        -------
        str
            The fully-qualified request URL. The credential parameter is
            always present and always last.

        Raises
        ------
        MissingCollectionIdError
            If no non-empty playlist id was set.
        RequestAlreadyBuiltError
            If this request was already built.
        """
        if self._built:
            raise RequestAlreadyBuiltError()
        if not self._playlist_id:
            raise MissingCollectionIdError()
        self._built = True

        url = f"{YT_API_URL}/playlistItems?part={PLAYLIST_ITEMS_PART}"
        url += f"&playlistId={self._playlist_id}"
        if self._max_results is not None:
            url += f"&maxResults={self._max_results}"
        if self._page_token is not None:
            url += f"&pageToken={self._page_token}"
        url += f"&{self._auth.query_param()}"
        return url

    def __repr__(self) -> str:
        return (
            f"PlaylistItemsRequest(auth={type(self._auth).__name__}, "
            f"playlist_id={self._playlist_id!r}, "
            f"max_results={self._max_results!r}, "
            f"page_token={self._page_token!r})"
        )
