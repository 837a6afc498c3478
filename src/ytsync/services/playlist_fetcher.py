"""
Pagination over the ``playlistItems`` endpoint.

Walks a playlist page by page, following ``nextPageToken`` until a page
arrives without one, and returns every video in playlist order. Pages are
fetched strictly one after another because each request needs the cursor
from the previous response.

The traversal is all-or-nothing: any transport or decode error aborts it
and the videos gathered so far are discarded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from ytsync.models.video import Video
from ytsync.services.decoder import decode_page, to_video
from ytsync.services.transport import HttpxTransport, Transport

if TYPE_CHECKING:
    from ytsync.auth.states import Authorized
    from ytsync.client import YouTube

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


class PlaylistFetcher:
    """
    Fetches complete playlists through an authorized client.

    Parameters
    ----------
    client : YouTube[Authorized]
        An authorized client; it provides the request builders.
    transport : Transport | None, optional
        Transport used for every page (default: a new ``HttpxTransport``).

    Examples
    --------
    >>> youtube = YouTube().with_api_key(api_key)
    >>> async with HttpxTransport() as transport:
    ...     videos = await PlaylistFetcher(youtube, transport).fetch_all(playlist_id)
    """

    def __init__(
        self,
        client: YouTube[Authorized],
        transport: Optional[Transport] = None,
    ) -> None:
        self.client = client
        self.transport: Transport = transport if transport is not None else HttpxTransport()

    async def fetch_all(
        self, playlist_id: str, page_size: int = DEFAULT_PAGE_SIZE
    ) -> list[Video]:
        """
        Fetch every video of a playlist.

        The first page is always requested, even for an empty playlist.
        A page without items but with a cursor does not end the traversal;
        only a missing cursor does. Repeated cursors are not detected.

        Parameters
        ----------
        playlist_id : str
            The playlist to walk.
        page_size : int, optional
            ``maxResults`` sent with every request (default: 50).

        Returns
        -------
        list[Video]
            All videos, in playlist order.

        Raises
        ------
        TransportError
            If a request fails.
        DecodeError
            If a response does not match the page schema.
        MissingCollectionIdError
            If ``playlist_id`` is empty.
        """
        videos: list[Video] = []
        page_token: Optional[str] = None
        pages = 0

        while True:
            request = self.client.playlist_items().playlist_id(playlist_id).max_results(
                page_size
            )
            if page_token is None:
                logger.info("Requesting the first page of playlist %s", playlist_id)
            else:
                logger.info(
                    "Requesting playlist %s, page token %s", playlist_id, page_token
                )
                request = request.page_token(page_token)

            body = await self.transport.get(request.build())
            page = decode_page(body)
            pages += 1

            videos.extend(to_video(item) for item in page.items)
            logger.debug(
                "Page %d of playlist %s returned %d item(s)",
                pages,
                playlist_id,
                len(page.items),
            )

            page_token = page.next_page_token
            if page_token is None:
                break

        logger.info(
            "Fetched %d video(s) from playlist %s in %d page(s)",
            len(videos),
            playlist_id,
            pages,
        )
        return videos

    async def fetch_many(
        self, playlist_ids: Iterable[str], page_size: int = DEFAULT_PAGE_SIZE
    ) -> dict[str, list[Video]]:
        """
        Fetch several playlists one after another.

        Returns
        -------
        dict[str, list[Video]]
            Videos per playlist id, in the order the ids were given.
            Duplicate ids are fetched once.
        """
        results: dict[str, list[Video]] = {}
        for playlist_id in playlist_ids:
            if playlist_id in results:
                continue
            results[playlist_id] = await self.fetch_all(playlist_id, page_size)
        return results


async def fetch_all(
    client: YouTube[Authorized],
    playlist_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    transport: Optional[Transport] = None,
) -> list[Video]:
    """
    Fetch every video of a playlist with a one-off ``PlaylistFetcher``.

    When no transport is given a pooled ``HttpxTransport`` is opened for the
    duration of the traversal.
    """
    if transport is not None:
        return await PlaylistFetcher(client, transport).fetch_all(playlist_id, page_size)
    async with HttpxTransport() as http_transport:
        return await PlaylistFetcher(client, http_transport).fetch_all(
            playlist_id, page_size
        )
