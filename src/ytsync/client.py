"""
The YouTube Data API client.

``YouTube`` is generic over its authorization state. A fresh client is
``YouTube[NoAuth]`` and can only be promoted; promotion returns a new
``YouTube[ApiKeyAuth]`` or ``YouTube[OAuthTokenAuth]`` and leaves the
original untouched. Request builders are only offered on authorized
clients: type checkers reject ``playlist_items()`` on ``YouTube[NoAuth]``
and the call raises ``NotAuthenticatedError`` at runtime.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar, overload

from ytsync.auth.states import ApiKeyAuth, AuthState, Authorized, NoAuth, OAuthTokenAuth
from ytsync.exceptions import (
    AlreadyAuthenticatedError,
    InvalidCredentialError,
    NotAuthenticatedError,
)
from ytsync.services.playlist_items_request import PlaylistItemsRequest

logger = logging.getLogger(__name__)

AuthT = TypeVar("AuthT", bound=AuthState, covariant=True)
AuthorizedT = TypeVar("AuthorizedT", bound=Authorized)


class YouTube(Generic[AuthT]):
    """
    Client used to build requests against the YouTube Data API.

    Parameters
    ----------
    auth : AuthState, optional
        Initial authorization state (default: ``NoAuth()``).

    Examples
    --------
    >>> youtube = YouTube().with_api_key("AIza...")
    >>> url = youtube.playlist_items().playlist_id("PL...").build()
    """

    @overload
    def __init__(self: YouTube[NoAuth]) -> None: ...

    @overload
    def __init__(self, auth: AuthT) -> None: ...

    def __init__(self, auth: Optional[AuthState] = None) -> None:
        self._auth: AuthState = auth if auth is not None else NoAuth()

    @property
    def auth(self) -> AuthState:
        """The authorization state this client holds."""
        return self._auth

    @property
    def is_authenticated(self) -> bool:
        """Whether this client carries a credential."""
        return isinstance(self._auth, Authorized)

    def _ensure_unauthenticated(self) -> None:
        if not isinstance(self._auth, NoAuth):
            raise AlreadyAuthenticatedError()

    def with_api_key(self: YouTube[NoAuth], key: str) -> YouTube[ApiKeyAuth]:
        """
        Promote this client to API key authorization.

        Only public data is reachable with an API key; anything that needs
        user data requires an OAuth token.

        Parameters
        ----------
        key : str
            The YouTube Data API key.

        Returns
        -------
        YouTube[ApiKeyAuth]
            A new client; this one stays unauthenticated.

        Raises
        ------
        InvalidCredentialError
            If ``key`` is empty.
        AlreadyAuthenticatedError
            If this client already holds a credential.
        """
        self._ensure_unauthenticated()
        if not key:
            raise InvalidCredentialError(
                "YouTube API key must not be empty", credential_type="api_key"
            )
        logger.debug("Authorizing YouTube client with an API key")
        return YouTube(ApiKeyAuth(token=key))

    def with_oauth_token(self: YouTube[NoAuth], token: str) -> YouTube[OAuthTokenAuth]:
        """
        Promote this client to OAuth access token authorization.

        Parameters
        ----------
        token : str
            An OAuth 2.0 access token obtained elsewhere.

        Returns
        -------
        YouTube[OAuthTokenAuth]
            A new client; this one stays unauthenticated.

        Raises
        ------
        InvalidCredentialError
            If ``token`` is empty.
        AlreadyAuthenticatedError
            If this client already holds a credential.
        """
        self._ensure_unauthenticated()
        if not token:
            raise InvalidCredentialError(
                "OAuth access token must not be empty", credential_type="oauth_token"
            )
        logger.debug("Authorizing YouTube client with an OAuth access token")
        return YouTube(OAuthTokenAuth(token=token))

    def playlist_items(self: YouTube[AuthorizedT]) -> PlaylistItemsRequest:
        """
        Start a new ``playlistItems`` request bound to this client's credential.

        Raises
        ------
        NotAuthenticatedError
            If the client holds no credential.
        """
        auth = self._auth
        if not isinstance(auth, Authorized):
            raise NotAuthenticatedError()
        return PlaylistItemsRequest(auth)

    def __repr__(self) -> str:
        return f"YouTube[{type(self._auth).__name__}]"
