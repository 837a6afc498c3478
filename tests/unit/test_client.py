"""
Tests for the YouTube client and its authorization transitions.
"""

from __future__ import annotations

import pytest

from ytsync.auth.states import ApiKeyAuth, NoAuth, OAuthTokenAuth
from ytsync.client import YouTube
from ytsync.exceptions import (
    AlreadyAuthenticatedError,
    InvalidCredentialError,
    NotAuthenticatedError,
)
from ytsync.services.playlist_items_request import PlaylistItemsRequest


class TestUnauthenticatedClient:
    """Tests for a fresh client."""

    def test_starts_unauthenticated(self) -> None:
        """A new client holds no credential."""
        youtube = YouTube()
        assert isinstance(youtube.auth, NoAuth)
        assert youtube.is_authenticated is False

    def test_playlist_items_requires_credential(self) -> None:
        """Building a request without a credential fails at call time."""
        with pytest.raises(NotAuthenticatedError):
            YouTube().playlist_items()  # type: ignore[misc]

    def test_repr(self) -> None:
        """repr names the state."""
        assert repr(YouTube()) == "YouTube[NoAuth]"


class TestPromotion:
    """Tests for with_api_key / with_oauth_token."""

    def test_with_api_key(self) -> None:
        """with_api_key returns a client holding an API key."""
        youtube = YouTube().with_api_key("key123")
        assert isinstance(youtube.auth, ApiKeyAuth)
        assert youtube.auth.token == "key123"
        assert youtube.is_authenticated is True

    def test_with_oauth_token(self) -> None:
        """with_oauth_token returns a client holding an OAuth token."""
        youtube = YouTube().with_oauth_token("tok123")
        assert isinstance(youtube.auth, OAuthTokenAuth)
        assert youtube.auth.token == "tok123"

    def test_promotion_returns_new_client(self) -> None:
        """The unauthenticated client is left untouched."""
        original = YouTube()
        promoted = original.with_api_key("key123")
        assert promoted is not original
        assert isinstance(original.auth, NoAuth)

    @pytest.mark.parametrize("method", ["with_api_key", "with_oauth_token"])
    def test_empty_credential_rejected(self, method: str) -> None:
        """Empty credentials raise InvalidCredentialError."""
        with pytest.raises(InvalidCredentialError):
            getattr(YouTube(), method)("")

    def test_invalid_credential_type_recorded(self) -> None:
        """The error records which credential was rejected."""
        with pytest.raises(InvalidCredentialError) as exc_info:
            YouTube().with_oauth_token("")
        assert exc_info.value.credential_type == "oauth_token"

    @pytest.mark.parametrize("method", ["with_api_key", "with_oauth_token"])
    def test_cannot_promote_twice(self, method: str) -> None:
        """An authorized client cannot be promoted again."""
        youtube = YouTube().with_api_key("key123")
        with pytest.raises(AlreadyAuthenticatedError):
            getattr(youtube, method)("other")


class TestPlaylistItems:
    """Tests for request builders created by authorized clients."""

    def test_api_key_client_builds_requests(self, api_key_client: YouTube[ApiKeyAuth]) -> None:
        """Authorized clients hand out fresh request builders."""
        first = api_key_client.playlist_items()
        second = api_key_client.playlist_items()
        assert isinstance(first, PlaylistItemsRequest)
        assert first is not second

    def test_oauth_client_builds_requests(
        self, oauth_client: YouTube[OAuthTokenAuth]
    ) -> None:
        """The builder is bound to the client's credential."""
        url = oauth_client.playlist_items().playlist_id("X").build()
        assert url.endswith("&access_token=test_oauth_token")
