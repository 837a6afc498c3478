"""
Pytest configuration and fixtures for ytsync tests.
"""

from __future__ import annotations

import pytest

from tests.helpers import make_item, make_page
from ytsync.auth.states import ApiKeyAuth, OAuthTokenAuth
from ytsync.client import YouTube


@pytest.fixture
def api_key_client() -> YouTube[ApiKeyAuth]:
    """Client authorized with a test API key."""
    return YouTube().with_api_key("test_api_key")


@pytest.fixture
def oauth_client() -> YouTube[OAuthTokenAuth]:
    """Client authorized with a test OAuth token."""
    return YouTube().with_oauth_token("test_oauth_token")


@pytest.fixture
def three_pages() -> list[str]:
    """Two items + cursor, an empty page + cursor, then a final single item."""
    return [
        make_page(
            [make_item("vid1", title="First"), make_item("vid2", title="Second")],
            next_page_token="c1",
        ),
        make_page([], next_page_token="c2"),
        make_page([make_item("vid3", title="Third", channel_title=None)]),
    ]
