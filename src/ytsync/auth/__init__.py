"""
Authentication module for ytsync.

Holds the authorization states a YouTube client can be in and the query
parameter each authorized state attaches to outgoing requests.
"""

from __future__ import annotations

from ytsync.auth.states import ApiKeyAuth, AuthState, Authorized, NoAuth, OAuthTokenAuth

__all__: list[str] = ["ApiKeyAuth", "AuthState", "Authorized", "NoAuth", "OAuthTokenAuth"]
