"""
Authorization states for YouTube Data API requests.

A client is in exactly one of three states:

NoAuth
    No credential; the client cannot build requests.
ApiKeyAuth
    A simple API key, sent as the ``key`` query parameter. Gives access to
    public data only.
OAuthTokenAuth
    A delegated OAuth 2.0 access token, sent as the ``access_token`` query
    parameter.

The ``YouTube`` client is written so callers never need to construct these
directly.
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field


class NoAuth(BaseModel):
    """State of a client that has not been given a credential."""

    model_config = ConfigDict(frozen=True)


class Authorized(BaseModel):
    """
    Base for states that carry a credential.

    Attributes
    ----------
    param_key : ClassVar[str]
        Query parameter name the credential is sent under.
    token : str
        The credential value. Hidden from ``repr``.
    """

    model_config = ConfigDict(frozen=True)

    param_key: ClassVar[str]

    token: str = Field(min_length=1, repr=False)

    def query_param(self) -> str:
        """Return the ``name=value`` pair attached to every request."""
        return f"{self.param_key}={self.token}"


class ApiKeyAuth(Authorized):
    """API key credential."""

    param_key: ClassVar[str] = "key"


class OAuthTokenAuth(Authorized):
    """OAuth 2.0 access token credential."""

    param_key: ClassVar[str] = "access_token"


AuthState = Union[NoAuth, Authorized]
