"""
Custom exceptions for the ytsync application.

This module defines domain-specific exceptions for error handling
throughout the application, including authorization, request building,
transport and decoding failures.

Every error aborts a playlist traversal as a whole; none of them is
recoverable per page.
"""

from __future__ import annotations


class YtsyncError(Exception):
    """Base exception for all ytsync errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize YtsyncError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class InvalidCredentialError(YtsyncError):
    """
    Exception raised when an empty credential is supplied to a client.

    Attributes
    ----------
    message : str
        Human-readable error message.
    credential_type : str
        Which credential was rejected ("api_key" or "oauth_token").
    """

    def __init__(
        self,
        message: str = "Credential must not be empty",
        credential_type: str = "api_key",
    ) -> None:
        """
        Initialize InvalidCredentialError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Credential must not be empty").
        credential_type : str, optional
            Which credential was rejected (default: "api_key").
        """
        self.credential_type = credential_type
        super().__init__(message)


class NotAuthenticatedError(YtsyncError):
    """Exception raised when a request is built on a client without a credential."""

    def __init__(
        self,
        message: str = (
            "Client is not authenticated; call with_api_key() or "
            "with_oauth_token() first"
        ),
    ) -> None:
        super().__init__(message)


class AlreadyAuthenticatedError(YtsyncError):
    """Exception raised when an authorized client is promoted a second time."""

    def __init__(self, message: str = "Client is already authenticated") -> None:
        super().__init__(message)


class MissingCollectionIdError(YtsyncError):
    """Exception raised when a request is built without a playlist id."""

    def __init__(
        self, message: str = "A playlist id is required to build the request"
    ) -> None:
        super().__init__(message)


class RequestAlreadyBuiltError(YtsyncError):
    """Exception raised when ``build()`` is called twice on the same request."""

    def __init__(self, message: str = "Request has already been built") -> None:
        super().__init__(message)


class TransportError(YtsyncError):
    """
    Exception raised for network and HTTP failures.

    Wraps connection errors, timeouts and non-success HTTP responses
    reported by the transport. The traversal does not retry these.

    Attributes
    ----------
    message : str
        Human-readable error message.
    status_code : int | None
        HTTP status code, or None when no response was received.
    url : str | None
        The requested URL with the credential redacted.
    original_error : Exception | None
        The exception that caused this error, if any.

    Examples
    --------
    >>> try:
    ...     body = await transport.get(url)
    ... except TransportError as e:
    ...     print(f"Request failed ({e.status_code}): {e.message}")
    """

    def __init__(
        self,
        message: str = "Transport error occurred",
        status_code: int | None = None,
        url: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize TransportError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Transport error occurred").
        status_code : int | None, optional
            HTTP status code (default: None).
        url : str | None, optional
            The redacted request URL (default: None).
        original_error : Exception | None, optional
            The underlying exception (default: None).
        """
        self.status_code: int | None = status_code
        self.url: str | None = url
        self.original_error: Exception | None = original_error
        super().__init__(message)


class QuotaExceededError(TransportError):
    """
    Exception raised when the YouTube API reports an exhausted quota.

    Raised for HTTP 403 responses whose error reason is ``quotaExceeded``
    or ``dailyLimitExceeded``.

    Attributes
    ----------
    error_reason : str
        The error reason reported by the API.
    """

    def __init__(
        self,
        message: str = "YouTube API quota exceeded",
        status_code: int | None = 403,
        url: str | None = None,
        error_reason: str = "quotaExceeded",
    ) -> None:
        self.error_reason = error_reason
        super().__init__(message, status_code=status_code, url=url)


class DecodeError(YtsyncError):
    """
    Exception raised when a response body does not match the page schema.

    Attributes
    ----------
    message : str
        Human-readable error message.
    body_excerpt : str | None
        The first characters of the offending body, for diagnostics.
    """

    def __init__(
        self,
        message: str = "Response body could not be decoded",
        body_excerpt: str | None = None,
    ) -> None:
        """
        Initialize DecodeError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        body_excerpt : str | None, optional
            Leading part of the body that failed to decode (default: None).
        """
        self.body_excerpt: str | None = body_excerpt
        super().__init__(message)


class ConfigurationError(YtsyncError):
    """
    Exception raised for invalid or unreadable configuration.

    Attributes
    ----------
    config_file : str | None
        The configuration file involved, if any.
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        config_file: str | None = None,
    ) -> None:
        self.config_file: str | None = config_file
        super().__init__(message)


class MissingCredentialError(ConfigurationError):
    """Exception raised when neither an API key nor an OAuth token is configured."""

    def __init__(
        self,
        message: str = (
            "Please set a YouTube API key or an OAuth 2.0 token in the "
            "config file or with the --yt-api / --yt-oauth-token flags"
        ),
        config_file: str | None = None,
    ) -> None:
        super().__init__(message, config_file=config_file)


# Exit codes
EXIT_CODE_SUCCESS = 0
EXIT_CODE_USER_ERROR = 1
EXIT_CODE_SYSTEM_ERROR = 2
EXIT_CODE_QUOTA_EXCEEDED = 3
EXIT_CODE_INTERRUPTED = 130  # Standard Unix signal interrupt exit code


def get_exit_code(error: YtsyncError) -> int:
    """
    Map an exception to the CLI exit code it should produce.

    Parameters
    ----------
    error : YtsyncError
        The error raised by the traversal or the configuration layer.

    Returns
    -------
    int
        Exit code for the error.

    Examples
    --------
    >>> get_exit_code(MissingCredentialError())
    1
    >>> get_exit_code(DecodeError())
    2
    """
    if isinstance(error, QuotaExceededError):
        return EXIT_CODE_QUOTA_EXCEEDED
    if isinstance(error, (TransportError, DecodeError)):
        return EXIT_CODE_SYSTEM_ERROR
    return EXIT_CODE_USER_ERROR
