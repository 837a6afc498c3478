"""
Error display helpers for the ytsync CLI.

Errors are shown in a Rich panel in a fixed format:
    Title -> Problem -> Hint (optional)
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ytsync.exceptions import (
    ConfigurationError,
    DecodeError,
    QuotaExceededError,
    TransportError,
    YtsyncError,
)

# Module-level console for CLI error display
console = Console(stderr=True)


class ErrorCategory:
    """
    Standard error categories for CLI commands.

    - CONFIGURATION: Missing credential, bad config file or bad option
    - NETWORK: The YouTube API could not be reached or refused the request
    - QUOTA: The YouTube API quota is exhausted
    - RESPONSE: The YouTube API answered with an unexpected body
    - USAGE: Invalid use of the client
    """

    CONFIGURATION = "Configuration"
    NETWORK = "Network"
    QUOTA = "Quota"
    RESPONSE = "Response"
    USAGE = "Usage"


_HINTS = {
    ErrorCategory.CONFIGURATION: "Set yt_api or yt_oauth_token in the config file, "
    "or pass --yt-api / --yt-oauth-token",
    ErrorCategory.NETWORK: "Check your connection and that the credential is valid",
    ErrorCategory.QUOTA: "Wait for the daily quota to reset and try again",
    ErrorCategory.RESPONSE: "The playlist may be private or the API may have changed",
}


def categorize_error(error: YtsyncError) -> str:
    """Return the ``ErrorCategory`` for ``error``."""
    if isinstance(error, ConfigurationError):
        return ErrorCategory.CONFIGURATION
    if isinstance(error, QuotaExceededError):
        return ErrorCategory.QUOTA
    if isinstance(error, TransportError):
        return ErrorCategory.NETWORK
    if isinstance(error, DecodeError):
        return ErrorCategory.RESPONSE
    return ErrorCategory.USAGE


def format_error(category: str, message: str, hint: Optional[str] = None) -> str:
    """
    Format an error message.

    Examples
    --------
    >>> format_error(ErrorCategory.NETWORK, "Connection refused")
    '[bold]Network Error[/bold]\\n\\nConnection refused'
    """
    parts = [f"[bold]{category} Error[/bold]", "", message]
    if hint:
        parts.extend(["", f"[dim]Hint: {hint}[/dim]"])
    return "\n".join(parts)


def display_error_panel(error: YtsyncError, title: str = "Error") -> None:
    """Display ``error`` in a red Rich panel."""
    category = categorize_error(error)
    formatted = format_error(category, escape(error.message), _HINTS.get(category))
    console.print(
        Panel(
            f"[red]{formatted}[/red]",
            title=title,
            border_style="red",
        )
    )
