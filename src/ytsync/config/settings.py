"""
Application settings and configuration management.

Settings are resolved from, highest priority first:

1. Values given on the command line
2. Values in the TOML configuration file
3. ``YTSYNC_*`` environment variables (and a ``.env`` file)
4. Defaults
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ytsync import __version__
from ytsync.auth.states import Authorized, NoAuth
from ytsync.client import YouTube
from ytsync.exceptions import ConfigurationError, MissingCredentialError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "ytsync"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "ytsync.toml"
DEFAULT_PLAYLIST_FILE = CONFIG_DIR / "playlists"

CredentialKind = Literal["api_key", "oauth_token"]


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = Field(default="ytsync")
    app_version: str = Field(default=__version__)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    # YouTube API
    yt_api: Optional[str] = Field(default=None, repr=False)
    yt_oauth_token: Optional[str] = Field(default=None, repr=False)

    # Files
    playlist_file: Path = Field(default=DEFAULT_PLAYLIST_FILE)
    config_file: Path = Field(default=DEFAULT_CONFIG_FILE)

    # Requests
    page_size: int = Field(default=50, ge=1, le=50)
    request_timeout: float = Field(default=30.0, gt=0)

    @field_validator("playlist_file", "config_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Expand ``~`` in configured paths."""
        if v is None:
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("yt_api", "yt_oauth_token")
    @classmethod
    def blank_as_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank credentials as not configured."""
        if v is not None and not v.strip():
            return None
        return v

    def credential(self) -> tuple[CredentialKind, str]:
        """
        Return the configured credential.

        The API key wins when both an API key and an OAuth token are set.

        Raises
        ------
        MissingCredentialError
            If neither credential is configured.
        """
        if self.yt_api:
            if self.yt_oauth_token:
                logger.warning(
                    "Both an API key and an OAuth token are configured; using the API key"
                )
            return "api_key", self.yt_api
        if self.yt_oauth_token:
            return "oauth_token", self.yt_oauth_token
        raise MissingCredentialError(
            "Please have a YouTube API key or an OAuth 2.0 token set in either\n\n"
            f"{self.config_file}\n\nor using the --yt-api / --yt-oauth-token flags.",
            config_file=str(self.config_file),
        )

    def authorize(self, client: YouTube[NoAuth]) -> YouTube[Authorized]:
        """Promote ``client`` with the configured credential."""
        kind, value = self.credential()
        if kind == "api_key":
            return client.with_api_key(value)
        return client.with_oauth_token(value)

    model_config = SettingsConfigDict(
        env_prefix="YTSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read settings from a TOML file.

    Keys may use dashes or underscores (``yt-api`` and ``yt_api`` are the
    same key). Unknown keys are logged and ignored.

    Returns
    -------
    dict[str, Any]
        The settings found in the file; empty when the file does not exist.

    Raises
    ------
    ConfigurationError
        If the file exists but cannot be read or is not valid TOML.
    """
    if not path.exists():
        logger.warning("Cannot open config file %s, continuing without it", path)
        return {}

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"Could not read config file {path}: {e}", config_file=str(path)
        ) from e

    values: dict[str, Any] = {}
    for key, value in data.items():
        name = key.replace("-", "_")
        if name not in Settings.model_fields:
            logger.warning("Ignoring unknown config key %r in %s", key, path)
            continue
        values[name] = value
    return values


def load_settings(
    config_file: Optional[Path | str] = None, **overrides: Any
) -> Settings:
    """
    Load settings from the config file, the environment and ``overrides``.

    Parameters
    ----------
    config_file : Path | str | None, optional
        TOML file to read (default: ``~/.config/ytsync/ytsync.toml``).
    **overrides : Any
        Command-line values. ``None`` means "not given" and is skipped.

    Raises
    ------
    ConfigurationError
        If the config file is invalid or a value fails validation.
    """
    logger.info("Loading configuration...")
    path = Path(config_file).expanduser() if config_file is not None else DEFAULT_CONFIG_FILE
    values = read_config_file(path)
    values.update({key: value for key, value in overrides.items() if value is not None})
    values["config_file"] = path

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}", config_file=str(path)
        ) from e
