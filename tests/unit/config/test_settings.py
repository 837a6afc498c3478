"""
Tests for settings configuration.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ytsync.auth.states import ApiKeyAuth, OAuthTokenAuth
from ytsync.client import YouTube
from ytsync.config.settings import (
    DEFAULT_CONFIG_FILE,
    Settings,
    load_settings,
    read_config_file,
)
from ytsync.exceptions import ConfigurationError, MissingCredentialError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep real YTSYNC_* variables and .env files out of these tests."""
    import os

    for name in list(os.environ):
        if name.upper().startswith("YTSYNC_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "ytsync.toml"
    path.write_text(
        'yt_api = "file_key"\n'
        "page-size = 25\n"
        'log_level = "debug"\n'
    )
    return path


def test_settings_defaults() -> None:
    """Test default settings values."""
    settings = Settings()

    assert settings.app_name == "ytsync"
    assert settings.yt_api is None
    assert settings.yt_oauth_token is None
    assert settings.page_size == 50
    assert settings.request_timeout == 30.0
    assert settings.log_level == "INFO"
    assert settings.config_file == DEFAULT_CONFIG_FILE


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """YTSYNC_* environment variables are picked up."""
    monkeypatch.setenv("YTSYNC_YT_API", "env_key")
    monkeypatch.setenv("YTSYNC_PAGE_SIZE", "10")

    settings = Settings()

    assert settings.yt_api == "env_key"
    assert settings.page_size == 10


def test_invalid_log_level() -> None:
    """Test log level validation."""
    with pytest.raises(ValueError, match="Invalid log level"):
        Settings(log_level="LOUD")


def test_path_expansion() -> None:
    """Paths starting with ~ are expanded."""
    settings = Settings(playlist_file="~/playlists")
    assert settings.playlist_file == Path.home() / "playlists"


def test_credentials_hidden_from_repr() -> None:
    """Credentials do not appear in repr output."""
    assert "secret" not in repr(Settings(yt_api="secret"))


class TestCredential:
    """Tests for credential selection."""

    def test_api_key(self) -> None:
        assert Settings(yt_api="k").credential() == ("api_key", "k")

    def test_oauth_token(self) -> None:
        assert Settings(yt_oauth_token="t").credential() == ("oauth_token", "t")

    def test_api_key_wins(self) -> None:
        """When both are set the API key is used."""
        assert Settings(yt_api="k", yt_oauth_token="t").credential() == ("api_key", "k")

    def test_missing_credential(self) -> None:
        with pytest.raises(MissingCredentialError) as exc_info:
            Settings().credential()
        assert str(DEFAULT_CONFIG_FILE) in exc_info.value.message

    def test_blank_credential_is_missing(self) -> None:
        with pytest.raises(MissingCredentialError):
            Settings(yt_api="   ").credential()

    def test_authorize_with_api_key(self) -> None:
        youtube = Settings(yt_api="k").authorize(YouTube())
        assert isinstance(youtube.auth, ApiKeyAuth)

    def test_authorize_with_oauth_token(self) -> None:
        youtube = Settings(yt_oauth_token="t").authorize(YouTube())
        assert isinstance(youtube.auth, OAuthTokenAuth)


class TestConfigFile:
    """Tests for TOML loading and merging."""

    def test_read_config_file(self, config_file: Path) -> None:
        """Dashed and underscored keys are both accepted."""
        assert read_config_file(config_file) == {
            "yt_api": "file_key",
            "page_size": 25,
            "log_level": "debug",
        }

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert read_config_file(tmp_path / "missing.toml") == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("yt_api = \n")
        with pytest.raises(ConfigurationError) as exc_info:
            read_config_file(path)
        assert exc_info.value.config_file == str(path)

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "extra.toml"
        path.write_text('yt_api = "k"\nsomething_else = 1\n')
        assert read_config_file(path) == {"yt_api": "k"}

    def test_load_settings_uses_file(self, config_file: Path) -> None:
        settings = load_settings(config_file)
        assert settings.yt_api == "file_key"
        assert settings.page_size == 25
        assert settings.log_level == "DEBUG"
        assert settings.config_file == config_file

    def test_command_line_beats_file(self, config_file: Path) -> None:
        settings = load_settings(config_file, yt_api="cli_key", page_size=None)
        assert settings.yt_api == "cli_key"
        assert settings.page_size == 25

    def test_file_beats_environment(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("YTSYNC_YT_API", "env_key")
        monkeypatch.setenv("YTSYNC_YT_OAUTH_TOKEN", "env_token")
        settings = load_settings(config_file)
        assert settings.yt_api == "file_key"
        assert settings.yt_oauth_token == "env_token"

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "ytsync.toml"
        path.write_text("page_size = 500\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_settings(path)
