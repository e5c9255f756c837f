"""
Snippetbox: Configuration Tests
================================

What:  Tests for bind-address parsing and Settings validation.
"""

import pytest
from pydantic import ValidationError

from snippetbox.config import Settings, split_bind_address


class TestSplitBindAddress:
    """Tests for split_bind_address."""

    @pytest.mark.parametrize(
        "address, expected",
        [
            (":4000", ("", 4000)),
            ("127.0.0.1:8080", ("127.0.0.1", 8080)),
            ("localhost:4000", ("localhost", 4000)),
            ("[::1]:4000", ("::1", 4000)),
            ("0.0.0.0:0", ("0.0.0.0", 0)),
            (":65535", ("", 65535)),
        ],
    )
    def test_valid_addresses(self, address, expected):
        assert split_bind_address(address) == expected

    @pytest.mark.parametrize(
        "address",
        ["4000", "localhost", "localhost:", ":http", ":-1", ":65536", "::1:4000", ":４０００"],
    )
    def test_invalid_addresses(self, address):
        with pytest.raises(ValueError):
            split_bind_address(address)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch):
        """Without overrides the server listens on :4000 at INFO."""
        monkeypatch.delenv("SNIPPETBOX_BIND_ADDRESS", raising=False)
        monkeypatch.delenv("SNIPPETBOX_LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.bind_address == ":4000"
        assert settings.listen_address == ("", 4000)
        assert settings.log_level == "INFO"
        assert settings.access_log is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SNIPPETBOX_BIND_ADDRESS", "127.0.0.1:9000")
        monkeypatch.setenv("SNIPPETBOX_ACCESS_LOG", "false")

        settings = Settings(_env_file=None)

        assert settings.listen_address == ("127.0.0.1", 9000)
        assert settings.access_log is False

    def test_log_level_normalised(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="LOUD")

    def test_invalid_bind_address(self):
        with pytest.raises(ValidationError, match="host:port"):
            Settings(_env_file=None, bind_address="localhost")
