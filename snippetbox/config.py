"""
Snippetbox: Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads SNIPPETBOX_* environment variables (or a .env
       file), validates them, and exposes a singleton `settings` object.
Who:   Imported by the app factory, the middleware, and the server runner.
When:  Loaded once at module import time; never mutated afterwards.

The defaults reproduce the stock server: listen on ":4000" (all interfaces),
log at INFO. Nothing needs to be set to run it.
"""

from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def split_bind_address(address: str) -> Tuple[str, int]:
    """
    Split a "host:port" bind address into its host and numeric port.

    An empty host means every interface. IPv6 hosts may be written in
    brackets ("[::1]:4000"); the brackets are stripped.

    Raises:
        ValueError: The address has no port, or the port is not 0-65535.
    """
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"Bind address '{address}' must have the form host:port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"IPv6 host in '{address}' must be written in brackets")
    if not port.isascii() or not port.isdigit():
        raise ValueError(f"Port in bind address '{address}' is not numeric")
    port_number = int(port)
    if port_number > 65535:
        raise ValueError(f"Port {port_number} in bind address '{address}' is out of range")
    return host, port_number


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have working defaults; attributes are grouped by concern.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # Format: "host:port". An empty host listens on all interfaces.
    bind_address: str = Field(
        default=":4000",
        description="Address the HTTP server listens on",
    )

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    # Emit one access line per request from RequestLoggingMiddleware
    access_log: bool = Field(default=True)

    @field_validator("bind_address")
    @classmethod
    def validate_bind_address(cls, v: str) -> str:
        """Rejects addresses that cannot be split into host and port."""
        split_bind_address(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def listen_address(self) -> Tuple[str, int]:
        """The (host, port) pair the listener binds to."""
        return split_bind_address(self.bind_address)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_prefix": "SNIPPETBOX_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
