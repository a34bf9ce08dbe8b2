"""
Client Configuration

Loads the origin, bearer token and timeout the client is constructed with,
either from environment variables or from a settings.json file.

Environment variables:
    HIPCHAT_ORIGIN:  Base scheme and host (default https://api.hipchat.com)
    HIPCHAT_TOKEN:   Bearer token (required)
    HIPCHAT_TIMEOUT: Timeout in seconds
    HIPCHAT_ROOM:    Default room for commands that need one
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "https://api.hipchat.com"
DEFAULT_TIMEOUT = 30.0  # seconds applied to connect, read and write


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings needed to construct a Client.

    Attributes:
        origin: Base scheme and host
        token: Bearer token
        timeout: Timeout in seconds, None disables it
        room: Default room id or name, if configured
    """

    origin: str
    token: str
    timeout: Optional[float] = DEFAULT_TIMEOUT
    room: Optional[str] = None

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks
        return (
            f"ClientConfig(origin={self.origin!r}, token='***', "
            f"timeout={self.timeout!r}, room={self.room!r})"
        )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "ClientConfig":
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            The loaded configuration.

        Raises:
            ValueError: If HIPCHAT_TOKEN is missing or HIPCHAT_TIMEOUT is
                not a number
        """
        environ = os.environ if environ is None else environ

        token = environ.get("HIPCHAT_TOKEN", "")
        if not token:
            raise ValueError("HIPCHAT_TOKEN is not set")

        timeout_env = environ.get("HIPCHAT_TIMEOUT")
        config = cls(
            origin=environ.get("HIPCHAT_ORIGIN", DEFAULT_ORIGIN),
            token=token,
            timeout=_parse_timeout(timeout_env),
            room=environ.get("HIPCHAT_ROOM") or None,
        )
        logger.debug("Loaded configuration from environment: %r", config)
        return config

    @classmethod
    def from_file(cls, path: str) -> "ClientConfig":
        """
        Load configuration from a JSON settings file.

        The file holds an object with "token" and optionally "origin",
        "timeout" and "room".

        Args:
            path: Path of the settings file

        Returns:
            The loaded configuration.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON or lacks a token
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        config = cls.from_dict(data)
        logger.debug("Loaded configuration from %s: %r", path, config)
        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        """Create from a settings dictionary."""
        if not isinstance(data, dict):
            raise ValueError("settings must be a JSON object")
        token = data.get("token")
        if not token:
            raise ValueError("settings are missing 'token'")
        return cls(
            origin=data.get("origin") or DEFAULT_ORIGIN,
            token=token,
            timeout=_parse_timeout(data.get("timeout")),
            room=data.get("room"),
        )


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {value!r}") from None
    # Zero or negative disables the timeout
    return timeout if timeout > 0 else None
