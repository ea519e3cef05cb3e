"""
Client Configuration

Holds the settings shared by every request the client sends. The
configuration is frozen once built, so one client can be used from any
number of concurrent tasks.

Environment variables read by ``ClientConfig.from_env``:
    CHATWORK_API_TOKEN: API token (required)
    CHATWORK_BASE_URL: Override of the API base URL
    CHATWORK_DEBUG: "1", "true" or "yes" to enable debug logging
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx

DEFAULT_BASE_URL = "https://api.chatwork.com/v2"
DEFAULT_USER_AGENT = "chatwork-python"
DEFAULT_TIMEOUT = 30.0

TOKEN_HEADER = "X-ChatWorkToken"

ENV_TOKEN = "CHATWORK_API_TOKEN"
ENV_BASE_URL = "CHATWORK_BASE_URL"
ENV_DEBUG = "CHATWORK_DEBUG"

_TRUTHY = ("1", "true", "yes", "on")


def validate_base_url(base_url: str) -> None:
    """
    Check that a base URL is absolute.

    Raises:
        ValueError: If the URL cannot be parsed or has no scheme or host
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ValueError(f"Invalid base URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"Invalid base URL {base_url!r}: must be absolute")


@dataclass(frozen=True)
class ClientConfig:
    """
    Transport configuration shared read-only by all services.

    Attributes:
        token: ChatWork API token, sent as the X-ChatWorkToken header
        base_url: Root URL that relative endpoint paths are joined to
        user_agent: Value of the User-Agent header
        debug: Log each dispatch at DEBUG level
    """

    token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    debug: bool = False

    def __post_init__(self):
        validate_base_url(self.base_url)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            ValueError: If CHATWORK_API_TOKEN is missing or empty
        """
        environ = os.environ if environ is None else environ
        token = environ.get(ENV_TOKEN, "").strip()
        if not token:
            raise ValueError(f"{ENV_TOKEN} is not set")
        return cls(
            token=token,
            base_url=environ.get(ENV_BASE_URL, "").strip() or DEFAULT_BASE_URL,
            debug=environ.get(ENV_DEBUG, "").strip().lower() in _TRUTHY,
        )
