"""Transport configuration for the LIFX cloud API."""

from __future__ import annotations

import os
from dataclasses import dataclass

from aiohttp import ClientTimeout

from pylifxcloud.const import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ENV_BASE_URL, ENV_TOKEN
from pylifxcloud.exceptions import AuthenticationError


@dataclass(frozen=True)
class LifxConfig:
    """Immutable settings shared by every request.

    Attributes:
        token: Personal access token from https://cloud.lifx.com/settings.
        base_url: Base URL for the API, without trailing slash.
        timeout: Total request timeout in seconds.
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Normalize the base URL."""
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def __repr__(self) -> str:
        """Return a representation that does not leak the token."""
        return f"LifxConfig(base_url={self.base_url!r}, timeout={self.timeout!r})"

    @classmethod
    def from_env(cls) -> LifxConfig:
        """Build a configuration from LIFX_TOKEN and LIFX_API_BASE_URL.

        Raises:
            AuthenticationError: If LIFX_TOKEN is not set.
        """
        token = os.getenv(ENV_TOKEN)
        if not token:
            msg = f"Missing access token: set {ENV_TOKEN}"
            raise AuthenticationError(msg)
        return cls(token=token, base_url=os.getenv(ENV_BASE_URL, DEFAULT_BASE_URL))

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return {"Authorization": f"Bearer {self.token}"}

    @property
    def client_timeout(self) -> ClientTimeout:
        """aiohttp timeout built from the configured number of seconds."""
        return ClientTimeout(total=self.timeout)

    def url(self, endpoint: str) -> str:
        """Join an endpoint path onto the base URL."""
        return f"{self.base_url}{endpoint}"
