"""
Connection settings for the pfSense API client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

DEFAULT_TIMEOUT = 5.0


class AuthMode(str, Enum):
    """Authentication scheme used for API requests."""

    NONE = "none"
    LOCAL = "local"  # HTTP basic auth with a local pfSense user
    JWT = "jwt"  # bearer token obtained with the local user credentials
    TOKEN = "token"  # "<client_id> <client_token>" API key pair


@dataclass
class PfSenseConfig:
    """
    Configuration for a :class:`~pfsense_api.api_client.PfSenseClient`.

    Values are read once when the client is constructed. The only value the
    client changes afterwards is ``jwt_token``, which caches the bearer token
    when ``auth_mode`` is :attr:`AuthMode.JWT`.

    Args:
        host: Base URL of the appliance, e.g. ``https://192.168.1.1``.
        auth_mode: Authentication scheme. Strings such as ``"jwt"`` are accepted.
        username: Local user name (``local`` and ``jwt`` modes).
        password: Local user password (``local`` and ``jwt`` modes).
        jwt_token: Optional preset bearer token for ``jwt`` mode.
        client_id: API client ID (``token`` mode).
        client_token: API client token (``token`` mode).
        verify_ssl: Whether to verify TLS certificates. Can be a bool or the path
                    to a CA bundle.
        timeout: Request timeout in seconds.

    Raises:
        ValueError: If the host is not an http(s) URL, the timeout is not
                    positive, or the credentials required by ``auth_mode`` are missing.
    """

    host: str
    auth_mode: AuthMode = AuthMode.NONE
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    jwt_token: Optional[str] = field(default=None, repr=False)
    client_id: Optional[str] = None
    client_token: Optional[str] = field(default=None, repr=False)
    verify_ssl: Union[bool, str] = True
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.host or not self.host.startswith(("http://", "https://")):
            raise ValueError("host must start with http:// or https://")
        self.host = self.host.rstrip("/")

        self.auth_mode = AuthMode(self.auth_mode)

        if self.timeout is None or self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")

        if self.auth_mode is AuthMode.LOCAL and not self.has_local_credentials:
            raise ValueError("local authentication requires username and password")
        if (
            self.auth_mode is AuthMode.JWT
            and not self.has_local_credentials
            and not self.jwt_token
        ):
            raise ValueError(
                "JWT authentication requires username and password or a jwt_token")
        if self.auth_mode is AuthMode.TOKEN and not (self.client_id and self.client_token):
            raise ValueError("token authentication requires client_id and client_token")

    @property
    def auth_enabled(self) -> bool:
        """False for a client that sends no credentials at all."""
        return self.auth_mode is not AuthMode.NONE

    @property
    def has_local_credentials(self) -> bool:
        return bool(self.username and self.password)
