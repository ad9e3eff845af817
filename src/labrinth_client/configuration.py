"""Client configuration: servers, token, user agent and debug output."""

import logging
import sys
from dataclasses import dataclass, field
from typing import TextIO

from labrinth_client import __version__
from labrinth_client.auth import CredentialResolver
from labrinth_client.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PRODUCTION_HOST = "https://api.modrinth.com/v2"
STAGING_HOST = "https://staging-api.modrinth.com/v2"

DEFAULT_USER_AGENT = f"labrinth-client/{__version__}"
DEFAULT_TIMEOUT = 30.0

# Header Labrinth reads the personal access token from
AUTH_KEY = "Authorization"


@dataclass
class Configuration:
    """Settings for one ApiClient.

    The token is attached verbatim, so it must already carry any scheme
    prefix, or the prefix must be registered with ``set_api_key_prefix``.

    Labrinth blocks traffic that only identifies the HTTP library, so set a
    user agent that names your project, e.g.
    ``"github_username/project_name/1.56.0 (contact@example.com)"``.

    Example:
        ```python
        config = Configuration(user_agent="me/my-launcher/1.0")
        config.set_api_key("Authorization", "mrp_...")
        ```
    """

    host: str = PRODUCTION_HOST
    api_keys: dict[str, str] = field(default_factory=dict)
    api_key_prefixes: dict[str, str] = field(default_factory=dict)
    user_agent: str | None = DEFAULT_USER_AGENT
    debug: bool = False
    debug_file: str | None = None  # None writes debug output to stderr
    timeout: float = DEFAULT_TIMEOUT
    host_index: int | None = None

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        host: str | None = None,
        user_agent: str | None = None,
        resolver: CredentialResolver | None = None,
        **kwargs,
    ) -> "Configuration":
        """Build a configuration from explicit values, environment and .env.

        Reads ``LABRINTH_API_KEY`` (or a file named by ``LABRINTH_API_KEY_FILE``),
        ``LABRINTH_BASE_URL`` and ``LABRINTH_USER_AGENT``.
        """
        resolver = resolver or CredentialResolver()

        token = resolver.resolve(value=api_key, env_var_name="LABRINTH_API_KEY")
        if token is None:
            token = resolver.resolve_from_file(env_var_name="LABRINTH_API_KEY_FILE")

        config = cls(
            host=resolver.resolve(
                value=host, env_var_name="LABRINTH_BASE_URL", default=PRODUCTION_HOST, secret=False
            ),
            user_agent=resolver.resolve(
                value=user_agent, env_var_name="LABRINTH_USER_AGENT", default=DEFAULT_USER_AGENT, secret=False
            ),
            **kwargs,
        )
        if token:
            config.set_api_key(AUTH_KEY, token)
        return config

    def set_api_key(self, identifier: str, key: str | None) -> None:
        """Set (or with ``None``, remove) the API key for an identifier."""
        if key is None:
            self.api_keys.pop(identifier, None)
        else:
            self.api_keys[identifier] = key

    def set_api_key_prefix(self, identifier: str, prefix: str | None) -> None:
        """Set (or with ``None``, remove) the scheme prefix for an identifier."""
        if prefix is None:
            self.api_key_prefixes.pop(identifier, None)
        else:
            self.api_key_prefixes[identifier] = prefix

    def get_api_key_with_prefix(self, identifier: str) -> str | None:
        """Return the header value for ``identifier``, or None when no key is set."""
        key = self.api_keys.get(identifier)
        if not key:
            return None
        prefix = self.api_key_prefixes.get(identifier)
        if prefix:
            return f"{prefix} {key}"
        return key

    @staticmethod
    def host_settings() -> list[dict[str, str]]:
        """Known Labrinth servers, indexable with ``host_index``."""
        return [
            {"url": PRODUCTION_HOST, "description": "Production server"},
            {"url": STAGING_HOST, "description": "Staging server"},
        ]

    def get_host_from_settings(self, index: int) -> str:
        """Return the URL of server ``index`` from ``host_settings()``.

        Raises:
            ValueError: If the index is out of range.
        """
        servers = self.host_settings()
        if index < 0 or index >= len(servers):
            raise ValueError(f"Invalid index {index} when selecting the host. Must be less than {len(servers)}")
        return servers[index]["url"]

    def get_host(self) -> str:
        """Base URL requests are sent to, without a trailing slash."""
        if self.host_index is not None:
            return self.get_host_from_settings(self.host_index)
        return self.host.rstrip("/")

    def open_debug_sink(self) -> TextIO:
        """Open the stream debug output is written to.

        Raises:
            ConfigurationError: If the debug file cannot be opened for appending.
        """
        if self.debug_file is None:
            return sys.stderr
        try:
            return open(self.debug_file, "a", encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Failed to open the debug file: {self.debug_file}") from e
