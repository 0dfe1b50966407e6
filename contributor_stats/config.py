"""Runtime configuration for contributor stats."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from contributor_stats.domain.errors import ConfigurationError


GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    """Explicit settings passed to the GitHub client at construction time."""
    access_token: str
    graphql_url: str = GITHUB_GRAPHQL_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if not self.access_token or not self.access_token.strip():
            raise ConfigurationError("GitHub personal access token is not set")
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"Request timeout must be positive, got {self.request_timeout}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Reads GITHUB_PERSONAL_ACCESS_TOKEN (required), GITHUB_GRAPHQL_URL and
        GITHUB_REQUEST_TIMEOUT.

        Raises:
            ConfigurationError: When the token is missing or a value is invalid
        """
        env = os.environ if environ is None else environ

        token = env.get("GITHUB_PERSONAL_ACCESS_TOKEN", "").strip()
        if not token:
            raise ConfigurationError(
                "GITHUB_PERSONAL_ACCESS_TOKEN environment variable is required"
            )

        raw_timeout = env.get("GITHUB_REQUEST_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(
                f"GITHUB_REQUEST_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from e

        return cls(
            access_token=token,
            graphql_url=env.get("GITHUB_GRAPHQL_URL") or GITHUB_GRAPHQL_URL,
            request_timeout=timeout
        )
