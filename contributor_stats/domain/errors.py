"""Exception hierarchy for contributor stats operations."""


class ContributorStatsError(Exception):
    """Base class for all contributor stats failures."""
    pass


class ConfigurationError(ContributorStatsError):
    """Raised when required configuration (e.g. the access token) is missing or invalid."""
    pass


class FetchError(ContributorStatsError):
    """Raised when a GitHub request fails or returns an unexpected response.

    The underlying exception, when there is one, is chained as ``__cause__``.
    """
    pass


class AuthenticationError(FetchError):
    """Raised when GitHub rejects the access token."""
    pass


class UserNotFoundError(FetchError):
    """Raised when the requested login does not resolve to a GitHub user."""
    pass


class ResponseDecodeError(FetchError):
    """Raised when a GraphQL payload does not match the expected schema."""
    pass
