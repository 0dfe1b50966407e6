"""Contributor stats service orchestrating the metadata fetch and yearly fan-out."""
import logging
from typing import Optional
from contributor_stats.config import Settings
from contributor_stats.domain.aggregation import aggregate_contributions
from contributor_stats.domain.errors import ContributorStatsError
from contributor_stats.domain.github_interface import IGitHubClient
from contributor_stats.domain.models import ContributorStats
from contributor_stats.infrastructure.github_client import GitHubGraphQLClient


logger = logging.getLogger(__name__)


class ContributorStatsService:
    """Application service building a user's contribution summary.

    Runs the user metadata fetch, then one request per contribution year,
    then merges the per-year results. Any failure aborts the whole operation.
    """

    def __init__(self, github_client: IGitHubClient):
        """Initialize contributor stats service.

        Args:
            github_client: GitHub API client implementation
        """
        self._github_client = github_client

    async def fetch_all_contributor_stats(self, username: str) -> ContributorStats:
        """Fetch and aggregate a user's contributions across all years.

        Args:
            username: GitHub login

        Returns:
            ContributorStats with one entry per repository

        Raises:
            ValueError: When username is blank
            ContributorStatsError: When any request fails
        """
        if not username or not username.strip():
            raise ValueError("username must be a non-empty string")
        username = username.strip()

        try:
            metadata = await self._github_client.fetch_user_metadata(username)
            contributions = await self._github_client.fetch_contributions_by_year(
                username,
                metadata.contribution_years
            )
        except ContributorStatsError as e:
            logger.error(f"Error fetching contributor stats for {username}: {e}")
            raise

        repositories = aggregate_contributions(contributions)
        logger.info(
            f"Aggregated {len(repositories)} repositories for {username} "
            f"across {len(metadata.contribution_years)} years"
        )

        return ContributorStats(
            id=metadata.id,
            name=metadata.name,
            repositories_contributed_to=tuple(repositories)
        )

    async def close(self) -> None:
        """Close connections."""
        await self._github_client.close()


async def fetch_all_contributor_stats(
    username: str,
    settings: Optional[Settings] = None
) -> ContributorStats:
    """Fetch a user's aggregated contribution stats from GitHub.

    Args:
        username: GitHub login
        settings: Explicit settings; read from the environment when omitted

    Raises:
        ConfigurationError: When no access token is configured (before any request)
        FetchError: When any GitHub request fails
    """
    if settings is None:
        try:
            settings = Settings.from_env()
        except ContributorStatsError as e:
            logger.error(f"Invalid configuration: {e}")
            raise

    service = ContributorStatsService(
        GitHubGraphQLClient(
            settings.access_token,
            graphql_url=settings.graphql_url,
            request_timeout=settings.request_timeout
        )
    )
    try:
        return await service.fetch_all_contributor_stats(username)
    finally:
        await service.close()
