"""GitHub API interface (port) for fetching contribution data.

This is the anti-corruption layer that shields the domain from GitHub API specifics.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence
from contributor_stats.domain.models import RepositoryContributionRecord, UserMetadata


class IGitHubClient(ABC):
    """Abstract interface for GitHub API operations."""

    @abstractmethod
    async def fetch_user_metadata(self, username: str) -> UserMetadata:
        """Fetch a user's identity and contribution years.

        Args:
            username: GitHub login

        Returns:
            UserMetadata for the login
        """
        pass

    @abstractmethod
    async def fetch_contributions_by_year(
        self,
        username: str,
        years: Sequence[int]
    ) -> List[List[RepositoryContributionRecord]]:
        """Fetch per-repository commit contributions for each year.

        Args:
            username: GitHub login
            years: Contribution years to query

        Returns:
            One list of records per requested year, in the order given
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
        pass
