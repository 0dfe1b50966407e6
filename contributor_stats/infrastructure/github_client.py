"""GitHub GraphQL API client for user metadata and yearly contribution data."""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence
import aiohttp
from gql import gql, Client
from gql.transport.aiohttp import AIOHTTPTransport
from gql.transport.exceptions import (
    TransportError,
    TransportQueryError,
    TransportServerError
)
from contributor_stats.config import DEFAULT_REQUEST_TIMEOUT, GITHUB_GRAPHQL_URL
from contributor_stats.domain.errors import (
    AuthenticationError,
    ConfigurationError,
    FetchError,
    UserNotFoundError
)
from contributor_stats.domain.github_interface import IGitHubClient
from contributor_stats.domain.models import RepositoryContributionRecord, UserMetadata
from contributor_stats.infrastructure.response_schema import (
    parse_user_metadata,
    parse_year_contributions
)


logger = logging.getLogger(__name__)


class GitHubGraphQLClient(IGitHubClient):
    """GitHub GraphQL API client.

    Implements the IGitHubClient port, providing an anti-corruption layer
    between the domain and GitHub's API. Requests are never retried.
    """

    # GitHub's maximum for commitContributionsByRepository
    MAX_REPOSITORIES = 100

    USER_METADATA_QUERY = gql("""
        query UserMetadata($login: String!) {
            user(login: $login) {
                id
                name
                contributionsCollection {
                    contributionYears
                }
            }
        }
    """)

    YEAR_CONTRIBUTIONS_QUERY = gql("""
        query YearContributions($login: String!, $from: DateTime!, $maxRepositories: Int!) {
            user(login: $login) {
                contributionsCollection(from: $from) {
                    commitContributionsByRepository(maxRepositories: $maxRepositories) {
                        contributions {
                            totalCount
                        }
                        repository {
                            owner {
                                id
                                avatarUrl
                            }
                            isInOrganization
                            url
                            homepageUrl
                            name
                            nameWithOwner
                            stargazerCount
                            openGraphImageUrl
                            defaultBranchRef {
                                target {
                                    ... on Commit {
                                        history {
                                            totalCount
                                        }
                                    }
                                }
                            }
                        }
                    }
                }
            }
        }
    """)

    def __init__(
        self,
        access_token: str,
        graphql_url: str = GITHUB_GRAPHQL_URL,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    ):
        """Initialize GitHub client.

        Args:
            access_token: GitHub personal access token
            graphql_url: GraphQL endpoint URL
            request_timeout: Seconds to wait for each request

        Raises:
            ConfigurationError: When access_token is empty
        """
        if not access_token:
            raise ConfigurationError("GitHub personal access token is not set")
        self._access_token = access_token
        self._graphql_url = graphql_url
        self._request_timeout = request_timeout
        self._transport: Optional[AIOHTTPTransport] = None
        self._client: Optional[Client] = None

    def _init_client(self) -> None:
        """Initialize the GraphQL client (lazy initialization)."""
        if self._client is None:
            headers = {"Authorization": f"Bearer {self._access_token}"}
            self._transport = AIOHTTPTransport(
                url=self._graphql_url,
                headers=headers
            )
            self._client = Client(
                transport=self._transport,
                fetch_schema_from_transport=False,
                execute_timeout=self._request_timeout
            )

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[Any]:
        """Open a connected GraphQL session for the duration of the block."""
        self._init_client()
        async with self._client as session:
            yield session

    async def _execute(
        self,
        session: Any,
        document: Any,
        variables: Dict[str, Any],
        username: str
    ) -> Dict[str, Any]:
        """Execute one GraphQL request, translating failures into FetchError.

        Raises:
            AuthenticationError: When GitHub rejects the token
            UserNotFoundError: When GitHub reports the login as NOT_FOUND
            FetchError: For any other transport or query failure
        """
        try:
            return await session.execute(document, variable_values=variables)
        except TransportQueryError as e:
            errors = e.errors or []
            if any(isinstance(error, dict) and error.get("type") == "NOT_FOUND" for error in errors):
                raise UserNotFoundError(f"GitHub user '{username}' not found") from e
            raise FetchError(f"GitHub GraphQL query failed: {e}") from e
        except TransportServerError as e:
            if e.code in (401, 403):
                raise AuthenticationError(
                    f"GitHub rejected the access token (HTTP {e.code})"
                ) from e
            raise FetchError(f"GitHub server error (HTTP {e.code}): {e}") from e
        except (TransportError, aiohttp.ClientError) as e:
            raise FetchError(f"GitHub request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise FetchError(
                f"GitHub request timed out after {self._request_timeout} seconds"
            ) from e

    async def fetch_user_metadata(self, username: str) -> UserMetadata:
        """Fetch a user's id, display name and contribution years.

        Args:
            username: GitHub login

        Returns:
            UserMetadata entity
        """
        logger.info(f"Fetching user metadata for {username}")
        async with self._session() as session:
            result = await self._execute(
                session,
                self.USER_METADATA_QUERY,
                {"login": username},
                username
            )
        metadata = parse_user_metadata(result, username)
        logger.info(
            f"User {username} has {len(metadata.contribution_years)} contribution years: "
            f"{list(metadata.contribution_years)}"
        )
        return metadata

    async def _fetch_year(
        self,
        session: Any,
        username: str,
        year: int
    ) -> List[RepositoryContributionRecord]:
        result = await self._execute(
            session,
            self.YEAR_CONTRIBUTIONS_QUERY,
            {
                "login": username,
                "from": f"{year}-01-01T00:00:00Z",
                "maxRepositories": self.MAX_REPOSITORIES
            },
            username
        )
        records = parse_year_contributions(result, username)
        logger.info(f"Fetched {len(records)} repositories for {username} in {year}")
        return records

    async def fetch_contributions_by_year(
        self,
        username: str,
        years: Sequence[int]
    ) -> List[List[RepositoryContributionRecord]]:
        """Fetch commit contributions by repository for every year concurrently.

        All requests are launched before any is awaited. The first failure
        cancels the requests still in flight and is raised; no partial result
        is returned.

        Args:
            username: GitHub login
            years: Contribution years to query

        Returns:
            One list of records per year, in the order of ``years``
        """
        if not years:
            return []

        logger.info(f"Launching {len(years)} contribution requests for {username}")
        async with self._session() as session:
            tasks = [
                asyncio.ensure_future(self._fetch_year(session, username, year))
                for year in years
            ]
            try:
                return list(await asyncio.gather(*tasks))
            except BaseException:
                for task in tasks:
                    task.cancel()
                # Let cancelled requests unwind before the session closes
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

    async def close(self) -> None:
        """Close the GraphQL client and transport."""
        if self._transport:
            await self._transport.close()
            self._transport = None
            self._client = None
