"""Main entry point for fetching a GitHub user's contributor stats.

Usage: python fetch_contributor_stats.py <username>
The username may also be given through GITHUB_USERNAME.
"""
import asyncio
import os
import sys
import logging
from dotenv import load_dotenv
from contributor_stats.config import Settings
from contributor_stats.domain.errors import ConfigurationError, ContributorStatsError
from contributor_stats.application.contributor_stats_service import fetch_all_contributor_stats

# Load environment variables from .env or env file
load_dotenv('.env') or load_dotenv('env')


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

TOP_REPOSITORIES = 10


async def main():
    """Fetch and summarize contributor stats."""
    username = (sys.argv[1] if len(sys.argv) > 1 else os.getenv("GITHUB_USERNAME", "")).strip()
    if not username:
        logger.error("Usage: fetch_contributor_stats.py <username> (or set GITHUB_USERNAME)")
        sys.exit(1)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        stats = await fetch_all_contributor_stats(username, settings)
    except ContributorStatsError:
        sys.exit(1)

    ranked = sorted(
        stats.repositories_contributed_to,
        key=lambda repo: repo.num_of_my_contributions,
        reverse=True
    )

    logger.info("=" * 50)
    logger.info(f"Contributor Stats for {stats.name or username} ({stats.id}):")
    logger.info(f"  Repositories contributed to: {len(ranked)}")
    logger.info(f"  Total commit contributions: {stats.total_contributions}")
    for repo in ranked[:TOP_REPOSITORIES]:
        logger.info(f"  {repo.name_with_owner}: {repo.num_of_my_contributions}")
    logger.info("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
