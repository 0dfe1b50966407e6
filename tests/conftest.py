"""Shared fixtures building GitHub GraphQL payloads and domain entities."""
import pytest
from contributor_stats.domain.models import (
    RepositoryContributionRecord,
    RepositoryDescriptor,
    RepositoryOwner,
)


def build_repository_payload(name_with_owner, stargazer_count=10, commit_count=42):
    owner_login, name = name_with_owner.split("/")
    return {
        "owner": {
            "id": f"MDQ6VXNlcj{owner_login}",
            "avatarUrl": f"https://avatars.githubusercontent.com/{owner_login}"
        },
        "isInOrganization": False,
        "url": f"https://github.com/{name_with_owner}",
        "homepageUrl": None,
        "name": name,
        "nameWithOwner": name_with_owner,
        "stargazerCount": stargazer_count,
        "openGraphImageUrl": f"https://opengraph.githubassets.com/1/{name_with_owner}",
        "defaultBranchRef": {"target": {"history": {"totalCount": commit_count}}}
    }


def build_year_payload(counts):
    """Build a per-year response ``data`` object from {nameWithOwner: totalCount}."""
    return {
        "user": {
            "contributionsCollection": {
                "commitContributionsByRepository": [
                    {
                        "contributions": {"totalCount": total},
                        "repository": build_repository_payload(name_with_owner)
                    }
                    for name_with_owner, total in counts.items()
                ]
            }
        }
    }


def build_user_payload(years, user_id="MDQ6VXNlcjE=", name="The Octocat"):
    return {
        "user": {
            "id": user_id,
            "name": name,
            "contributionsCollection": {"contributionYears": list(years)}
        }
    }


def build_descriptor(name_with_owner, stargazer_count=10):
    owner_login, name = name_with_owner.split("/")
    return RepositoryDescriptor(
        name_with_owner=name_with_owner,
        name=name,
        url=f"https://github.com/{name_with_owner}",
        homepage_url=None,
        is_in_organization=False,
        stargazer_count=stargazer_count,
        open_graph_image_url=f"https://opengraph.githubassets.com/1/{name_with_owner}",
        owner=RepositoryOwner(
            id=f"MDQ6VXNlcj{owner_login}",
            avatar_url=f"https://avatars.githubusercontent.com/{owner_login}"
        ),
        default_branch_commit_count=42
    )


@pytest.fixture
def repository_payload():
    return build_repository_payload


@pytest.fixture
def year_payload():
    return build_year_payload


@pytest.fixture
def user_payload():
    return build_user_payload


@pytest.fixture
def descriptor():
    return build_descriptor


@pytest.fixture
def record():
    def _record(name_with_owner, total_count, stargazer_count=10):
        return RepositoryContributionRecord(
            repository=build_descriptor(name_with_owner, stargazer_count),
            total_count=total_count
        )
    return _record
