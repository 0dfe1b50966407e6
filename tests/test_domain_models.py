"""Tests for domain models."""
import dataclasses
import pytest
from contributor_stats.domain.models import (
    AggregatedRepositoryContribution,
    ContributorStats,
    UserMetadata,
)


def test_user_metadata_identity():
    """Test deriving the identity from user metadata."""
    metadata = UserMetadata(id="MDQ6VXNlcjE=", name=None, contribution_years=(2021, 2020))

    identity = metadata.identity

    assert identity.id == "MDQ6VXNlcjE="
    assert identity.name is None
    assert metadata.contribution_years == (2021, 2020)


def test_aggregated_contribution_is_immutable(descriptor):
    """Test that aggregated entries cannot be modified."""
    aggregated = AggregatedRepositoryContribution(
        repository=descriptor("octocat/Hello-World"),
        num_of_my_contributions=8
    )

    assert aggregated.name_with_owner == "octocat/Hello-World"
    with pytest.raises(dataclasses.FrozenInstanceError):
        aggregated.num_of_my_contributions = 9


def test_aggregated_contribution_to_dict(descriptor):
    """Test the camelCase serialization matches GitHub's repository shape."""
    aggregated = AggregatedRepositoryContribution(
        repository=descriptor("octocat/Hello-World", stargazer_count=2500),
        num_of_my_contributions=8
    )

    result = aggregated.to_dict()

    assert result["nameWithOwner"] == "octocat/Hello-World"
    assert result["name"] == "Hello-World"
    assert result["stargazerCount"] == 2500
    assert result["numOfMyContributions"] == 8
    assert result["owner"] == {
        "id": "MDQ6VXNlcjoctocat",
        "avatarUrl": "https://avatars.githubusercontent.com/octocat"
    }
    assert result["defaultBranchRef"] == {"target": {"history": {"totalCount": 42}}}


def test_descriptor_without_default_branch_serializes_null(descriptor):
    repository = dataclasses.replace(
        descriptor("octocat/empty"), default_branch_commit_count=None
    )

    assert repository.to_dict()["defaultBranchRef"] is None


def test_contributor_stats_totals_and_dict(descriptor):
    """Test the final result wraps the user and the aggregated repositories."""
    stats = ContributorStats(
        id="MDQ6VXNlcjE=",
        name="The Octocat",
        repositories_contributed_to=(
            AggregatedRepositoryContribution(descriptor("octocat/Hello-World"), 8),
            AggregatedRepositoryContribution(descriptor("octocat/Spoon-Knife"), 2),
        )
    )

    result = stats.to_dict()

    assert stats.total_contributions == 10
    assert result["id"] == "MDQ6VXNlcjE="
    assert result["name"] == "The Octocat"
    assert [repo["nameWithOwner"] for repo in result["repositoriesContributedTo"]] == [
        "octocat/Hello-World",
        "octocat/Spoon-Knife",
    ]
