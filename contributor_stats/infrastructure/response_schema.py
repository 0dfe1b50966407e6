"""Typed decoding of GitHub GraphQL responses into domain entities.

Every payload is validated on receipt; a shape mismatch raises
ResponseDecodeError instead of leaking a KeyError or TypeError.
"""
from collections.abc import Mapping
from typing import Any, List, Optional
from contributor_stats.domain.errors import ResponseDecodeError, UserNotFoundError
from contributor_stats.domain.models import (
    RepositoryContributionRecord,
    RepositoryDescriptor,
    RepositoryOwner,
    UserMetadata,
)


def _mapping(value: Any, path: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ResponseDecodeError(f"Expected object at '{path}', got {type(value).__name__}")
    return value


def _list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise ResponseDecodeError(f"Expected list at '{path}', got {type(value).__name__}")
    return value


def _str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ResponseDecodeError(f"Expected string at '{path}', got {type(value).__name__}")
    return value


def _optional_str(value: Any, path: str) -> Optional[str]:
    return None if value is None else _str(value, path)


def _int(value: Any, path: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResponseDecodeError(f"Expected integer at '{path}', got {type(value).__name__}")
    return value


def _bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise ResponseDecodeError(f"Expected boolean at '{path}', got {type(value).__name__}")
    return value


def _user(data: Any, username: str) -> Mapping:
    user = _mapping(data, "data").get("user")
    if user is None:
        raise UserNotFoundError(f"GitHub user '{username}' not found")
    return _mapping(user, "user")


def parse_user_metadata(data: Any, username: str) -> UserMetadata:
    """Decode the result of the user metadata query.

    Args:
        data: The ``data`` object of the GraphQL response
        username: Login the query was issued for

    Raises:
        UserNotFoundError: When ``user`` is null
        ResponseDecodeError: When the payload shape is unexpected
    """
    user = _user(data, username)
    collection = _mapping(user.get("contributionsCollection"), "user.contributionsCollection")
    years = _list(
        collection.get("contributionYears"),
        "user.contributionsCollection.contributionYears"
    )
    return UserMetadata(
        id=_str(user.get("id"), "user.id"),
        name=_optional_str(user.get("name"), "user.name"),
        contribution_years=tuple(
            _int(year, f"user.contributionsCollection.contributionYears[{index}]")
            for index, year in enumerate(years)
        )
    )


def _default_branch_commit_count(value: Any, path: str) -> Optional[int]:
    # Empty repositories have no default branch; non-commit targets decode to {}
    if value is None:
        return None
    target = _mapping(value, path).get("target")
    if target is None:
        return None
    history = _mapping(target, f"{path}.target").get("history")
    if history is None:
        return None
    return _int(_mapping(history, f"{path}.target.history").get("totalCount"),
                f"{path}.target.history.totalCount")


def parse_repository(value: Any, path: str = "repository") -> RepositoryDescriptor:
    """Decode a repository object into a RepositoryDescriptor."""
    repository = _mapping(value, path)
    owner = _mapping(repository.get("owner"), f"{path}.owner")
    return RepositoryDescriptor(
        name_with_owner=_str(repository.get("nameWithOwner"), f"{path}.nameWithOwner"),
        name=_str(repository.get("name"), f"{path}.name"),
        url=_str(repository.get("url"), f"{path}.url"),
        homepage_url=_optional_str(repository.get("homepageUrl"), f"{path}.homepageUrl"),
        is_in_organization=_bool(repository.get("isInOrganization"), f"{path}.isInOrganization"),
        stargazer_count=_int(repository.get("stargazerCount"), f"{path}.stargazerCount"),
        open_graph_image_url=_str(
            repository.get("openGraphImageUrl"), f"{path}.openGraphImageUrl"
        ),
        owner=RepositoryOwner(
            id=_str(owner.get("id"), f"{path}.owner.id"),
            avatar_url=_str(owner.get("avatarUrl"), f"{path}.owner.avatarUrl")
        ),
        default_branch_commit_count=_default_branch_commit_count(
            repository.get("defaultBranchRef"), f"{path}.defaultBranchRef"
        )
    )


def parse_year_contributions(data: Any, username: str) -> List[RepositoryContributionRecord]:
    """Decode the result of one per-year contributions query.

    Args:
        data: The ``data`` object of the GraphQL response
        username: Login the query was issued for

    Raises:
        UserNotFoundError: When ``user`` is null
        ResponseDecodeError: When the payload shape is unexpected
    """
    user = _user(data, username)
    collection = _mapping(user.get("contributionsCollection"), "user.contributionsCollection")
    path = "user.contributionsCollection.commitContributionsByRepository"
    entries = _list(collection.get("commitContributionsByRepository"), path)

    records = []
    for index, raw_entry in enumerate(entries):
        entry_path = f"{path}[{index}]"
        entry = _mapping(raw_entry, entry_path)
        contributions = _mapping(entry.get("contributions"), f"{entry_path}.contributions")
        total_count = _int(contributions.get("totalCount"), f"{entry_path}.contributions.totalCount")
        if total_count < 0:
            raise ResponseDecodeError(
                f"Negative contribution count at '{entry_path}.contributions.totalCount'"
            )
        records.append(
            RepositoryContributionRecord(
                repository=parse_repository(entry.get("repository"), f"{entry_path}.repository"),
                total_count=total_count
            )
        )
    return records
