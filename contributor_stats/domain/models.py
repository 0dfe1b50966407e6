"""Domain models representing contributors and their repository contributions."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class UserIdentity:
    """Stable identity of a GitHub user.

    ``name`` is the display name, which GitHub allows to be unset.
    """
    id: str
    name: Optional[str]


@dataclass(frozen=True)
class UserMetadata:
    """A user's identity plus every calendar year with recorded contributions."""
    id: str
    name: Optional[str]
    contribution_years: Tuple[int, ...]

    @property
    def identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, name=self.name)


@dataclass(frozen=True)
class RepositoryOwner:
    id: str
    avatar_url: str


@dataclass(frozen=True)
class RepositoryDescriptor:
    """Immutable description of a repository a user contributed to.

    ``name_with_owner`` is the identity; everything else is display metadata.
    """
    name_with_owner: str
    name: str
    url: str
    homepage_url: Optional[str]
    is_in_organization: bool
    stargazer_count: int
    open_graph_image_url: str
    owner: RepositoryOwner
    default_branch_commit_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Returns the repository in GitHub's GraphQL (camelCase) shape."""
        if self.default_branch_commit_count is None:
            default_branch_ref = None
        else:
            default_branch_ref = {
                "target": {"history": {"totalCount": self.default_branch_commit_count}}
            }
        return {
            "owner": {"id": self.owner.id, "avatarUrl": self.owner.avatar_url},
            "isInOrganization": self.is_in_organization,
            "url": self.url,
            "homepageUrl": self.homepage_url,
            "name": self.name,
            "nameWithOwner": self.name_with_owner,
            "stargazerCount": self.stargazer_count,
            "openGraphImageUrl": self.open_graph_image_url,
            "defaultBranchRef": default_branch_ref,
        }


@dataclass(frozen=True)
class RepositoryContributionRecord:
    """Commit contributions to one repository within one contribution year."""
    repository: RepositoryDescriptor
    total_count: int


@dataclass(frozen=True)
class AggregatedRepositoryContribution:
    """A repository with the user's contributions summed across all years."""
    repository: RepositoryDescriptor
    num_of_my_contributions: int

    @property
    def name_with_owner(self) -> str:
        return self.repository.name_with_owner

    def to_dict(self) -> Dict[str, Any]:
        result = self.repository.to_dict()
        result["numOfMyContributions"] = self.num_of_my_contributions
        return result


@dataclass(frozen=True)
class ContributorStats:
    """Final result of a contributor stats run."""
    id: str
    name: Optional[str]
    repositories_contributed_to: Tuple[AggregatedRepositoryContribution, ...]

    @property
    def total_contributions(self) -> int:
        return sum(repo.num_of_my_contributions for repo in self.repositories_contributed_to)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "repositoriesContributedTo": [
                repo.to_dict() for repo in self.repositories_contributed_to
            ],
        }
