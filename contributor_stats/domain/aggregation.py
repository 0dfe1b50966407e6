"""Merging of per-year repository contributions into one summary."""
import logging
from typing import Dict, Iterable, List
from contributor_stats.domain.models import (
    AggregatedRepositoryContribution,
    RepositoryContributionRecord,
    RepositoryDescriptor,
)


logger = logging.getLogger(__name__)


class _Accumulator:
    __slots__ = ("repository", "total")

    def __init__(self, repository: RepositoryDescriptor):
        self.repository = repository
        self.total = 0


def aggregate_contributions(
    contributions_by_year: Iterable[Iterable[RepositoryContributionRecord]]
) -> List[AggregatedRepositoryContribution]:
    """Merge per-year records into one entry per repository.

    Records are keyed by ``name_with_owner`` and their counts summed. The
    descriptor of the first record seen for a repository is the one kept;
    later records with different metadata (a renamed or re-starred repository)
    do not replace it. Output follows first-seen order.

    Args:
        contributions_by_year: One iterable of records per contribution year

    Returns:
        Aggregated contributions, unique by name_with_owner
    """
    accumulators: Dict[str, _Accumulator] = {}

    for year_records in contributions_by_year:
        for record in year_records:
            key = record.repository.name_with_owner
            accumulator = accumulators.get(key)
            if accumulator is None:
                accumulator = accumulators[key] = _Accumulator(record.repository)
            elif accumulator.repository != record.repository:
                logger.debug(f"Repository metadata for {key} differs across years; keeping first seen")
            accumulator.total += record.total_count

    return [
        AggregatedRepositoryContribution(
            repository=accumulator.repository,
            num_of_my_contributions=accumulator.total
        )
        for accumulator in accumulators.values()
    ]
