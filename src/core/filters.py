"""
Filter Engine.

Selects the records matching the active dashboard criteria.
"""

import logging
from typing import List, Sequence

from src.models.criteria import ALL, FilterCriteria
from src.models.review import ReviewRecord

logger = logging.getLogger(__name__)


def matches(record: ReviewRecord, criteria: FilterCriteria) -> bool:
    """True if the record satisfies every active criterion."""
    # Game filter
    if criteria.game != ALL and record.game_name != criteria.game:
        return False

    # Sentiment filter
    if criteria.sentiment != ALL and record.sentiment != criteria.sentiment:
        return False

    # Rating filter (NaN ratings never match)
    if criteria.rating != ALL and record.rating != criteria.rating:
        return False

    # Search filter
    if criteria.search and criteria.search not in record.review_text.lower():
        return False

    return True


def apply_filters(
    records: Sequence[ReviewRecord],
    criteria: FilterCriteria
) -> List[ReviewRecord]:
    """
    Rebuild the filtered subset from the full record set.

    Args:
        records: All loaded records
        criteria: Active filter criteria

    Returns:
        New list of matching records, in original order
    """
    filtered = [r for r in records if matches(r, criteria)]

    logger.debug(
        f"Filtered {len(records)} reviews to {len(filtered)} "
        f"(criteria: {criteria.to_dict()})"
    )
    return filtered
