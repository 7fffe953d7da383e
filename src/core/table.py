"""
Table view and per-game detail.

Builds the review table shown under the charts and the drill-down
statistics for a single game.
"""

import logging
import math
from typing import List, Sequence

import pandas as pd

from src.models.review import ReviewRecord
from src.models.series import GameDetail
from src.utils.formatting import format_playtime, star_rating, truncate_text
import config.settings as settings

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ["Game", "Rating", "Sentiment", "Confidence", "Helpful", "Playtime", "Review"]


def table_rows(
    records: Sequence[ReviewRecord],
    limit: int = settings.TABLE_PREVIEW_ROWS,
    text_length: int = settings.TABLE_TEXT_LENGTH
) -> pd.DataFrame:
    """
    Display rows for the review table.

    Args:
        records: Filtered subset
        limit: Number of leading records to show
        text_length: Review text is truncated to this many characters

    Returns:
        DataFrame with TABLE_COLUMNS
    """
    rows = [
        {
            "Game": r.game_name,
            "Rating": star_rating(r.rating),
            "Sentiment": r.sentiment,
            "Confidence": f"{r.sentiment_confidence:.2f}",
            "Helpful": r.helpful,
            "Playtime": format_playtime(r.playtime),
            "Review": truncate_text(r.review_text, text_length),
        }
        for r in list(records)[:limit]
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def _share(part: int, total: int) -> float:
    return round(part / total * 100, 1) if total > 0 else 0.0


def game_detail(records: Sequence[ReviewRecord], game_name: str) -> GameDetail:
    """
    Drill-down statistics for one game within the filtered subset.

    Reviews with an unparseable rating are left out of the average rating
    and the rating distribution.
    """
    game_records = [r for r in records if r.game_name == game_name]
    total = len(game_records)
    positive = sum(1 for r in game_records if r.is_positive)
    negative = sum(1 for r in game_records if r.is_negative)

    ratings: List[int] = [
        int(r.rating) for r in game_records
        if not (isinstance(r.rating, float) and math.isnan(r.rating))
    ]
    average_rating = round(sum(ratings) / len(ratings), 1) if ratings else 0.0

    average_playtime = (
        sum(r.playtime for r in game_records) / total if total > 0 else 0
    )

    distribution = [0] * 5
    for rating in ratings:
        if 1 <= rating <= 5:
            distribution[rating - 1] += 1

    logger.debug(f"Built detail for {game_name}: {total} reviews")

    return GameDetail(
        name=game_name,
        total=total,
        positive=positive,
        negative=negative,
        positive_percent=_share(positive, total),
        negative_percent=_share(negative, total),
        average_rating=average_rating,
        average_playtime=format_playtime(average_playtime),
        rating_distribution=distribution
    )
