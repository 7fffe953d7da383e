"""
CSV export of the filtered subset.
"""

import logging
import math
import os
from datetime import datetime, timezone
from typing import Sequence

from src.models.review import ReviewRecord

logger = logging.getLogger(__name__)

EXPORT_HEADER = [
    "Game", "Rating", "Sentiment", "Confidence", "Helpful",
    "Funny", "Playtime", "Review_Text", "Timestamp",
]


def iso_timestamp(timestamp: int) -> str:
    """
    Unix seconds as ISO-8601 UTC with milliseconds, e.g. 2023-11-14T22:13:20.000Z.

    Timestamps outside the datetime range give an empty string.
    """
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.debug(f"Timestamp {timestamp} out of range, exported as an empty cell")
        return ""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_value(value) -> str:
    """
    Render one export cell.

    Strings containing a comma are wrapped in double quotes (nothing else
    is escaped). Integral floats drop the trailing ".0".
    """
    if isinstance(value, str):
        return f'"{value}"' if "," in value else value
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
    return str(value)


def export_row(record: ReviewRecord) -> list:
    return [
        record.game_name,
        record.rating,
        record.sentiment,
        record.sentiment_confidence,
        record.helpful,
        record.funny,
        record.playtime,
        record.review_text,
        iso_timestamp(record.timestamp),
    ]


def export_csv(records: Sequence[ReviewRecord]) -> str:
    """
    Serialize records to the export CSV format.

    Returns an empty string when there is nothing to export.
    """
    if not records:
        return ""

    lines = [",".join(EXPORT_HEADER)]
    for record in records:
        lines.append(",".join(format_value(v) for v in export_row(record)))
    return "\n".join(lines)


def write_export(records: Sequence[ReviewRecord], path: str) -> str:
    """
    Write the export CSV to disk.

    Args:
        records: Filtered subset
        path: Destination file

    Returns:
        The path written
    """
    text = export_csv(records)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Exported {len(records)} reviews to {path}")
    except Exception as e:
        logger.error(f"Failed to export reviews to {path}: {e}")
        raise

    return path
