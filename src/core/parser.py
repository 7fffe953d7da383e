"""
CSV Parser.

Turns raw dashboard CSV text into typed ReviewRecord objects.
"""

import logging
import math
import re
from typing import Dict, List, Optional

from src.models.review import ReviewRecord, Numeric, game_name_for

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def split_csv_line(line: str) -> List[str]:
    """
    Split one CSV line into raw field values.

    A double quote toggles the in-quotes state and is not kept; commas
    inside quotes are literal. Escaped quotes ("") are not recognised.
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_int(value: str) -> Optional[int]:
    """Parse the leading integer of value ("12abc" -> 12, "3.7" -> 3)."""
    match = _LEADING_INT.match(value or "")
    if not match:
        return None
    return int(match.group(1))


def parse_float(value: str) -> Optional[float]:
    """Parse the leading decimal number of value."""
    match = _LEADING_FLOAT.match(value or "")
    if not match:
        return None
    return float(match.group(1))


def _int_or_nan(value: str) -> Numeric:
    parsed = parse_int(value)
    return math.nan if parsed is None else parsed


def _int_or_zero(value: str) -> int:
    return parse_int(value) or 0


def _float_or_zero(value: str) -> float:
    parsed = parse_float(value)
    if parsed is None or math.isnan(parsed):
        return 0.0
    return parsed


def build_record(row: Dict[str, str]) -> ReviewRecord:
    """
    Build a typed record from one header->value row.

    game_id and rating become NaN when unparseable; every other numeric
    field falls back to zero.
    """
    game_id = _int_or_nan(row.get("game_id", ""))

    return ReviewRecord(
        game_id=game_id,
        game_name=game_name_for(game_id),
        rating=_int_or_nan(row.get("rating", "")),
        sentiment=row.get("sentiment", ""),
        sentiment_confidence=_float_or_zero(row.get("sentiment_confidence", "")),
        helpful=_int_or_zero(row.get("helpful", "")),
        funny=_int_or_zero(row.get("funny", "")),
        playtime=_int_or_zero(row.get("playtime", "")),
        timestamp=_int_or_zero(row.get("timestamp", "")),
        review_text=row.get("review_text", ""),
        cleaned_text=row.get("cleaned_text", ""),
    )


def parse_csv(csv_text: str) -> List[ReviewRecord]:
    """
    Parse dashboard CSV text.

    The first line is the header (plain comma split). Data lines whose
    field count differs from the header are skipped.

    Args:
        csv_text: Full CSV document

    Returns:
        Records in input line order
    """
    lines = csv_text.strip().split("\n")
    headers = [h.strip() for h in lines[0].split(",")]

    records = []
    skipped = 0

    for line in lines[1:]:
        values = split_csv_line(line)
        if len(values) != len(headers):
            skipped += 1
            continue

        row = {header: value.strip() for header, value in zip(headers, values)}
        records.append(build_record(row))

    if skipped:
        logger.debug(f"Skipped {skipped} lines with mismatched field count")

    logger.info(f"Parsed {len(records)} reviews from {len(lines) - 1} data lines")
    return records


def game_names(records: List[ReviewRecord]) -> List[str]:
    """Sorted unique game names (the choices for the game filter)."""
    return sorted({r.game_name for r in records})
