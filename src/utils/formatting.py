"""
Formatting helpers for table and detail views.
"""

import math
from typing import Union


def format_playtime(seconds: Union[int, float]) -> str:
    """
    Render a playtime in seconds as "2h 5m", "5m" or "42s".

    Fractional seconds (e.g. an average) are floored first.
    """
    seconds = int(seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    elif minutes > 0:
        return f"{minutes}m"
    return f"{seconds}s"


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length characters, appending "..." when shortened."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def star_rating(rating: Union[int, float]) -> str:
    """Five-slot star string; empty for ratings outside 0-5 or NaN."""
    if isinstance(rating, float) and math.isnan(rating):
        return ""
    if not 0 <= rating <= 5:
        return ""
    rating = int(rating)
    return "★" * rating + "☆" * (5 - rating)
