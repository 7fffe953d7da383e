"""
Review data model.

Represents one analyzed review row loaded from the dashboard CSV.
"""

import math
from dataclasses import dataclass
from typing import Union

import config.settings as settings

# game_id and rating use NaN when the CSV value has no leading integer
Numeric = Union[int, float]


def game_name_for(game_id: Numeric) -> str:
    """Map a Steam app id to a display name, falling back to "Game {id}"."""
    if isinstance(game_id, float) and math.isnan(game_id):
        return "Game NaN"
    return settings.GAME_NAMES.get(game_id, f"Game {game_id}")


@dataclass(frozen=True)
class ReviewRecord:
    """
    A single parsed review.
    Immutable once created; filtering only selects records, never edits them.
    """
    game_id: Numeric
    game_name: str
    rating: Numeric  # 1-5, NaN if unparseable
    sentiment: str  # "positive" or "negative"; other values are never counted
    sentiment_confidence: float  # 0.0-1.0
    helpful: int = 0
    funny: int = 0
    playtime: int = 0  # seconds
    timestamp: int = 0  # Unix seconds
    review_text: str = ""
    cleaned_text: str = ""

    @property
    def is_positive(self) -> bool:
        return self.sentiment == "positive"

    @property
    def is_negative(self) -> bool:
        return self.sentiment == "negative"
