"""
Filter criteria model.

The set of values the presentation layer hands to the filter engine.
"""

from dataclasses import dataclass, replace
from typing import Union

ALL = "all"
SENTIMENTS = ("positive", "negative")
RATINGS = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Active dashboard filters.
    "all" (or an empty search) means the criterion is not applied.
    """
    game: str = ALL
    sentiment: str = ALL
    rating: Union[str, int] = ALL
    search: str = ""

    def __post_init__(self):
        # Validate sentiment
        if self.sentiment not in (ALL,) + SENTIMENTS:
            raise ValueError(
                f"Invalid sentiment: {self.sentiment}. Must be 'all', 'positive' or 'negative'"
            )

        # Normalize rating ("4" from a form field becomes 4)
        if self.rating != ALL:
            if isinstance(self.rating, bool):
                raise ValueError(f"Invalid rating: {self.rating}. Must be 'all' or 1-5")
            if isinstance(self.rating, float) and not self.rating.is_integer():
                raise ValueError(f"Invalid rating: {self.rating}. Must be 'all' or 1-5")
            try:
                rating = int(self.rating)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid rating: {self.rating}. Must be 'all' or 1-5")
            if rating not in RATINGS:
                raise ValueError(f"Invalid rating: {self.rating}. Must be 'all' or 1-5")
            object.__setattr__(self, "rating", rating)

        object.__setattr__(self, "search", (self.search or "").lower())

    @property
    def is_default(self) -> bool:
        """True when no criterion is active."""
        return self == FilterCriteria()

    def with_changes(self, **changes) -> "FilterCriteria":
        """Return a copy with the given fields replaced (validated again)."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "game": self.game,
            "sentiment": self.sentiment,
            "rating": self.rating,
            "search": self.search,
        }
