"""
Chart-ready output models.

Plain containers returned by the aggregators and consumed by the
presentation layer. Every model converts to a JSON-serializable dict.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

Point = Tuple[float, float]


@dataclass
class SentimentCounts:
    positive: int = 0
    negative: int = 0

    def to_dict(self) -> dict:
        return {"positive": self.positive, "negative": self.negative}


@dataclass
class ConfidenceHistogram:
    """Review counts per confidence bucket, low to high."""
    labels: List[str]
    counts: List[int]

    @property
    def total(self) -> int:
        return sum(self.counts)

    def to_dict(self) -> dict:
        return {"labels": list(self.labels), "counts": list(self.counts)}


@dataclass
class GameBreakdown:
    """Positive/negative counts per game, sorted by game name."""
    labels: List[str] = field(default_factory=list)
    positive: List[int] = field(default_factory=list)
    negative: List[int] = field(default_factory=list)

    def groups(self) -> List[Dict]:
        """One {name, positive, negative} dict per game."""
        return [
            {"name": name, "positive": pos, "negative": neg}
            for name, pos, neg in zip(self.labels, self.positive, self.negative)
        ]

    def to_dict(self) -> dict:
        return {
            "labels": list(self.labels),
            "positive": list(self.positive),
            "negative": list(self.negative),
        }


@dataclass
class MonthlyTrend:
    """Positive/negative share per calendar month, oldest first."""
    labels: List[str] = field(default_factory=list)
    positive_percent: List[float] = field(default_factory=list)
    negative_percent: List[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "labels": list(self.labels),
            "positive_percent": list(self.positive_percent),
            "negative_percent": list(self.negative_percent),
        }


@dataclass
class ScatterSeries:
    """(x, y) points split by sentiment."""
    positive: List[Point] = field(default_factory=list)
    negative: List[Point] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "positive": [{"x": x, "y": y} for x, y in self.positive],
            "negative": [{"x": x, "y": y} for x, y in self.negative],
        }


@dataclass
class WordFrequency:
    word: str
    count: int
    frequency: float  # count relative to the most frequent word (0-1]

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count, "frequency": self.frequency}


@dataclass
class SummaryStatistics:
    total_reviews: int = 0
    total_games: int = 0
    positive_percent: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total_reviews": self.total_reviews,
            "total_games": self.total_games,
            "positive_percent": self.positive_percent,
        }


@dataclass
class GameDetail:
    """Drill-down statistics for one game within the filtered subset."""
    name: str
    total: int
    positive: int
    negative: int
    positive_percent: float
    negative_percent: float
    average_rating: float
    average_playtime: str  # formatted, e.g. "12h 5m"
    rating_distribution: List[int]  # counts for 1..5 stars

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "total": self.total,
            "positive": self.positive,
            "negative": self.negative,
            "positive_percent": self.positive_percent,
            "negative_percent": self.negative_percent,
            "average_rating": self.average_rating,
            "average_playtime": self.average_playtime,
            "rating_distribution": list(self.rating_distribution),
        }


@dataclass
class DashboardSnapshot:
    """
    Everything the presentation layer needs after one filter change.
    """
    statistics: SummaryStatistics
    sentiment: SentimentCounts
    confidence: ConfidenceHistogram
    games: GameBreakdown
    trend: MonthlyTrend
    rating_scatter: ScatterSeries
    playtime_scatter: ScatterSeries
    top_words: List[WordFrequency]

    def to_dict(self) -> dict:
        return {
            "statistics": self.statistics.to_dict(),
            "sentiment": self.sentiment.to_dict(),
            "confidence": self.confidence.to_dict(),
            "games": self.games.to_dict(),
            "trend": self.trend.to_dict(),
            "rating_scatter": self.rating_scatter.to_dict(),
            "playtime_scatter": self.playtime_scatter.to_dict(),
            "top_words": [w.to_dict() for w in self.top_words],
        }
