"""
Aggregators.

Pure functions that turn the filtered subset into chart-ready summaries.
None of them mutate their input, and calling one twice on the same subset
gives the same result.
"""

import logging
import math
import re
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from src.models.review import ReviewRecord
from src.models.series import (
    ConfidenceHistogram,
    DashboardSnapshot,
    GameBreakdown,
    MonthlyTrend,
    ScatterSeries,
    SentimentCounts,
    SummaryStatistics,
    WordFrequency,
)
import config.settings as settings

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_WORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)
_DIGITS_PATTERN = re.compile(r"^\d+$", re.ASCII)


def sentiment_counts(records: Sequence[ReviewRecord]) -> SentimentCounts:
    """Count positive and negative reviews. Other sentiments are ignored."""
    counts = SentimentCounts()
    for r in records:
        if r.is_positive:
            counts.positive += 1
        elif r.is_negative:
            counts.negative += 1
    return counts


def confidence_bucket(confidence: float) -> int:
    """Index of the histogram bucket for a confidence value (0-4)."""
    for index, upper in enumerate(settings.CONFIDENCE_BUCKET_EDGES):
        if confidence <= upper:
            return index
    return len(settings.CONFIDENCE_BUCKET_EDGES)


def confidence_histogram(records: Sequence[ReviewRecord]) -> ConfidenceHistogram:
    """Histogram of sentiment confidence over five fixed buckets."""
    counts = [0] * len(settings.CONFIDENCE_BUCKET_LABELS)
    for r in records:
        counts[confidence_bucket(r.sentiment_confidence)] += 1
    return ConfidenceHistogram(
        labels=list(settings.CONFIDENCE_BUCKET_LABELS),
        counts=counts
    )


def game_breakdown(records: Sequence[ReviewRecord]) -> GameBreakdown:
    """
    Positive/negative counts per game.

    Every game present in records gets a group, even if none of its
    reviews are positive or negative. Groups are sorted by name.
    """
    stats: Dict[str, SentimentCounts] = {}
    for r in records:
        counts = stats.setdefault(r.game_name, SentimentCounts())
        if r.is_positive:
            counts.positive += 1
        elif r.is_negative:
            counts.negative += 1

    labels = sorted(stats)
    return GameBreakdown(
        labels=labels,
        positive=[stats[name].positive for name in labels],
        negative=[stats[name].negative for name in labels]
    )


def _utc_month(timestamp: int) -> Optional[Tuple[int, int]]:
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.debug(f"Timestamp {timestamp} out of range, skipped in trend")
        return None
    return moment.year, moment.month


def month_label(year: int, month: int) -> str:
    """Short English label such as "Nov 2023"."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year:04d}"


def _percent(part: int, total: int) -> float:
    return part / total * 100 if total > 0 else 0


def monthly_trend(records: Sequence[ReviewRecord]) -> MonthlyTrend:
    """
    Share of positive and negative reviews per UTC calendar month.

    Percentages are relative to positive + negative in that month and
    are 0 for months without either.
    """
    monthly: Dict[Tuple[int, int], SentimentCounts] = {}
    for r in records:
        key = _utc_month(r.timestamp)
        if key is None:
            continue
        counts = monthly.setdefault(key, SentimentCounts())
        if r.is_positive:
            counts.positive += 1
        elif r.is_negative:
            counts.negative += 1

    trend = MonthlyTrend()
    for key in sorted(monthly):
        counts = monthly[key]
        total = counts.positive + counts.negative
        trend.labels.append(month_label(*key))
        trend.positive_percent.append(_percent(counts.positive, total))
        trend.negative_percent.append(_percent(counts.negative, total))

    return trend


def rating_scatter(records: Sequence[ReviewRecord]) -> ScatterSeries:
    """(rating, confidence) points split by sentiment; unparseable ratings are left out."""
    series = ScatterSeries()
    for r in records:
        if isinstance(r.rating, float) and math.isnan(r.rating):
            continue
        point = (r.rating, r.sentiment_confidence)
        if r.is_positive:
            series.positive.append(point)
        elif r.is_negative:
            series.negative.append(point)
    return series


def playtime_scatter(records: Sequence[ReviewRecord]) -> ScatterSeries:
    """(playtime, confidence) points split by sentiment; zero playtime is left out."""
    series = ScatterSeries()
    for r in records:
        if r.playtime <= 0:
            continue
        point = (r.playtime, r.sentiment_confidence)
        if r.is_positive:
            series.positive.append(point)
        elif r.is_negative:
            series.negative.append(point)
    return series


def tokenize(text: str) -> List[str]:
    """
    Lower-cased word tokens worth showing in the word cloud.

    Drops short tokens, stop words and pure numbers.
    """
    tokens = _WORD_PATTERN.findall(text.lower())
    return [
        token for token in tokens
        if len(token) >= settings.MIN_WORD_LENGTH
        and token not in settings.STOP_WORDS
        and not _DIGITS_PATTERN.match(token)
    ]


def top_words(
    records: Sequence[ReviewRecord],
    limit: int = settings.TOP_WORDS_LIMIT
) -> List[WordFrequency]:
    """
    Most frequent words in positive reviews.

    Args:
        records: Filtered subset
        limit: Maximum number of words to return

    Returns:
        Words by descending count (ties keep first-seen order), each with
        frequency relative to the most common word
    """
    word_counts = Counter()
    for r in records:
        if r.is_positive:
            word_counts.update(tokenize(r.cleaned_text))

    if not word_counts:
        return []

    max_count = max(word_counts.values())
    return [
        WordFrequency(word=word, count=count, frequency=count / max_count)
        for word, count in word_counts.most_common(limit)
    ]


def summary_statistics(records: Sequence[ReviewRecord]) -> SummaryStatistics:
    """Header numbers: review count, distinct games, positive share."""
    total = len(records)
    positive = sum(1 for r in records if r.is_positive)
    return SummaryStatistics(
        total_reviews=total,
        total_games=len({r.game_name for r in records}),
        positive_percent=round(positive / total * 100, 1) if total > 0 else 0.0
    )


def build_snapshot(records: Sequence[ReviewRecord]) -> DashboardSnapshot:
    """Run every aggregator over the filtered subset."""
    return DashboardSnapshot(
        statistics=summary_statistics(records),
        sentiment=sentiment_counts(records),
        confidence=confidence_histogram(records),
        games=game_breakdown(records),
        trend=monthly_trend(records),
        rating_scatter=rating_scatter(records),
        playtime_scatter=playtime_scatter(records),
        top_words=top_words(records)
    )
