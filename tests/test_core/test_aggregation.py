"""
Unit tests for the aggregators.
"""

import pytest

from src.core import aggregation
from src.core.aggregation import (
    build_snapshot,
    confidence_bucket,
    confidence_histogram,
    game_breakdown,
    monthly_trend,
    playtime_scatter,
    rating_scatter,
    sentiment_counts,
    summary_statistics,
    tokenize,
    top_words,
)


def test_sentiment_counts_ignore_other_values(sample_records):
    """Test only positive/negative are counted."""
    counts = sentiment_counts(sample_records)

    assert counts.positive == 3
    assert counts.negative == 2


@pytest.mark.parametrize("confidence,bucket", [
    (0.0, 0),
    (0.2, 0),
    (0.21, 1),
    (0.4, 1),
    (0.6, 2),
    (0.8, 3),
    (0.81, 4),
    (0.93, 4),
    (1.0, 4),
])
def test_confidence_bucket_boundaries(confidence, bucket):
    """Test buckets are right-inclusive except the last."""
    assert confidence_bucket(confidence) == bucket


def test_confidence_histogram_sums_to_total(sample_records):
    """Test every record lands in exactly one bucket."""
    histogram = confidence_histogram(sample_records)

    assert histogram.counts == [1, 0, 2, 1, 2]
    assert histogram.total == len(sample_records)
    assert histogram.labels[0] == "0.0-0.2"


def test_confidence_histogram_example(sample_records):
    """Test the 0.93 reference row increments the last bucket."""
    histogram = confidence_histogram(sample_records[:1])
    assert histogram.counts == [0, 0, 0, 0, 1]


def test_game_breakdown_same_game(make_record):
    """Test one positive and one negative review of a game form one group."""
    records = [
        make_record(sentiment="positive"),
        make_record(sentiment="negative"),
    ]

    breakdown = game_breakdown(records)

    assert breakdown.groups() == [
        {"name": "Baldur's Gate 3", "positive": 1, "negative": 1}
    ]


def test_game_breakdown_sorted(sample_records):
    """Test groups are ordered by game name."""
    breakdown = game_breakdown(sample_records)

    assert breakdown.labels == ["Baldur's Gate 3", "Elden Ring", "Starfield"]
    assert breakdown.positive == [1, 1, 1]
    assert breakdown.negative == [1, 0, 1]


def test_monthly_trend(sample_records):
    """Test monthly grouping, percentages and labels."""
    trend = monthly_trend(sample_records)

    assert trend.labels == ["Nov 2023", "Jan 2024", "Feb 2024"]
    assert trend.positive_percent == [50.0, 100.0, 50.0]
    assert trend.negative_percent == [50.0, 0.0, 50.0]


def test_monthly_trend_zero_total(make_record):
    """Test months with only unknown sentiments report 0%."""
    trend = monthly_trend([make_record(sentiment="neutral", timestamp=0)])

    assert trend.labels == ["Jan 1970"]
    assert trend.positive_percent == [0]
    assert trend.negative_percent == [0]


def test_monthly_trend_uses_utc(make_record):
    """Test a timestamp one second before a UTC month boundary stays in the old month."""
    trend = monthly_trend([make_record(timestamp=1704067199)])
    assert trend.labels == ["Dec 2023"]


def test_rating_scatter(sample_records):
    """Test rating/confidence points split by sentiment."""
    series = rating_scatter(sample_records)

    assert series.positive == [(5, 0.93), (4, 0.55), (5, 0.88)]
    assert series.negative == [(2, 0.71), (1, 0.15)]


def test_playtime_scatter_excludes_zero(make_record):
    """Test zero playtime is excluded even for a valid positive review."""
    records = [
        make_record(playtime=0, sentiment="positive", sentiment_confidence=0.9),
        make_record(playtime=3600, sentiment="positive", sentiment_confidence=0.8),
        make_record(playtime=60, sentiment="negative", sentiment_confidence=0.7),
    ]

    series = playtime_scatter(records)

    assert series.positive == [(3600, 0.8)]
    assert series.negative == [(60, 0.7)]


def test_tokenize_drops_noise():
    """Test short tokens, stop words and numbers are removed."""
    tokens = tokenize("The BEST rpg of 2023, and it is 100 percent fun!")
    assert tokens == ["best", "rpg", "percent", "fun"]


def test_top_words_positive_only(make_record):
    """Test only positive reviews feed the word cloud."""
    records = [
        make_record(sentiment="positive", cleaned_text="amazing story amazing combat"),
        make_record(sentiment="positive", cleaned_text="story rocks"),
        make_record(sentiment="negative", cleaned_text="broken broken broken broken"),
    ]

    words = top_words(records)

    assert [(w.word, w.count) for w in words] == [
        ("amazing", 2), ("story", 2), ("combat", 1), ("rocks", 1)
    ]
    assert words[0].frequency == 1.0
    assert words[2].frequency == 0.5


def test_top_words_limit(make_record):
    """Test the result is capped at the configured limit."""
    text = " ".join(f"word{chr(97 + i)}{chr(97 + j)}" for i in range(10) for j in range(10))
    words = top_words([make_record(cleaned_text=text)])

    assert len(words) == 50


def test_top_words_empty(make_record):
    """Test no positive words yields an empty list."""
    assert top_words([]) == []
    assert top_words([make_record(sentiment="negative", cleaned_text="bad")]) == []


def test_summary_statistics(sample_records):
    """Test header statistics."""
    stats = summary_statistics(sample_records)

    assert stats.total_reviews == 6
    assert stats.total_games == 3
    assert stats.positive_percent == 50.0


def test_summary_statistics_empty():
    """Test empty subsets do not divide by zero."""
    stats = summary_statistics([])
    assert stats.positive_percent == 0.0


def test_aggregators_are_idempotent(sample_records):
    """Test building the snapshot twice yields identical output."""
    assert build_snapshot(sample_records).to_dict() == build_snapshot(sample_records).to_dict()


def test_snapshot_contains_every_series(sample_records):
    """Test the snapshot dict exposes every chart input."""
    data = build_snapshot(sample_records).to_dict()

    assert set(data) == {
        "statistics", "sentiment", "confidence", "games", "trend",
        "rating_scatter", "playtime_scatter", "top_words",
    }
    assert data["rating_scatter"]["positive"][0] == {"x": 5, "y": 0.93}


def test_month_abbreviations():
    """Test month labels do not depend on the process locale."""
    assert aggregation.month_label(2024, 3) == "Mar 2024"


def test_rating_scatter_skips_nan_rating(make_record):
    """Test points without a numeric rating are left out so the snapshot stays strict JSON."""
    import json

    records = [
        make_record(rating=float("nan"), sentiment="positive"),
        make_record(rating=4, sentiment="positive", sentiment_confidence=0.7),
    ]

    series = rating_scatter(records)

    assert series.positive == [(4, 0.7)]
    json.dumps(build_snapshot(records).to_dict(), allow_nan=False)
