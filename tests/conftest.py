"""
Shared fixtures for SentiNik tests.
"""

import pytest

from src.core.parser import parse_csv
from src.models.review import ReviewRecord, game_name_for

SAMPLE_CSV = """game_id,rating,sentiment,sentiment_confidence,helpful,funny,playtime,timestamp,review_text,cleaned_text
1086940,5,positive,0.93,10,2,3600,1700000000,"Great game, loved it",great game loved it
1086940,2,negative,0.71,3,0,120,1700100000,Terrible experience,terrible experience
1716740,4,positive,0.55,0,1,0,1704067200,This game is GREAT,this game is great
1716740,1,negative,0.15,7,0,86400,1706745600,"Crashes, bugs, refunds",crashes bugs refunds
1245620,5,positive,0.88,22,5,540000,1706745600,Masterpiece of a game,masterpiece game
1245620,3,neutral,0.50,0,0,7200,1706745600,It is fine,fine
"""


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def sample_records():
    """Six parsed records across three games (one with an unknown sentiment)."""
    return parse_csv(SAMPLE_CSV)


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults."""
    def _make(
        game_id=1086940,
        rating=5,
        sentiment="positive",
        sentiment_confidence=0.9,
        helpful=0,
        funny=0,
        playtime=0,
        timestamp=1700000000,
        review_text="",
        cleaned_text=""
    ):
        return ReviewRecord(
            game_id=game_id,
            game_name=game_name_for(game_id),
            rating=rating,
            sentiment=sentiment,
            sentiment_confidence=sentiment_confidence,
            helpful=helpful,
            funny=funny,
            playtime=playtime,
            timestamp=timestamp,
            review_text=review_text,
            cleaned_text=cleaned_text
        )
    return _make
