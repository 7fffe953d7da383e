"""
Configuration settings for SentiNik.

Centralized configuration for loading, filtering, aggregation and export.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Data source (local path or http(s) URL)
DEFAULT_DATA_SOURCE = os.getenv(
    "SENTINIK_DATA_SOURCE",
    str(DATA_ROOT / "analyzed_reviews.csv")
)
DEFAULT_EXPORT_FILENAME = "sentiment_analysis_export.csv"

# Loading
REQUEST_TIMEOUT_SECONDS = 15

# Search input is debounced before the filtered subset is rebuilt
SEARCH_DEBOUNCE_SECONDS = 0.3

# Known Steam app ids. Anything else renders as "Game {id}".
GAME_NAMES = {
    1086940: "Baldur's Gate 3",
    1091500: "Cyberpunk 2077",
    1245620: "Elden Ring",
    1145360: "Hades",
    292030: "The Witcher 3",
    1174180: "Red Dead Redemption 2",
    1940340: "Darkest Dungeon 2",
    2651280: "Spider-Man 2",
    2050650: "Resident Evil 4 Remake",
    1716740: "Starfield",
}

# Confidence histogram (upper bounds, right-inclusive; last bucket is open)
CONFIDENCE_BUCKET_EDGES = (0.2, 0.4, 0.6, 0.8)
CONFIDENCE_BUCKET_LABELS = ("0.0-0.2", "0.2-0.4", "0.4-0.6", "0.6-0.8", "0.8-1.0")

# Word cloud
TOP_WORDS_LIMIT = 50
MIN_WORD_LENGTH = 3
STOP_WORDS = frozenset([
    "the", "and", "to", "is", "it", "in", "a", "of", "for", "on", "with",
    "as", "this", "that", "at", "by", "an", "be", "are", "or", "from",
    "have", "has", "had", "was", "were", "been", "will", "can", "but", "not",
    "you", "i", "we", "they", "he", "she", "them", "his", "her", "their",
    "our", "us",
])

# Data table
TABLE_PREVIEW_ROWS = 100
TABLE_TEXT_LENGTH = 50

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "sentinik.log"
