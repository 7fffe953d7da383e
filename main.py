"""
SentiNik - Review Sentiment Dashboard

CLI entry point: loads the analyzed reviews, applies filters and prints
the dashboard summaries.
"""

import argparse
import asyncio
import json
import logging
import sys

from src.core.loader import DataLoadError
from src.models.series import DashboardSnapshot
from src.session import DashboardSession
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SentiNik - Game Review Sentiment Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize all reviews
  python main.py --data data/analyzed_reviews.csv

  # Negative Starfield reviews mentioning "bug", exported to CSV
  python main.py --game Starfield --sentiment negative \\
                 --search bug --export output/starfield_bugs.csv

  # Full dashboard data as JSON
  python main.py --rating 5 --json
        """
    )

    parser.add_argument(
        "--data",
        default=settings.DEFAULT_DATA_SOURCE,
        help=f"CSV path or http(s) URL (default: {settings.DEFAULT_DATA_SOURCE})"
    )

    # Filters
    parser.add_argument("--game", default="all", help="Game name (default: all)")
    parser.add_argument(
        "--sentiment",
        default="all",
        choices=["all", "positive", "negative"],
        help="Sentiment filter (default: all)"
    )
    parser.add_argument("--rating", default="all", help="Rating 1-5 (default: all)")
    parser.add_argument("--search", default="", help="Case-insensitive text search")

    # Output
    parser.add_argument(
        "--export",
        nargs="?",
        const=str(settings.OUTPUT_ROOT / settings.DEFAULT_EXPORT_FILENAME),
        help="Write the filtered reviews to this CSV path "
             f"(default when given without a path: output/{settings.DEFAULT_EXPORT_FILENAME})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the dashboard snapshot as JSON instead of a report"
    )
    parser.add_argument(
        "--table-rows",
        type=int,
        default=10,
        help="Number of table rows to print (default: 10)"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )
    return parser


def print_report(session: DashboardSession, snapshot: DashboardSnapshot, table_rows: int):
    """Plain-text rendering of the dashboard."""
    stats = snapshot.statistics
    print(f"Reviews: {stats.total_reviews}   Games: {stats.total_games}   "
          f"Positive: {stats.positive_percent}%")
    print()

    print("Sentiment")
    print(f"  positive  {snapshot.sentiment.positive}")
    print(f"  negative  {snapshot.sentiment.negative}")
    print()

    print("Confidence")
    for label, count in zip(snapshot.confidence.labels, snapshot.confidence.counts):
        print(f"  {label}  {count}")
    print()

    print("Games")
    for group in snapshot.games.groups():
        print(f"  {group['name']:<28} +{group['positive']:<6} -{group['negative']}")
    print()

    print("Monthly trend (positive %)")
    for label, pct in zip(snapshot.trend.labels, snapshot.trend.positive_percent):
        print(f"  {label}  {pct:.1f}")
    print()

    if snapshot.top_words:
        print("Top words: " + ", ".join(w.word for w in snapshot.top_words[:15]))
        print()

    if table_rows > 0:
        table = session.table(limit=table_rows)
        if not table.empty:
            print(table.to_string(index=False))
            print()


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Loading reviews from {args.data}")
        session = asyncio.run(DashboardSession.from_source(args.data))
    except DataLoadError as e:
        logger.error(f"Data load failed: {e}")
        print(f"\n❌ Failed to load data: {e}")
        sys.exit(1)

    try:
        snapshot = session.update_filters(
            game=args.game,
            sentiment=args.sentiment,
            rating=args.rating,
            search=args.search
        )
    except ValueError as e:
        logger.error(f"Invalid filter: {e}")
        print(f"\n❌ Invalid filter: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2))
    else:
        print("=" * 60)
        print("SentiNik - Game Review Sentiment Dashboard")
        print("=" * 60)
        print(f"Filters: {session.criteria.to_dict()}")
        print("=" * 60)
        print_report(session, snapshot, args.table_rows)

    if args.export:
        try:
            path = session.export_to(args.export)
        except (OSError, ValueError) as e:
            logger.error(f"Export failed: {e}")
            print(f"\n❌ Export failed: {e}")
            sys.exit(1)
        print(f"Exported {len(session.filtered)} reviews to {path}")

    sys.exit(0)


if __name__ == "__main__":
    main()
