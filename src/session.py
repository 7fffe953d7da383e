"""
Dashboard Session.

Holds the loaded records, the active filter criteria and the filtered
subset, and rebuilds the dashboard data whenever the criteria change.
"""

import logging
from typing import Callable, List, Optional, Sequence

import httpx
import pandas as pd

from src.core.aggregation import build_snapshot
from src.core.export import export_csv, write_export
from src.core.filters import apply_filters
from src.core.loader import load_reviews
from src.core.parser import game_names
from src.core.table import game_detail, table_rows
from src.models.criteria import FilterCriteria
from src.models.review import ReviewRecord
from src.models.series import DashboardSnapshot, GameDetail
from src.utils.debounce import Debouncer
import config.settings as settings

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[DashboardSnapshot], None]


class DashboardSession:
    """
    Explicit context object for one loaded dataset.

    Flow on every criteria change:
    criteria → Filter Engine → filtered subset → Aggregators → on_update

    The record set is read-only after construction; the filtered subset is
    discarded and rebuilt on every recompute.
    """

    def __init__(
        self,
        records: Sequence[ReviewRecord],
        on_update: Optional[UpdateCallback] = None,
        search_delay: float = settings.SEARCH_DEBOUNCE_SECONDS
    ):
        """
        Initialize session.

        Args:
            records: All parsed records
            on_update: Called with the new snapshot after each recompute
            search_delay: Debounce delay for search changes, in seconds
        """
        self._records = tuple(records)
        self._criteria = FilterCriteria()
        self._filtered: List[ReviewRecord] = list(self._records)
        self._game_names = game_names(self._records)
        self.on_update = on_update
        self._search_debouncer = Debouncer(self.apply_filters, search_delay)

        logger.info(
            f"Initialized DashboardSession with {len(self._records)} reviews "
            f"across {len(self._game_names)} games"
        )

    @classmethod
    async def from_source(
        cls,
        source: str = settings.DEFAULT_DATA_SOURCE,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs
    ) -> "DashboardSession":
        """
        Load the CSV resource and start a session over it.

        Raises:
            DataLoadError: If the resource cannot be loaded
        """
        records = await load_reviews(source, client=client)
        return cls(records, **kwargs)

    @property
    def records(self) -> Sequence[ReviewRecord]:
        return self._records

    @property
    def filtered(self) -> List[ReviewRecord]:
        return list(self._filtered)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def game_names(self) -> List[str]:
        return list(self._game_names)

    @property
    def search_pending(self) -> bool:
        return self._search_debouncer.pending

    def apply_filters(self) -> DashboardSnapshot:
        """Rebuild the filtered subset and notify the listener."""
        self._filtered = apply_filters(self._records, self._criteria)
        snapshot = build_snapshot(self._filtered)

        if self.on_update is not None:
            self.on_update(snapshot)

        return snapshot

    def update_filters(self, **changes) -> DashboardSnapshot:
        """
        Change game/sentiment/rating/search and recompute immediately.

        Raises:
            ValueError: If a value is not a valid criterion
        """
        self._criteria = self._criteria.with_changes(**changes)
        return self.apply_filters()

    def set_search(self, term: str) -> None:
        """
        Change the search term; the recompute runs after the debounce delay.

        Must be called from within a running event loop; otherwise RuntimeError
        is raised and the criteria are left unchanged.
        """
        criteria = self._criteria.with_changes(search=term)
        self._search_debouncer.schedule()
        self._criteria = criteria

    def flush_search(self) -> None:
        """Run a pending debounced recompute now."""
        self._search_debouncer.flush()

    def reset_filters(self) -> DashboardSnapshot:
        """Clear every criterion and recompute."""
        self._search_debouncer.cancel()
        self._criteria = FilterCriteria()
        return self.apply_filters()

    def snapshot(self) -> DashboardSnapshot:
        """Aggregator output for the current filtered subset."""
        return build_snapshot(self._filtered)

    def game_detail(self, game_name: str) -> GameDetail:
        return game_detail(self._filtered, game_name)

    def table(self, limit: int = settings.TABLE_PREVIEW_ROWS) -> pd.DataFrame:
        return table_rows(self._filtered, limit=limit)

    def export_csv(self) -> str:
        return export_csv(self._filtered)

    def export_to(self, path: str) -> str:
        return write_export(self._filtered, path)
