"""
Progress Aggregation Service

The single entry point presentation code uses to get journey progress.

Responsibilities:
- Load the six raw collections (each independently fallible)
- Run the five domain calculators
- Run the streak and activity calculator
- Score overall completion
- Assemble the JourneyProgress snapshot

aggregate_progress() is a pure function of its records and the evaluation
day: calling it twice with the same inputs gives equal snapshots. The
ProgressAggregator service adds storage access around it and re-reads the
store on every call, so a snapshot is never staler than the last action.

Usage:
    from journey.services.progress import ProgressAggregator

    aggregator = ProgressAggregator(store)
    progress = await aggregator.get_progress()
    payload = progress.to_payload()  # camelCase dict for the dashboard
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from journey.db.store import RecordStore
from journey.models.progress import Achievement, ActivityHistory, JourneyProgress
from journey.models.records import BookCatalogEntry, DomainRecords
from journey.services.progress.achievements import get_achievements
from journey.services.progress.calculators import (
    calculate_journal_progress,
    calculate_life_arenas_progress,
    calculate_reading_progress,
    calculate_tasks_progress,
    calculate_vocabulary_progress,
)
from journey.services.progress.completion import calculate_completion_breakdown
from journey.services.progress.history import build_activity_history
from journey.services.progress.loader import load_domain_records, parse_domain_records
from journey.services.progress.streak import calculate_streak_and_activity
from journey.services.progress.utils import today_in_timezone

logger = logging.getLogger(__name__)


def aggregate_progress(
    records: DomainRecords,
    today: date,
    books: Optional[Sequence[BookCatalogEntry]] = None,
    tz: Optional[str] = None,
) -> JourneyProgress:
    """
    Reduce the raw collections of all five domains into one snapshot.

    Inputs are never mutated. Every collection may be empty.

    Args:
        records: Raw domain collections.
        today: Evaluation day for streak calculation.
        books: Reading catalog override (default: configured catalog).
        tz: Evaluation timezone override (default: settings.TIMEZONE).

    Returns:
        JourneyProgress snapshot.
    """
    journal = calculate_journal_progress(records.journal_entries)
    reading = calculate_reading_progress(records.reading_progress, books)
    tasks = calculate_tasks_progress(records.tasks)
    vocabulary = calculate_vocabulary_progress(
        records.tasks_vocabulary, records.library_vocabulary
    )
    arenas = calculate_life_arenas_progress(records.life_arenas)

    activity = calculate_streak_and_activity(records, today, tz)
    completion = calculate_completion_breakdown(journal, reading, tasks, vocabulary, arenas)

    return JourneyProgress(
        overall_completion=completion.overall,
        start_date=activity.start_date,
        days_active=activity.days_active,
        current_streak=activity.current_streak,
        longest_streak=activity.longest_streak,
        next_streak_milestone=activity.next_milestone,
        last_activity_date=activity.last_activity_date,
        completion=completion,
        books_progress=reading,
        journal_progress=journal,
        tasks_progress=tasks,
        vocabulary_progress=vocabulary,
        life_arenas_progress=arenas,
    )


def aggregate_raw_collections(
    raw_by_key: Mapping[str, Any],
    today: date,
    books: Optional[Sequence[BookCatalogEntry]] = None,
    tz: Optional[str] = None,
) -> JourneyProgress:
    """
    Parse raw collections keyed by storage key, then aggregate them.

    Malformed collections are treated as empty; see parse_domain_records().
    """
    return aggregate_progress(parse_domain_records(raw_by_key), today, books, tz)


class ProgressAggregator:
    """
    Progress aggregation service over a record store.

    Each call reloads all collections from the store; there is no cache.
    The evaluation day defaults to today in settings.TIMEZONE but can be
    passed explicitly for reproducible results.
    """

    def __init__(
        self,
        store: RecordStore,
        books: Optional[Sequence[BookCatalogEntry]] = None,
        tz: Optional[str] = None,
    ):
        """
        Initialize the aggregator.

        Args:
            store: Record store holding the raw collections.
            books: Reading catalog override.
            tz: Evaluation timezone override.
        """
        self.store = store
        self.books = books
        self.tz = tz

    def _resolve_today(self, today: Optional[date]) -> date:
        return today or today_in_timezone(self.tz)

    async def get_progress(self, today: Optional[date] = None) -> JourneyProgress:
        """
        Get the current journey progress snapshot.

        Args:
            today: Evaluation day (default: today in the configured timezone).

        Returns:
            JourneyProgress built from the latest stored records.
        """
        today = self._resolve_today(today)
        records = await load_domain_records(self.store)
        progress = aggregate_progress(records, today, self.books, self.tz)

        logger.debug(
            f"Aggregated progress for {today}: {progress.overall_completion}% complete, "
            f"{progress.days_active} active days, streak {progress.current_streak}"
        )
        return progress

    async def get_achievements(self, today: Optional[date] = None) -> list[Achievement]:
        """Get earned achievements for the current progress, newest first."""
        return get_achievements(await self.get_progress(today))

    async def get_activity_history(
        self, weeks: int = 52, today: Optional[date] = None
    ) -> ActivityHistory:
        """
        Get daily activity across all domains for the journey heatmap.

        Args:
            weeks: Number of trailing weeks to include (default 52).
            today: Last day of the window.

        Returns:
            ActivityHistory for the window.
        """
        today = self._resolve_today(today)
        records = await load_domain_records(self.store)
        return build_activity_history(records, today, weeks=weeks, tz=self.tz)
