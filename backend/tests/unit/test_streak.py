"""
Unit tests for streak and activity calculation.

Tests the cross-domain activity metrics including:
- Current streak (live only through today or yesterday)
- Longest streak
- Streak milestones
- Event collection across domains
"""

from datetime import date, timedelta

import pytest

from journey.enums.progress import ActivityDomain
from journey.models.records import (
    DomainRecords,
    JournalEntry,
    LifeArena,
    SALTask,
    VocabularyWord,
)
from journey.services.progress.streak import (
    calculate_current_streak,
    calculate_longest_streak,
    calculate_streak_and_activity,
    collect_activity_dates,
    collect_activity_events,
    get_streak_milestones,
)

TODAY = date(2026, 10, 17)


def _days_ago(*offsets):
    return sorted((TODAY - timedelta(days=n) for n in offsets), reverse=True)


def _journal_on(*days):
    return DomainRecords(
        journal_entries=[
            JournalEntry(id=str(i), date=day.isoformat()) for i, day in enumerate(days)
        ]
    )


# ============================================================================
# Current streak
# ============================================================================


class TestCalculateCurrentStreak:
    """Tests for calculate_current_streak."""

    @pytest.mark.parametrize(
        "offsets,expected",
        [
            ((0, 1, 2), 3),
            ((2,), 0),
            ((1,), 1),
            ((1, 2, 3), 3),
            ((0, 1, 3, 4), 2),
            ((0,), 1),
            ((5, 6, 7), 0),
        ],
        ids=[
            "three_days_ending_today",
            "gap_at_today_and_yesterday",
            "yesterday_only",
            "ending_yesterday",
            "gap_breaks_run",
            "today_only",
            "old_run",
        ],
    )
    def test_streak_values(self, offsets, expected):
        streak = calculate_current_streak(_days_ago(*offsets), TODAY)

        assert streak == expected

    def test_days_after_today_skipped_before_run(self):
        """A skewed future day ahead of the run does not break the count."""
        dates = [TODAY + timedelta(days=1), *_days_ago(0, 1, 2)]

        assert calculate_current_streak(dates, TODAY) == 3

    def test_no_dates(self):
        assert calculate_current_streak([], TODAY) == 0

    def test_future_dates_ignored(self):
        """Days after today (device clock skew) do not extend or break a streak."""
        dates = [TODAY + timedelta(days=2), TODAY, TODAY - timedelta(days=1)]

        streak = calculate_current_streak(dates, TODAY)

        assert streak == 2


# ============================================================================
# Longest streak and milestones
# ============================================================================


class TestLongestStreak:
    """Tests for calculate_longest_streak."""

    def test_longest_run_anywhere(self):
        dates = _days_ago(0, 10, 11, 12, 13, 20, 21)

        assert calculate_longest_streak(dates) == 4

    def test_single_day(self):
        assert calculate_longest_streak([TODAY]) == 1

    def test_empty(self):
        assert calculate_longest_streak([]) == 0


class TestStreakMilestones:
    """Tests for get_streak_milestones."""

    @pytest.mark.parametrize(
        "longest,current,expected_reached,expected_next",
        [
            (0, 0, [], 7),
            (7, 7, [7], 30),
            (45, 3, [7, 30], 7),
            (400, 400, [7, 30, 100, 365], None),
        ],
        ids=["none", "first", "reached_from_longest", "all"],
    )
    def test_milestones(self, longest, current, expected_reached, expected_next):
        reached, next_milestone = get_streak_milestones(longest, current)

        assert reached == expected_reached
        assert next_milestone == expected_next


# ============================================================================
# Activity summary
# ============================================================================


class TestStreakAndActivity:
    """Tests for calculate_streak_and_activity and event collection."""

    def test_empty_records(self):
        """No activity gives zero days and falls back to today for dates."""
        result = calculate_streak_and_activity(DomainRecords(), TODAY)

        assert result.days_active == 0
        assert result.current_streak == 0
        assert result.longest_streak == 0
        assert result.start_date == TODAY
        assert result.last_activity_date == TODAY
        assert result.next_milestone == 7

    def test_days_counted_once_across_domains(self):
        """Events from several domains on one day make one active day."""
        records = DomainRecords(
            journal_entries=[JournalEntry(id="1", date="2026-10-17")],
            tasks=[SALTask(id=1, started_date="2026-10-17T06:00:00")],
            life_arenas=[LifeArena(name="Health", last_updated="2026-10-16T22:00:00Z")],
        )

        result = calculate_streak_and_activity(records, TODAY)

        assert result.days_active == 2
        assert result.current_streak == 2
        assert result.start_date == date(2026, 10, 16)
        assert result.last_activity_date == TODAY

    def test_unparsable_dates_dropped(self):
        records = DomainRecords(
            journal_entries=[
                JournalEntry(id="1", date="garbage"),
                JournalEntry(id="2", date=""),
                JournalEntry(id="3"),
            ]
        )

        result = calculate_streak_and_activity(records, TODAY)

        assert result.days_active == 0

    def test_timezone_shifts_calendar_day(self):
        """Offset-aware timestamps are bucketed in the evaluation timezone."""
        records = DomainRecords(
            journal_entries=[JournalEntry(id="1", date="2026-10-17T02:00:00Z")]
        )

        utc_days = collect_activity_dates(records, tz="UTC")
        ny_days = collect_activity_dates(records, tz="America/New_York")

        assert utc_days == [date(2026, 10, 17)]
        assert ny_days == [date(2026, 10, 16)]

    def test_events_labelled_by_domain(self):
        records = DomainRecords(
            journal_entries=[JournalEntry(id="1", date="2026-10-17")],
            library_vocabulary=[VocabularyWord(id="w1", date_added="2026-10-15")],
        )

        events = collect_activity_events(records)

        assert events == [
            (date(2026, 10, 17), ActivityDomain.JOURNAL),
            (date(2026, 10, 15), ActivityDomain.VOCABULARY),
        ]

    def test_sample_records(self, sample_records, today):
        result = calculate_streak_and_activity(sample_records, today)

        assert result.days_active == 4
        assert result.current_streak == 3
        assert result.longest_streak == 3
        assert result.start_date == date(2026, 10, 10)
        assert result.milestones_reached == []
        assert result.next_milestone == 7

    def test_week_streak_reaches_milestone(self):
        records = _journal_on(*_days_ago(*range(7)))

        result = calculate_streak_and_activity(records, TODAY)

        assert result.current_streak == 7
        assert result.milestones_reached == [7]
        assert result.next_milestone == 30
