"""
Streak and Activity Calculation

Merges the dated events of all five domains into one set of active
calendar days and derives days-active and streak metrics from it.

Responsibilities:
- Collect date-bearing fields across domains
- Normalize them to calendar days, dropping unparsable values
- Calculate current and longest consecutive-day streaks
- Track streak milestones

Usage:
    from journey.services.progress.streak import calculate_streak_and_activity

    activity = calculate_streak_and_activity(records, today=date(2026, 10, 17))
    print(activity.current_streak)
"""

from datetime import date, timedelta
from typing import Optional

from journey.config import settings
from journey.enums.progress import ActivityDomain
from journey.models.progress import ActivitySummary
from journey.models.records import DomainRecords
from journey.services.progress.utils import to_calendar_day


def collect_activity_events(
    records: DomainRecords, tz: Optional[str] = None
) -> list[tuple[date, ActivityDomain]]:
    """
    Collect every dated event across domains as (day, domain) pairs.

    Sources:
    - Journal entry dates
    - Reading last_read
    - Task started_date
    - Task and library vocabulary date_added
    - Life arena last_updated

    Empty and unparsable values are skipped.

    Args:
        records: Raw domain collections.
        tz: Evaluation timezone override.

    Returns:
        list[tuple[date, ActivityDomain]]: One pair per dated event, in
            collection order.
    """
    raw: list[tuple[Optional[str], ActivityDomain]] = [
        *((e.date, ActivityDomain.JOURNAL) for e in records.journal_entries),
        *((r.last_read, ActivityDomain.READING) for r in records.reading_progress),
        *((t.started_date, ActivityDomain.TASKS) for t in records.tasks),
        *((w.date_added, ActivityDomain.VOCABULARY) for w in records.tasks_vocabulary),
        *((w.date_added, ActivityDomain.VOCABULARY) for w in records.library_vocabulary),
        *((a.last_updated, ActivityDomain.LIFE_ARENAS) for a in records.life_arenas),
    ]

    events = []
    for value, domain in raw:
        day = to_calendar_day(value, tz)
        if day is not None:
            events.append((day, domain))
    return events


def collect_activity_dates(records: DomainRecords, tz: Optional[str] = None) -> list[date]:
    """
    Distinct active days across all domains.

    Returns:
        list[date]: Unique activity days in descending order (most recent first).
    """
    return sorted({day for day, _ in collect_activity_events(records, tz)}, reverse=True)


def calculate_streak_and_activity(
    records: DomainRecords, today: date, tz: Optional[str] = None
) -> ActivitySummary:
    """
    Derive activity metrics from all domains.

    Args:
        records: Raw domain collections.
        today: Evaluation day. Never read from the clock here.
        tz: Evaluation timezone override.

    Returns:
        ActivitySummary. Start and last-activity dates fall back to today
        when there is no activity.
    """
    activity_dates = collect_activity_dates(records, tz)

    if not activity_dates:
        _, next_milestone = get_streak_milestones(0, 0)
        return ActivitySummary(
            start_date=today,
            last_activity_date=today,
            days_active=0,
            current_streak=0,
            longest_streak=0,
            milestones_reached=[],
            next_milestone=next_milestone,
        )

    current_streak = calculate_current_streak(activity_dates, today)
    longest_streak = calculate_longest_streak(activity_dates)
    reached, next_milestone = get_streak_milestones(longest_streak, current_streak)

    return ActivitySummary(
        start_date=activity_dates[-1],
        last_activity_date=activity_dates[0],
        days_active=len(activity_dates),
        current_streak=current_streak,
        longest_streak=longest_streak,
        milestones_reached=reached,
        next_milestone=next_milestone,
    )


def calculate_current_streak(activity_dates: list[date], today: date) -> int:
    """
    Consecutive active days ending today or yesterday.

    A run whose last day is older than yesterday is broken and scores 0.
    Days after today are ignored.

    Args:
        activity_dates: Distinct active days, most recent first.
        today: Evaluation day.

    Returns:
        Length of the live run, or 0.
    """
    expected = today if today in activity_dates else today - timedelta(days=1)
    streak = 0
    for day in activity_dates:
        if day > expected:
            continue
        if day < expected:
            break
        streak += 1
        expected -= timedelta(days=1)
    return streak


def calculate_longest_streak(activity_dates: list[date]) -> int:
    """Length of the longest run of consecutive days, in any order of input."""
    longest = 0
    run = 0
    previous: Optional[date] = None
    for day in sorted(set(activity_dates)):
        run = run + 1 if previous and day - previous == timedelta(days=1) else 1
        longest = max(longest, run)
        previous = day
    return longest


def get_streak_milestones(longest_streak: int, current_streak: int) -> tuple[list[int], Optional[int]]:
    """
    Milestones reached and the next one to aim for.

    Args:
        longest_streak: Best run ever, used for reached milestones.
        current_streak: Current run, used for the next milestone.

    Returns:
        tuple[list[int], Optional[int]]: Reached milestones and the next
            milestone above the current streak (None past the last one).
    """
    milestones = settings.STREAK_MILESTONES
    reached = [m for m in milestones if longest_streak >= m]
    next_milestone = next((m for m in milestones if m > current_streak), None)
    return reached, next_milestone
