"""
Activity History

Daily activity across all five domains for the journey heatmap.

Uses the same dated events as the streak calculator, tabulated with pandas
so each day carries its event count, the domains touched, and a 0-4 level
relative to the busiest day in the window.

Usage:
    from journey.services.progress.history import build_activity_history

    history = build_activity_history(records, today, weeks=26)
    for day in history.days:
        print(day.date, day.level)
"""

from datetime import date, timedelta
from typing import Optional

import pandas as pd

from journey.config import settings
from journey.enums.progress import ActivityDomain
from journey.models.progress import ActivityHistory, ActivityHistoryDay
from journey.models.records import DomainRecords
from journey.services.progress.streak import collect_activity_events

_DOMAIN_ORDER = [domain.value for domain in ActivityDomain]


def calculate_activity_level(count: int, max_count: int) -> int:
    """
    Heatmap intensity of a day: 0 when idle, else 1-4 by its share of the busiest day.

    Share cut-offs come from the ACTIVITY_LEVEL_* settings.
    """
    if not count or not max_count:
        return 0
    share = count / max_count
    for level, cutoff in (
        (4, settings.ACTIVITY_LEVEL_HIGH),
        (3, settings.ACTIVITY_LEVEL_MEDIUM_HIGH),
        (2, settings.ACTIVITY_LEVEL_MEDIUM),
    ):
        if share >= cutoff:
            return level
    return 1


def build_activity_history(
    records: DomainRecords,
    today: date,
    weeks: int = 52,
    tz: Optional[str] = None,
) -> ActivityHistory:
    """
    Build daily activity history for a trailing window.

    The window covers the `weeks * 7` days ending on (and including) today.
    Only days with at least one event are returned, oldest first.

    Args:
        records: Raw domain collections.
        today: Last day of the window.
        weeks: Number of weeks of history to return (default 52).
        tz: Evaluation timezone override.

    Returns:
        ActivityHistory with daily activity data.

    Raises:
        ValueError: If weeks is less than 1.
    """
    if weeks < 1:
        raise ValueError(f"weeks must be at least 1, got {weeks}")

    events = collect_activity_events(records, tz)
    if not events:
        return ActivityHistory()

    df = pd.DataFrame(
        [(day, domain.value) for day, domain in events], columns=["day", "domain"]
    )
    df["day"] = pd.to_datetime(df["day"])

    window_start = pd.Timestamp(today - timedelta(weeks=weeks) + timedelta(days=1))
    df = df[(df["day"] >= window_start) & (df["day"] <= pd.Timestamp(today))]
    if df.empty:
        return ActivityHistory()

    daily = (
        df.groupby("day")
        .agg(
            count=("domain", "size"),
            domains=("domain", "unique"),
        )
        .sort_index()
    )
    max_count = int(daily["count"].max())

    days = [
        ActivityHistoryDay(
            date=day.date(),
            count=int(row["count"]),
            domains=sorted(row["domains"], key=_DOMAIN_ORDER.index),
            level=calculate_activity_level(int(row["count"]), max_count),
        )
        for day, row in daily.iterrows()
    ]

    return ActivityHistory(
        days=days,
        total_active_days=len(days),
        total_events=int(daily["count"].sum()),
        max_daily_count=max_count,
        events_by_domain={
            domain: int(count) for domain, count in df["domain"].value_counts().items()
        },
    )
