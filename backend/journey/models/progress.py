"""
Progress Snapshot Models (Pydantic)

Derived, read-only summaries produced by the progress engine:
- One summary per tracked domain
- Per-domain completion percentages
- The aggregate JourneyProgress snapshot
- Achievements and activity-history heatmap data

ARCHITECTURE NOTE:
    Nothing in this module is persisted. Every model is rebuilt from the
    raw records on each aggregation call, so two calls over the same
    records and the same evaluation day produce equal snapshots.

    Data flows: Storage → RecordModel → Calculators → SnapshotModel → UI
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from journey.enums.progress import ActivityDomain, AchievementCategory
from journey.models.base import SnapshotModel


# ===========================================
# Domain Summaries
# ===========================================


class JournalProgress(SnapshotModel):
    """
    Journal writing summary.

    Pages are derived from word counts (250 words per page by default) so
    that long and short entries are weighted by how much was written.
    """

    pages_written: int = 0
    target_pages: int = 0
    entries_count: int = 0
    total_words: int = 0
    average_words_per_entry: int = 0
    last_entry_date: Optional[str] = None
    entries_by_type: dict[str, int] = Field(default_factory=dict)


class ReadingProgressData(SnapshotModel):
    """
    Reading summary measured against the SAL book catalog.

    total_chapters comes from the catalog, not from the progress records.
    """

    total_books: int = 0
    completed_books: int = 0
    current_book_id: Optional[str] = None
    chapters_completed: int = 0
    total_chapters: int = 0
    total_reading_time: float = 0
    average_reading_time: int = 0
    last_read_date: Optional[str] = None
    books_in_progress: int = 0


class TasksProgress(SnapshotModel):
    """SAL Challenge task summary. Times are in minutes."""

    completed_tasks: int = 0
    total_tasks: int = 0
    in_progress_tasks: int = 0
    total_time_spent: float = 0
    tasks_by_category: dict[str, int] = Field(default_factory=dict)
    tasks_by_status: dict[str, int] = Field(default_factory=dict)
    average_time_per_task: int = 0
    last_task_update: Optional[str] = None


class VocabularyProgress(SnapshotModel):
    """
    Vocabulary summary across task-captured and library words.

    Mastery counts cover library words only; task-captured words have no
    mastery state.
    """

    tasks_vocabulary: int = 0
    library_vocabulary: int = 0
    total_words: int = 0
    words_mastered: int = 0
    words_learning: int = 0
    words_familiar: int = 0
    words_new: int = 0
    mastery_percentage: int = Field(0, ge=0, le=100)
    average_review_count: int = 0
    last_word_added: Optional[str] = None


class LifeArenasProgress(SnapshotModel):
    """Life arenas summary. overall_score is on the 0-10 arena scale."""

    overall_score: float = 0
    highest_arena: Optional[str] = None
    lowest_arena: Optional[str] = None
    total_milestones: int = 0
    completed_milestones: int = 0
    arena_scores: dict[str, float] = Field(default_factory=dict)
    last_arena_update: Optional[str] = None
    average_arena_score: float = 0


# ===========================================
# Streak & Completion
# ===========================================


class ActivitySummary(SnapshotModel):
    """
    Cross-domain activity metrics.

    start_date and last_activity_date fall back to the evaluation day when
    there is no activity at all.
    """

    start_date: date
    last_activity_date: date
    days_active: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    # Milestones
    milestones_reached: list[int] = Field(default_factory=list)  # e.g., [7, 30]
    next_milestone: Optional[int] = None


class CompletionBreakdown(SnapshotModel):
    """
    Per-domain completion percentages, each clamped to [0, 100].

    overall is the unweighted mean of the five, rounded half-up.
    """

    journal: float = Field(0, ge=0, le=100)
    books: float = Field(0, ge=0, le=100)
    tasks: float = Field(0, ge=0, le=100)
    vocabulary: float = Field(0, ge=0, le=100)
    arenas: float = Field(0, ge=0, le=100)
    overall: int = Field(0, ge=0, le=100)


class JourneyProgress(SnapshotModel):
    """
    The aggregate progress snapshot.

    Sole output of the progress aggregator and the only progress shape
    presentation code consumes.
    """

    overall_completion: int = Field(0, ge=0, le=100)
    start_date: date
    days_active: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    next_streak_milestone: Optional[int] = None
    last_activity_date: date
    completion: CompletionBreakdown
    books_progress: ReadingProgressData
    journal_progress: JournalProgress
    tasks_progress: TasksProgress
    vocabulary_progress: VocabularyProgress
    life_arenas_progress: LifeArenasProgress


# ===========================================
# Achievements
# ===========================================


class Achievement(SnapshotModel):
    """An earned badge. date_earned is the raw date of the qualifying event."""

    id: str
    title: str
    description: str
    icon: str
    date_earned: Optional[str] = None
    category: AchievementCategory


# ===========================================
# Activity History
# ===========================================


class ActivityHistoryDay(SnapshotModel):
    """
    Single day of activity for the journey heatmap.

    level is 0-4 relative to the busiest day in the window.
    """

    date: date
    count: int = Field(0, description="Number of dated events on this day")
    domains: list[ActivityDomain] = Field(default_factory=list)
    level: int = Field(0, ge=0, le=4, description="Activity level 0-4 for heatmap coloring")


class ActivityHistory(SnapshotModel):
    """Activity history over a trailing window of weeks."""

    days: list[ActivityHistoryDay] = Field(default_factory=list)
    total_active_days: int = 0
    total_events: int = 0
    max_daily_count: int = 0
    events_by_domain: dict[str, int] = Field(default_factory=dict)
