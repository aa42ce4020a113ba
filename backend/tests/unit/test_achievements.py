"""
Unit tests for journey achievements.
"""

from datetime import date

import pytest

from journey.enums.progress import AchievementCategory
from journey.models.progress import (
    CompletionBreakdown,
    JournalProgress,
    JourneyProgress,
    LifeArenasProgress,
    ReadingProgressData,
    TasksProgress,
    VocabularyProgress,
)
from journey.services.progress.achievements import get_achievements


def _progress(
    journal=None, reading=None, tasks=None, vocabulary=None, streak=0, last_activity=None
):
    today = date(2026, 10, 17)
    return JourneyProgress(
        overall_completion=0,
        start_date=today,
        current_streak=streak,
        last_activity_date=last_activity or today,
        completion=CompletionBreakdown(),
        books_progress=reading or ReadingProgressData(),
        journal_progress=journal or JournalProgress(),
        tasks_progress=tasks or TasksProgress(),
        vocabulary_progress=vocabulary or VocabularyProgress(),
        life_arenas_progress=LifeArenasProgress(),
    )


class TestGetAchievements:
    """Tests for get_achievements."""

    def test_no_progress_no_achievements(self):
        assert get_achievements(_progress()) == []

    def test_all_achievements(self):
        progress = _progress(
            journal=JournalProgress(
                entries_count=80, pages_written=55, last_entry_date="2026-10-12"
            ),
            reading=ReadingProgressData(completed_books=1, last_read_date="2026-10-14"),
            tasks=TasksProgress(completed_tasks=10, last_task_update="2026-10-09"),
            vocabulary=VocabularyProgress(total_words=120, last_word_added="2026-10-16"),
            streak=9,
        )

        achievements = get_achievements(progress)

        assert [a.id for a in achievements] == [
            "week-streak",
            "vocab-master",
            "first-book",
            "first-entry",
            "prolific-writer",
            "task-warrior",
        ]

    def test_newest_first_with_undated_last(self):
        progress = _progress(
            journal=JournalProgress(entries_count=1, last_entry_date=None),
            reading=ReadingProgressData(completed_books=2, last_read_date="2026-10-01"),
        )

        achievements = get_achievements(progress)

        assert [a.id for a in achievements] == ["first-book", "first-entry"]

    @pytest.mark.parametrize(
        "streak,expected",
        [(6, False), (7, True)],
        ids=["below_threshold", "at_threshold"],
    )
    def test_week_streak_threshold(self, streak, expected):
        achievements = get_achievements(_progress(streak=streak))

        assert any(a.id == "week-streak" for a in achievements) is expected

    def test_week_streak_dated_by_last_activity(self):
        (achievement,) = get_achievements(
            _progress(streak=7, last_activity=date(2026, 10, 16))
        )

        assert achievement.date_earned == "2026-10-16"
        assert achievement.category == AchievementCategory.CONSISTENCY
