"""
Journey Achievements

Badges earned from a progress snapshot. Each badge is dated by the event
that most plausibly earned it (the last journal entry for writing badges,
the last activity day for the streak badge, ...).
"""

from journey.enums.progress import AchievementCategory
from journey.models.progress import Achievement, JourneyProgress
from journey.services.progress.utils import timestamp_key

# Thresholds
VOCABULARY_MASTER_WORDS = 100
WEEK_STREAK_DAYS = 7
TASK_WARRIOR_TASKS = 10
PROLIFIC_WRITER_PAGES = 50


def get_achievements(progress: JourneyProgress) -> list[Achievement]:
    """
    List the achievements a snapshot qualifies for.

    Args:
        progress: Journey progress snapshot.

    Returns:
        Earned achievements, most recently earned first. Undated
        achievements come last.
    """
    journal = progress.journal_progress
    vocabulary = progress.vocabulary_progress
    reading = progress.books_progress
    tasks = progress.tasks_progress

    achievements: list[Achievement] = []

    if journal.entries_count > 0:
        achievements.append(
            Achievement(
                id="first-entry",
                title="First Step",
                description="Wrote your first journal entry",
                icon="📝",
                date_earned=journal.last_entry_date,
                category=AchievementCategory.JOURNAL,
            )
        )

    if vocabulary.total_words >= VOCABULARY_MASTER_WORDS:
        achievements.append(
            Achievement(
                id="vocab-master",
                title="Vocabulary Master",
                description=f"Learned {VOCABULARY_MASTER_WORDS} vocabulary words",
                icon="📚",
                date_earned=vocabulary.last_word_added,
                category=AchievementCategory.VOCABULARY,
            )
        )

    if reading.completed_books >= 1:
        achievements.append(
            Achievement(
                id="first-book",
                title="Book Completion",
                description="Completed your first SAL book",
                icon="🎓",
                date_earned=reading.last_read_date,
                category=AchievementCategory.READING,
            )
        )

    if progress.current_streak >= WEEK_STREAK_DAYS:
        achievements.append(
            Achievement(
                id="week-streak",
                title="Consistent Learner",
                description=f"{WEEK_STREAK_DAYS}-day activity streak",
                icon="🔥",
                date_earned=progress.last_activity_date.isoformat(),
                category=AchievementCategory.CONSISTENCY,
            )
        )

    if tasks.completed_tasks >= TASK_WARRIOR_TASKS:
        achievements.append(
            Achievement(
                id="task-warrior",
                title="Task Warrior",
                description=f"Completed {TASK_WARRIOR_TASKS} SAL Challenge tasks",
                icon="⚡",
                date_earned=tasks.last_task_update,
                category=AchievementCategory.TASKS,
            )
        )

    if journal.pages_written >= PROLIFIC_WRITER_PAGES:
        achievements.append(
            Achievement(
                id="prolific-writer",
                title="Prolific Writer",
                description=f"Wrote {PROLIFIC_WRITER_PAGES} pages in your journal",
                icon="✍️",
                date_earned=journal.last_entry_date,
                category=AchievementCategory.JOURNAL,
            )
        )

    return sorted(achievements, key=lambda a: timestamp_key(a.date_earned), reverse=True)
