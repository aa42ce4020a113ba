"""
Overall Completion Scoring

Combines the five domain summaries into one completion percentage.

Each domain has its own natural scale (pages, chapters, tasks, words, a
0-10 arena score), so each is first normalized to a 0-100 percentage of
its target and clamped; the overall figure is the unweighted mean of the
five, rounded half-up.

Targets (configurable in settings):
- Journal: JOURNAL_TARGET_PAGES pages (200)
- Books: every chapter in the catalog
- Tasks: TOTAL_CHALLENGE_TASKS tasks (25)
- Vocabulary: VOCABULARY_TARGET_WORDS words (100)
- Arenas: ARENA_SCORE_SCALE (10)
"""

from journey.config import settings
from journey.models.progress import (
    CompletionBreakdown,
    JournalProgress,
    LifeArenasProgress,
    ReadingProgressData,
    TasksProgress,
    VocabularyProgress,
)
from journey.services.progress.utils import clamp_percent, round_half_up, safe_ratio


def calculate_completion_breakdown(
    journal: JournalProgress,
    reading: ReadingProgressData,
    tasks: TasksProgress,
    vocabulary: VocabularyProgress,
    arenas: LifeArenasProgress,
) -> CompletionBreakdown:
    """
    Calculate per-domain completion percentages and their mean.

    Any domain whose target is zero scores 0 rather than dividing by zero.

    Returns:
        CompletionBreakdown with every percentage in [0, 100].
    """
    journal_percent = clamp_percent(
        min(safe_ratio(journal.pages_written, settings.JOURNAL_TARGET_PAGES), 1) * 100
    )
    books_percent = clamp_percent(
        safe_ratio(reading.chapters_completed, reading.total_chapters) * 100
    )
    tasks_percent = clamp_percent(
        safe_ratio(tasks.completed_tasks, settings.TOTAL_CHALLENGE_TASKS) * 100
    )
    vocab_percent = clamp_percent(
        min(safe_ratio(vocabulary.total_words, settings.VOCABULARY_TARGET_WORDS), 1) * 100
    )
    arenas_percent = clamp_percent(
        safe_ratio(arenas.overall_score, settings.ARENA_SCORE_SCALE) * 100
    )

    percents = [journal_percent, books_percent, tasks_percent, vocab_percent, arenas_percent]

    return CompletionBreakdown(
        journal=journal_percent,
        books=books_percent,
        tasks=tasks_percent,
        vocabulary=vocab_percent,
        arenas=arenas_percent,
        overall=round_half_up(sum(percents) / len(percents)),
    )


def calculate_overall_completion(
    journal: JournalProgress,
    reading: ReadingProgressData,
    tasks: TasksProgress,
    vocabulary: VocabularyProgress,
    arenas: LifeArenasProgress,
) -> int:
    """Overall completion percentage (0-100) across the five domains."""
    return calculate_completion_breakdown(journal, reading, tasks, vocabulary, arenas).overall
