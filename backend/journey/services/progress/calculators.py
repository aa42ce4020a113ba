"""
Domain Progress Calculators

Pure reductions of one raw collection into one domain summary:
- Journal: pages written, words per entry, entries by type
- Reading: chapters and books completed against the SAL catalog
- Tasks: status and category counts, time spent
- Vocabulary: mastery counts across task and library words
- Life Arenas: mean score, highest/lowest arena, milestones

Every calculator accepts an empty collection and returns a zeroed summary.
None of them mutate their input or read the clock.

Usage:
    from journey.services.progress.calculators import calculate_journal_progress

    summary = calculate_journal_progress(records.journal_entries)
    print(summary.pages_written)
"""

import math
from collections import Counter
from typing import Optional, Sequence

from journey.config import settings
from journey.config.catalog import get_book_catalog
from journey.enums.progress import MasteryLevel, TaskStatus
from journey.models.progress import (
    JournalProgress,
    LifeArenasProgress,
    ReadingProgressData,
    TasksProgress,
    VocabularyProgress,
)
from journey.models.records import (
    BookCatalogEntry,
    JournalEntry,
    LifeArena,
    ReadingProgressRecord,
    SALTask,
    TasksVocabularyWord,
    VocabularyWord,
)
from journey.services.progress.utils import (
    latest_value,
    round_half_up,
    safe_ratio,
)


def calculate_journal_progress(entries: Sequence[JournalEntry]) -> JournalProgress:
    """
    Summarize journal writing.

    Args:
        entries: Journal entries in any order.

    Returns:
        JournalProgress with pages = ceil(total words / words per page).
    """
    total_words = sum(entry.word_count for entry in entries)

    return JournalProgress(
        pages_written=math.ceil(total_words / settings.JOURNAL_WORDS_PER_PAGE),
        target_pages=settings.JOURNAL_TARGET_PAGES,
        entries_count=len(entries),
        total_words=total_words,
        average_words_per_entry=round_half_up(safe_ratio(total_words, len(entries))),
        last_entry_date=latest_value(entry.date for entry in entries),
        entries_by_type=dict(Counter(entry.type for entry in entries)),
    )


def calculate_reading_progress(
    records: Sequence[ReadingProgressRecord],
    books: Optional[Sequence[BookCatalogEntry]] = None,
) -> ReadingProgressData:
    """
    Summarize reading progress against the book catalog.

    A book counts as completed once its completed chapter records reach the
    catalog's chapter total. Books with no chapters in the catalog are never
    completed. The current book is the book of the most recently read
    chapter that is still incomplete.

    Args:
        records: Chapter progress records, unique per (book, chapter).
        books: Catalog to measure against (default: configured catalog).

    Returns:
        ReadingProgressData for the catalog.
    """
    if books is None:
        books = get_book_catalog()

    completed = [r for r in records if r.completed]
    incomplete = [r for r in records if not r.completed]
    total_reading_time = sum(r.total_time for r in records)

    completed_per_book = Counter(r.book_id for r in completed)
    completed_books = sum(
        1
        for book in books
        if book.total_chapters > 0
        and completed_per_book.get(book.id, 0) >= book.total_chapters
    )

    current_book_id = _most_recently_read(incomplete)
    last_read = _most_recently_read_record(records)

    return ReadingProgressData(
        total_books=len(books),
        completed_books=completed_books,
        current_book_id=current_book_id,
        chapters_completed=len(completed),
        total_chapters=sum(book.total_chapters for book in books),
        total_reading_time=total_reading_time,
        average_reading_time=round_half_up(safe_ratio(total_reading_time, len(records))),
        last_read_date=last_read.last_read if last_read else None,
        books_in_progress=len({r.book_id for r in incomplete if r.total_time > 0}),
    )


def _most_recently_read_record(
    records: Sequence[ReadingProgressRecord],
) -> Optional[ReadingProgressRecord]:
    """Record with the latest parsable last_read, first one on ties."""
    latest = latest_value(r.last_read for r in records)
    if latest is None:
        return None
    return next(r for r in records if r.last_read == latest)


def _most_recently_read(records: Sequence[ReadingProgressRecord]) -> Optional[str]:
    record = _most_recently_read_record(records)
    return record.book_id if record else None


def calculate_tasks_progress(tasks: Sequence[SALTask]) -> TasksProgress:
    """
    Summarize SAL Challenge tasks.

    The last update of a task is its completion date, or its start date if
    it has not been completed.

    Args:
        tasks: Task records in any order.

    Returns:
        TasksProgress against the fixed challenge catalog size.
    """
    total_time = sum(task.time_spent for task in tasks)

    return TasksProgress(
        completed_tasks=sum(1 for t in tasks if t.status == TaskStatus.COMPLETED),
        total_tasks=settings.TOTAL_CHALLENGE_TASKS,
        in_progress_tasks=sum(1 for t in tasks if t.status == TaskStatus.IN_PROGRESS),
        total_time_spent=total_time,
        tasks_by_category=dict(Counter(t.category for t in tasks)),
        tasks_by_status=dict(Counter(t.status.value for t in tasks)),
        average_time_per_task=round_half_up(safe_ratio(total_time, len(tasks))),
        last_task_update=latest_value(
            t.completed_date or t.started_date for t in tasks
        ),
    )


def calculate_vocabulary_progress(
    tasks_vocabulary: Sequence[TasksVocabularyWord],
    library_vocabulary: Sequence[VocabularyWord],
) -> VocabularyProgress:
    """
    Summarize vocabulary across both word sources.

    Mastery counts and review averages cover library words only. Totals and
    the last-added date cover both sources.

    Args:
        tasks_vocabulary: Words captured from tasks.
        library_vocabulary: Library words with mastery state.

    Returns:
        VocabularyProgress for both sources combined.
    """
    levels = Counter(word.mastery_level for word in library_vocabulary)
    library_count = len(library_vocabulary)
    total_reviews = sum(word.review_count for word in library_vocabulary)

    added_dates = [w.date_added for w in tasks_vocabulary] + [
        w.date_added for w in library_vocabulary
    ]

    return VocabularyProgress(
        tasks_vocabulary=len(tasks_vocabulary),
        library_vocabulary=library_count,
        total_words=len(tasks_vocabulary) + library_count,
        words_mastered=levels[MasteryLevel.MASTERED],
        words_learning=levels[MasteryLevel.LEARNING],
        words_familiar=levels[MasteryLevel.FAMILIAR],
        words_new=levels[MasteryLevel.NEW],
        mastery_percentage=round_half_up(
            safe_ratio(levels[MasteryLevel.MASTERED], library_count) * 100
        ),
        average_review_count=round_half_up(safe_ratio(total_reviews, library_count)),
        last_word_added=latest_value(added_dates),
    )


def calculate_life_arenas_progress(arenas: Sequence[LifeArena]) -> LifeArenasProgress:
    """
    Summarize life arenas.

    The overall score is the mean arena score rounded to one decimal. The
    highest and lowest arenas are picked by score; ties go to whichever
    arena comes first.

    Args:
        arenas: Life arenas in display order.

    Returns:
        LifeArenasProgress, with highest/lowest arena None when empty.
    """
    overall = round_half_up(
        safe_ratio(sum(a.current_score for a in arenas), len(arenas)), 1
    )

    highest = max(arenas, key=lambda a: a.current_score, default=None)
    lowest = min(arenas, key=lambda a: a.current_score, default=None)

    return LifeArenasProgress(
        overall_score=overall,
        highest_arena=highest.name if highest else None,
        lowest_arena=lowest.name if lowest else None,
        total_milestones=sum(len(a.milestones) for a in arenas),
        completed_milestones=sum(
            1 for a in arenas for m in a.milestones if m.completed
        ),
        arena_scores={a.name: a.current_score for a in arenas},
        last_arena_update=latest_value(a.last_updated for a in arenas),
        average_arena_score=overall,
    )


__all__ = [
    "calculate_journal_progress",
    "calculate_reading_progress",
    "calculate_tasks_progress",
    "calculate_vocabulary_progress",
    "calculate_life_arenas_progress",
]
