"""
Vocabulary Mastery Scheduler

Governs a single library word's review lifecycle.

Mastery ladder:
    NEW → LEARNING → FAMILIAR → MASTERED

Operations:
- reviewed(): the user reviewed the word. Schedules the next review a
  fixed interval out (7 days by default) regardless of mastery level or
  past performance. Mastery level is left alone.
- mark_mastered(): the user declared the word mastered. Mastery jumps to
  MASTERED; the review schedule is left alone.
- is_due() / due_words(): which words need a review today.

Reviews do not promote words through LEARNING or FAMILIAR. Those levels
are only ever set by hand in the word editor, and there is no agreed rule
for reaching them automatically, so none is applied here.

Every operation returns a new record and leaves its input untouched.
today is always passed in; the scheduler never reads the clock.

Usage:
    from journey.services.vocabulary.scheduler import MasteryScheduler

    scheduler = MasteryScheduler()
    updated = scheduler.reviewed(word, today=date(2026, 10, 17))
    updated.next_review_date  # "2026-10-24"
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from journey.config import settings
from journey.enums.progress import MasteryLevel
from journey.models.records import VocabularyWord
from journey.services.progress.utils import to_calendar_day


class MasteryScheduler:
    """
    Fixed-interval review scheduler for library vocabulary words.

    Attributes:
        review_interval_days: Days between a review and the next due date.
    """

    def __init__(self, review_interval_days: Optional[int] = None):
        """
        Initialize the scheduler.

        Args:
            review_interval_days: Review interval (default: settings.REVIEW_INTERVAL_DAYS).
        """
        self.review_interval_days = (
            review_interval_days
            if review_interval_days is not None
            else settings.REVIEW_INTERVAL_DAYS
        )
        if self.review_interval_days < 0:
            raise ValueError(
                f"review_interval_days must be non-negative, got {self.review_interval_days}"
            )

    def next_review_date(self, today: date) -> date:
        """Due date for a word reviewed today."""
        return today + timedelta(days=self.review_interval_days)

    def reviewed(self, word: VocabularyWord, today: date) -> VocabularyWord:
        """
        Record a review of a word.

        Sets last_reviewed to today, increments review_count by one and
        schedules the next review review_interval_days out.

        Args:
            word: Word as currently persisted.
            today: Day the review happened.

        Returns:
            Updated copy of the word; mastery_level unchanged.
        """
        return word.model_copy(
            update={
                "last_reviewed": today.isoformat(),
                "review_count": word.review_count + 1,
                "next_review_date": self.next_review_date(today).isoformat(),
            }
        )

    def mark_mastered(self, word: VocabularyWord, today: date) -> VocabularyWord:
        """
        Mark a word as mastered.

        Sets mastery_level to MASTERED, last_reviewed to today and
        increments review_count by one. next_review_date is not touched;
        mastered words are never due, whatever their schedule says.

        Args:
            word: Word as currently persisted.
            today: Day the word was marked.

        Returns:
            Updated copy of the word.
        """
        return word.model_copy(
            update={
                "mastery_level": MasteryLevel.MASTERED,
                "last_reviewed": today.isoformat(),
                "review_count": word.review_count + 1,
            }
        )

    @staticmethod
    def is_due(word: VocabularyWord, today: date) -> bool:
        """
        Check whether a word needs review.

        A word is due when its next review date is today or earlier and it
        is not mastered. Words without a parsable next review date are not
        due.
        """
        if word.mastery_level == MasteryLevel.MASTERED:
            return False
        next_review = to_calendar_day(word.next_review_date)
        return next_review is not None and next_review <= today

    def due_words(
        self, words: Iterable[VocabularyWord], today: date
    ) -> list[VocabularyWord]:
        """
        Words due for review, most overdue first.

        Args:
            words: Library words.
            today: Evaluation day.

        Returns:
            Due words ordered by next review date; ties keep input order.
        """
        due = [word for word in words if self.is_due(word, today)]
        return sorted(due, key=lambda w: to_calendar_day(w.next_review_date))
