"""
Vocabulary Review Service

Connects the mastery scheduler to persistence. A review action names a
word by id; the service loads it, lets the scheduler compute the updated
record, and hands the finished record to the repository for write-back.

The scheduler result is always complete before save_word() is called, so
a failed save leaves the stored word exactly as it was.

Usage:
    from journey.services.vocabulary import StoreWordRepository, VocabularyReviewService

    service = VocabularyReviewService(StoreWordRepository(store))
    word = await service.mark_reviewed("word-42")
    due = await service.get_words_due()
"""

import logging
from datetime import date
from typing import Optional, Protocol

from journey.db.store import RecordStore
from journey.enums.progress import StorageKey
from journey.errors import WordNotFoundError
from journey.models.records import VocabularyWord
from journey.services.progress.loader import load_collection
from journey.services.progress.utils import today_in_timezone
from journey.services.vocabulary.scheduler import MasteryScheduler

logger = logging.getLogger(__name__)


class WordRepository(Protocol):
    """Persistence collaborator for library vocabulary words."""

    async def get_word(self, word_id: str) -> Optional[VocabularyWord]:
        """Return the word with this id, or None."""
        ...

    async def list_words(self) -> list[VocabularyWord]:
        """Return all library words in stored order."""
        ...

    async def save_word(self, word: VocabularyWord) -> None:
        """Persist an updated word in place of the stored one."""
        ...


class StoreWordRepository:
    """
    Word repository over the library vocabulary collection of a record store.

    The whole collection is read and written back on each save. Fields the
    record model does not know about are round-tripped untouched.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    async def list_words(self) -> list[VocabularyWord]:
        raw = await self.store.get_raw(StorageKey.LIBRARY_VOCABULARY)
        return load_collection(raw, VocabularyWord, StorageKey.LIBRARY_VOCABULARY)

    async def get_word(self, word_id: str) -> Optional[VocabularyWord]:
        for word in await self.list_words():
            if word.id == word_id:
                return word
        return None

    async def save_word(self, word: VocabularyWord) -> None:
        words = await self.list_words()
        for i, existing in enumerate(words):
            if existing.id == word.id:
                words[i] = word
                break
        else:
            raise WordNotFoundError(word.id)

        await self.store.set_raw(
            StorageKey.LIBRARY_VOCABULARY, [w.to_storage() for w in words]
        )


class VocabularyReviewService:
    """
    Review actions on library vocabulary words.

    Attributes:
        repository: Where words are read from and written back to.
        scheduler: Computes each updated record.
        tz: Timezone used to resolve today when no day is given.
    """

    def __init__(
        self,
        repository: WordRepository,
        scheduler: Optional[MasteryScheduler] = None,
        tz: Optional[str] = None,
    ):
        self.repository = repository
        self.scheduler = scheduler or MasteryScheduler()
        self.tz = tz

    def _resolve_today(self, today: Optional[date]) -> date:
        return today or today_in_timezone(self.tz)

    async def _require_word(self, word_id: str) -> VocabularyWord:
        word = await self.repository.get_word(str(word_id))
        if word is None:
            raise WordNotFoundError(str(word_id))
        return word

    async def mark_reviewed(
        self, word_id: str, today: Optional[date] = None
    ) -> VocabularyWord:
        """
        Record a review of a word and persist it.

        Args:
            word_id: Library word id.
            today: Day of the review (default: today in the configured timezone).

        Returns:
            The updated word as saved.

        Raises:
            WordNotFoundError: If no word has this id.
        """
        today = self._resolve_today(today)
        word = await self._require_word(word_id)
        updated = self.scheduler.reviewed(word, today)

        await self.repository.save_word(updated)
        logger.info(
            f"Reviewed word {updated.id} ({updated.review_count} reviews), "
            f"next review {updated.next_review_date}"
        )
        return updated

    async def mark_mastered(
        self, word_id: str, today: Optional[date] = None
    ) -> VocabularyWord:
        """
        Mark a word as mastered and persist it.

        Raises:
            WordNotFoundError: If no word has this id.
        """
        today = self._resolve_today(today)
        word = await self._require_word(word_id)
        updated = self.scheduler.mark_mastered(word, today)

        await self.repository.save_word(updated)
        logger.info(f"Marked word {updated.id} as mastered ({updated.review_count} reviews)")
        return updated

    async def get_words_due(self, today: Optional[date] = None) -> list[VocabularyWord]:
        """Get library words due for review, most overdue first."""
        words = await self.repository.list_words()
        return self.scheduler.due_words(words, self._resolve_today(today))
