"""
Raw Domain Record Models (Pydantic)

Typed views over the records the CRUD layer persists for each domain:
- Journal entries
- Reading progress (one record per book chapter)
- SAL Challenge tasks
- Vocabulary words (task-captured and library)
- Life arenas and their milestones

Date and timestamp fields are kept as the raw strings found in storage.
They are parsed at computation time by journey.services.progress.utils,
which drops unparsable values instead of failing the whole collection.
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field

from journey.enums.progress import MasteryLevel, TaskStatus
from journey.models.base import RecordModel


# ===========================================
# Journal
# ===========================================


class JournalEntry(RecordModel):
    """A single journal entry. Only the fields progress needs are typed."""

    id: str
    date: Optional[str] = None
    word_count: int = Field(0, ge=0)
    type: str = "reflection"
    tags: list[str] = Field(default_factory=list)


# ===========================================
# Reading
# ===========================================


class ReadingProgressRecord(RecordModel):
    """
    Progress on one chapter of one book.

    Unique per (book_id, chapter_id). total_time is in minutes.
    """

    book_id: str
    chapter_id: str
    completed: bool = False
    total_time: float = Field(0, ge=0)
    last_read: Optional[str] = None
    position: Optional[float] = None

    @property
    def key(self) -> tuple[str, str]:
        """Identity of the record within the reading collection."""
        return self.book_id, self.chapter_id


class BookCatalogEntry(RecordModel):
    """A book in the fixed SAL reading catalog."""

    id: str
    title: str = ""
    total_chapters: int = Field(0, ge=0)


# ===========================================
# Tasks
# ===========================================


class SALTask(RecordModel):
    """A SAL Challenge task. time_spent is in minutes."""

    id: Union[int, str]
    category: str = "foundation"
    status: TaskStatus = TaskStatus.NOT_STARTED
    time_spent: float = Field(0, ge=0)
    started_date: Optional[str] = None
    completed_date: Optional[str] = None


# ===========================================
# Vocabulary
# ===========================================


class TasksVocabularyWord(RecordModel):
    """
    A word captured while working on a task.

    Counts toward vocabulary totals but carries no mastery state.
    """

    id: str
    word: str = ""
    date_added: Optional[str] = None


class VocabularyWord(RecordModel):
    """
    A library vocabulary word with its review schedule.

    Mutated only by MasteryScheduler.reviewed() and
    MasteryScheduler.mark_mastered(); never deleted by the core.
    """

    id: str
    word: str = ""
    mastery_level: MasteryLevel = MasteryLevel.NEW
    review_count: int = Field(0, ge=0)
    last_reviewed: Optional[str] = None
    next_review_date: Optional[str] = None
    date_added: Optional[str] = None


# ===========================================
# Life Arenas
# ===========================================


class Milestone(RecordModel):
    """A milestone inside a life arena."""

    id: Optional[str] = None
    title: str = ""
    completed: bool = False


class LifeArena(RecordModel):
    """A life arena with its self-assessed score (0-10 scale)."""

    id: Optional[str] = None
    name: str
    current_score: float = Field(0, ge=0, le=100)
    milestones: list[Milestone] = Field(default_factory=list)
    last_updated: Optional[str] = None


# ===========================================
# Collections
# ===========================================


class DomainRecords(RecordModel):
    """
    The six raw collections a progress snapshot is computed from.

    Any collection may be empty. Built by the record loader, or directly
    in tests and scripts.
    """

    journal_entries: list[JournalEntry] = Field(default_factory=list)
    reading_progress: list[ReadingProgressRecord] = Field(default_factory=list)
    tasks: list[SALTask] = Field(default_factory=list)
    tasks_vocabulary: list[TasksVocabularyWord] = Field(default_factory=list)
    library_vocabulary: list[VocabularyWord] = Field(default_factory=list)
    life_arenas: list[LifeArena] = Field(default_factory=list)
