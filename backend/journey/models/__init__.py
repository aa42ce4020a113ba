"""Pydantic models for the application."""

from journey.models.records import (
    BookCatalogEntry,
    DomainRecords,
    JournalEntry,
    LifeArena,
    Milestone,
    ReadingProgressRecord,
    SALTask,
    TasksVocabularyWord,
    VocabularyWord,
)
from journey.models.progress import (
    Achievement,
    ActivityHistory,
    ActivityHistoryDay,
    ActivitySummary,
    CompletionBreakdown,
    JournalProgress,
    JourneyProgress,
    LifeArenasProgress,
    ReadingProgressData,
    TasksProgress,
    VocabularyProgress,
)

__all__ = [
    # Raw records
    "BookCatalogEntry",
    "DomainRecords",
    "JournalEntry",
    "LifeArena",
    "Milestone",
    "ReadingProgressRecord",
    "SALTask",
    "TasksVocabularyWord",
    "VocabularyWord",
    # Snapshots
    "Achievement",
    "ActivityHistory",
    "ActivityHistoryDay",
    "ActivitySummary",
    "CompletionBreakdown",
    "JournalProgress",
    "JourneyProgress",
    "LifeArenasProgress",
    "ReadingProgressData",
    "TasksProgress",
    "VocabularyProgress",
]
