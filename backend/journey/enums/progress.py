"""
Progress Tracking Enums

Defines enums for the five tracked domains, the storage keys their raw
records live under, and the vocabulary mastery ladder.
"""

from enum import Enum


class MasteryLevel(str, Enum):
    """
    Ordinal learning state of a library vocabulary word.

    Ladder:
    - NEW → LEARNING → FAMILIAR → MASTERED

    Only MASTERED is ever assigned by the scheduler (explicit user action).
    LEARNING and FAMILIAR are set by hand in the word editor.
    """

    NEW = "new"
    LEARNING = "learning"
    FAMILIAR = "familiar"
    MASTERED = "mastered"


class TaskStatus(str, Enum):
    """Lifecycle of a SAL Challenge task."""

    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ActivityDomain(str, Enum):
    """
    The five tracked domains.

    Used to label activity events in the heatmap history.
    """

    JOURNAL = "journal"
    READING = "reading"
    TASKS = "tasks"
    VOCABULARY = "vocabulary"
    LIFE_ARENAS = "life_arenas"


class StorageKey(str, Enum):
    """
    Keys under which each raw collection is persisted.

    These match the client-side storage keys so an exported client state
    can be loaded unchanged.
    """

    JOURNAL_ENTRIES = "sal-os-journal-entries"
    READING_PROGRESS = "sal-os-reading-progress"
    TASKS = "sal-os-tasks"
    TASKS_VOCABULARY = "sal-os-vocabulary"
    LIBRARY_VOCABULARY = "sal-os-vocabulary-library"
    LIFE_ARENAS = "sal-os-life-arenas"


class AchievementCategory(str, Enum):
    """Badge groupings shown on the journey map."""

    JOURNAL = "journal"
    VOCABULARY = "vocabulary"
    READING = "reading"
    CONSISTENCY = "consistency"
    TASKS = "tasks"
