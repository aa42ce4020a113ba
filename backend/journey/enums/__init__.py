"""
Centralized enum definitions for the application.

All enums are organized by domain:
- progress.py: Tracked domains, storage keys, task statuses, mastery levels

Usage:
    from journey.enums import MasteryLevel, StorageKey

    # Or import from specific module
    from journey.enums.progress import TaskStatus
"""

from journey.enums.progress import (
    AchievementCategory,
    ActivityDomain,
    MasteryLevel,
    StorageKey,
    TaskStatus,
)

__all__ = [
    "AchievementCategory",
    "ActivityDomain",
    "MasteryLevel",
    "StorageKey",
    "TaskStatus",
]
