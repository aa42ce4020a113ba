"""
Vocabulary Services

Review scheduling for library vocabulary words.

Modules:
- scheduler: Pure fixed-interval review and mastery transitions
- review_service: Loads words by id, applies the scheduler, writes back

Usage:
    from journey.services.vocabulary import MasteryScheduler, VocabularyReviewService
"""

from journey.services.vocabulary.review_service import (
    StoreWordRepository,
    VocabularyReviewService,
    WordRepository,
)
from journey.services.vocabulary.scheduler import MasteryScheduler

__all__ = [
    "MasteryScheduler",
    "StoreWordRepository",
    "VocabularyReviewService",
    "WordRepository",
]
