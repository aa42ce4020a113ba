"""
Shared Test Fixtures and Configuration

This module provides pytest fixtures used across the unit tests.
"""

import os
import sys
from datetime import date
from pathlib import Path
from typing import Any, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from dotenv import load_dotenv

# Add the backend directory to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load .env file from project root BEFORE any fixtures run
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    # Try backend directory
    _backend_env = Path(__file__).parent.parent / ".env"
    if _backend_env.exists():
        load_dotenv(_backend_env)

# Settings are read once at import time, so calendar-day evaluation must be
# pinned before any test module imports journey.config
os.environ["TIMEZONE"] = "UTC"


# ============================================================================
# Environment Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """
    Set up test environment variables before any tests run.

    This ensures tests run with predictable configuration, overriding
    any values from .env files to ensure test isolation.
    """
    # Store original environment
    original_env = os.environ.copy()

    test_env = {
        "TIMEZONE": "UTC",
        "REDIS_URL": os.environ.get("REDIS_URL", "redis://localhost:6379/1"),
        "DEBUG": "true",
    }
    os.environ.update(test_env)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


# ============================================================================
# Sample Records
# ============================================================================

TODAY = date(2026, 10, 17)


@pytest.fixture
def today() -> date:
    """Fixed evaluation day shared by the sample records."""
    return TODAY


@pytest.fixture
def sample_raw_collections() -> dict[str, Any]:
    """
    Provide a client-state export with every collection populated.

    Values are plain decoded JSON in the persisted camelCase shape, keyed
    by storage key, as the report script reads them from an export file.
    Active days: Oct 10, Oct 15, Oct 16, Oct 17 (streak of 3 ending today).
    """
    return {
        "sal-os-journal-entries": [
            {
                "id": "j1",
                "date": "2026-10-15T07:30:00.000Z",
                "wordCount": 100,
                "type": "reflection",
                "title": "Morning pages",
            },
            {"id": "j2", "date": "2026-10-16", "wordCount": 150, "type": "gratitude"},
            {"id": "j3", "date": "2026-10-17", "wordCount": 200, "type": "reflection"},
        ],
        "sal-os-reading-progress": {
            "book-1-ch-1": {
                "bookId": "book-1",
                "chapterId": "ch-1",
                "completed": True,
                "totalTime": 30,
                "lastRead": "2026-10-10T20:00:00Z",
            },
            "book-1-ch-2": {
                "bookId": "book-1",
                "chapterId": "ch-2",
                "completed": True,
                "totalTime": 25,
                "lastRead": "2026-10-15T20:00:00Z",
            },
            "book-2-ch-1": {
                "bookId": "book-2",
                "chapterId": "ch-1",
                "completed": False,
                "totalTime": 5,
                "lastRead": "2026-10-16T21:00:00Z",
            },
        },
        "sal-os-tasks": [
            {
                "id": 1,
                "category": "foundation",
                "status": "completed",
                "timeSpent": 40,
                "startedDate": "2026-10-10",
                "completedDate": "2026-10-15",
            },
            {
                "id": 2,
                "category": "knowledge",
                "status": "in-progress",
                "timeSpent": 20,
                "startedDate": "2026-10-16",
            },
        ],
        "sal-os-vocabulary": [
            {"id": "tv1", "word": "agency", "dateAdded": "2026-10-15"},
        ],
        "sal-os-vocabulary-library": [
            {
                "id": "w1",
                "word": "sovereignty",
                "definition": "Self-rule",
                "masteryLevel": "new",
                "reviewCount": 0,
                "nextReviewDate": "2026-10-16",
                "dateAdded": "2026-10-10",
            },
            {
                "id": "w2",
                "word": "praxis",
                "masteryLevel": "mastered",
                "reviewCount": 5,
                "lastReviewed": "2026-10-15",
                "nextReviewDate": "2026-10-01",
                "dateAdded": "2026-10-10",
            },
            {
                "id": "w3",
                "word": "telos",
                "masteryLevel": "learning",
                "reviewCount": 1,
                "lastReviewed": "2026-10-16",
                "nextReviewDate": "2026-10-23",
                "dateAdded": "2026-10-16",
            },
        ],
        "sal-os-life-arenas": [
            {"name": "Health", "currentScore": 6, "milestones": [{"completed": True}]},
            {
                "name": "Career",
                "currentScore": 8,
                "milestones": [{"completed": True}, {"completed": False}],
                "lastUpdated": "2026-10-17T09:00:00Z",
            },
            {"name": "Family", "currentScore": 4, "milestones": []},
        ],
        "sal-os-onboarding-complete": True,
    }


@pytest.fixture
def sample_records(sample_raw_collections):
    """Parsed DomainRecords for sample_raw_collections."""
    from journey.services.progress.loader import parse_domain_records

    return parse_domain_records(sample_raw_collections)


@pytest.fixture
def memory_store(sample_raw_collections):
    """In-memory record store loaded with sample_raw_collections."""
    from journey.db.store import InMemoryRecordStore

    return InMemoryRecordStore.from_export(sample_raw_collections)


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_redis() -> MagicMock:
    """
    Create a mock Redis client for unit testing.

    This allows testing Redis-dependent code without a real Redis server.
    """
    mock = MagicMock()
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.delete = AsyncMock(return_value=1)
    mock.ping = AsyncMock(return_value=True)
    return mock
