"""
Raw Record Loading

Deserializes the six persisted collections into typed records.

Deserialization is fallible per domain: if one collection is invalid JSON,
has the wrong shape, or fails record validation, that domain is treated as
empty and the others load normally. A corrupted journal must not take the
whole journey dashboard down with it.

Usage:
    from journey.services.progress.loader import load_domain_records

    records = await load_domain_records(store)
    records.journal_entries  # [] if the journal collection was unreadable
"""

import json
import logging
from typing import Any, Mapping, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from journey.db.store import RecordStore
from journey.enums.progress import StorageKey
from journey.errors import MalformedRecordsError
from journey.models.base import RecordModel
from journey.models.records import (
    DomainRecords,
    JournalEntry,
    LifeArena,
    ReadingProgressRecord,
    SALTask,
    TasksVocabularyWord,
    VocabularyWord,
)

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordModel)

# Storage key → (DomainRecords field, record model)
COLLECTIONS: dict[StorageKey, tuple[str, Type[RecordModel]]] = {
    StorageKey.JOURNAL_ENTRIES: ("journal_entries", JournalEntry),
    StorageKey.READING_PROGRESS: ("reading_progress", ReadingProgressRecord),
    StorageKey.TASKS: ("tasks", SALTask),
    StorageKey.TASKS_VOCABULARY: ("tasks_vocabulary", TasksVocabularyWord),
    StorageKey.LIBRARY_VOCABULARY: ("library_vocabulary", VocabularyWord),
    StorageKey.LIFE_ARENAS: ("life_arenas", LifeArena),
}


def parse_collection(raw: Any, model: Type[RecordT], key: StorageKey) -> list[RecordT]:
    """
    Parse one raw collection, raising on malformed data.

    Accepts JSON text or already-decoded data. Missing values (None, empty
    text, JSON null) are an empty collection, not an error. Reading
    progress is persisted as a mapping keyed by "<book>-<chapter>"; for
    that key a mapping is read as its values and duplicate
    (book, chapter) records collapse to the last one.

    Args:
        raw: Stored value.
        model: Record model to validate each item against.
        key: Storage key the value was read from (for error reporting).

    Returns:
        Validated records in stored order.

    Raises:
        MalformedRecordsError: If the value cannot be decoded or validated.
    """
    if raw is None:
        return []

    if isinstance(raw, (bytes, str)):
        if not raw.strip():
            return []
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedRecordsError(key.value, f"invalid JSON: {e}") from e
        if raw is None:
            return []

    if isinstance(raw, Mapping):
        if key != StorageKey.READING_PROGRESS:
            raise MalformedRecordsError(key.value, "expected a list of records")
        raw = list(raw.values())

    if not isinstance(raw, list):
        raise MalformedRecordsError(key.value, f"unexpected {type(raw).__name__}")

    try:
        records = TypeAdapter(list[model]).validate_python(raw)
    except ValidationError as e:
        raise MalformedRecordsError(
            key.value, f"{e.error_count()} validation error(s)"
        ) from e

    if key == StorageKey.READING_PROGRESS:
        records = list({record.key: record for record in records}.values())

    return records


def load_collection(raw: Any, model: Type[RecordT], key: StorageKey) -> list[RecordT]:
    """
    Parse one raw collection, degrading to an empty collection on failure.

    Returns:
        Validated records, or [] if the collection is malformed.
    """
    try:
        return parse_collection(raw, model, key)
    except MalformedRecordsError as e:
        logger.warning(f"Treating '{e.key}' as empty: {e.reason}")
        return []


def parse_domain_records(raw_by_key: Mapping[str, Any]) -> DomainRecords:
    """
    Build DomainRecords from raw values keyed by storage key.

    Absent keys are empty collections. Keys other than the six storage
    keys are ignored.

    Args:
        raw_by_key: Mapping of storage key string (e.g. "sal-os-tasks") to
            its stored value, as found in a client-state export.

    Returns:
        DomainRecords with every domain loaded or empty.
    """
    collections = {
        field: load_collection(raw_by_key.get(key.value), model, key)
        for key, (field, model) in COLLECTIONS.items()
    }
    return DomainRecords(**collections)


async def load_domain_records(store: RecordStore) -> DomainRecords:
    """
    Read and parse all six collections from a record store.

    Every call goes back to the store; nothing is cached between calls.

    Args:
        store: Record store to read from.

    Returns:
        DomainRecords with every domain loaded or empty.
    """
    raw_by_key = {key.value: await store.get_raw(key) for key in COLLECTIONS}
    return parse_domain_records(raw_by_key)
