"""
Record Store Interface

The progress engine reads raw collections by key and writes back updated
vocabulary words; it never talks to a backend directly. A record store is
anything that can get and set one raw value per storage key.

Stored values are either JSON text (as written by the client and mirrored
to Redis) or already-decoded JSON data (as found in an export file). The
record loader accepts both.

Usage:
    from journey.db.store import InMemoryRecordStore
    from journey.enums import StorageKey

    store = InMemoryRecordStore.from_export(json.load(f))
    raw = await store.get_raw(StorageKey.JOURNAL_ENTRIES)
"""

from typing import Any, Mapping, Optional, Protocol, Union

from journey.enums.progress import StorageKey


def _key(key: Union[StorageKey, str]) -> str:
    return key.value if isinstance(key, StorageKey) else key


class RecordStore(Protocol):
    """Persistence collaborator for raw domain collections."""

    async def get_raw(self, key: Union[StorageKey, str]) -> Optional[Any]:
        """Return the raw value under key, or None when absent."""
        ...

    async def set_raw(self, key: Union[StorageKey, str], value: Any) -> None:
        """Replace the raw value under key."""
        ...


class InMemoryRecordStore:
    """
    Dictionary-backed record store.

    Used by the report script (loaded from a JSON export of client state)
    and by tests. Values are stored exactly as given.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    @classmethod
    def from_export(cls, export: Mapping[str, Any]) -> "InMemoryRecordStore":
        """
        Build a store from an exported client state.

        Exports map storage keys to their values. Keys that are not one of
        the known storage keys (onboarding flags, timezone, ...) are kept
        so that writing the export back preserves them.
        """
        return cls(export)

    async def get_raw(self, key: Union[StorageKey, str]) -> Optional[Any]:
        return self._data.get(_key(key))

    async def set_raw(self, key: Union[StorageKey, str], value: Any) -> None:
        self._data[_key(key)] = value

    def export(self) -> dict[str, Any]:
        """Return a shallow copy of all stored values."""
        return dict(self._data)
