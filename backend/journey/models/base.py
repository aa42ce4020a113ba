"""
Base Models for Raw Records and Derived Snapshots

This module provides the two base classes every model in the project
derives from.

MOTIVATION:
    Raw records come from client-side storage as loosely-typed JSON written
    by several generations of the UI. Field names are camelCase and records
    routinely carry fields the progress engine does not interpret (titles,
    notes, gradients). Derived snapshots go the other way: they are handed
    to presentation code that expects camelCase keys.

Usage:
    # For raw persisted records (lenient input, round-trips unknown keys)
    class JournalEntry(RecordModel):
        word_count: int = 0

    JournalEntry.model_validate({"wordCount": 120, "title": "Morning"})

    # For derived output (camelCase on dump)
    class JournalProgress(SnapshotModel):
        pages_written: int

    JournalProgress(pages_written=2).model_dump(by_alias=True)
    # {"pagesWritten": 2}

Architecture:
    Storage JSON → RecordModel (extra="allow") → Calculators
    Calculators → SnapshotModel → model_dump(by_alias=True) → Presentation
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """
    Base model for raw domain records read from storage.

    Features:
        - alias_generator=to_camel: Accepts the persisted camelCase keys
        - populate_by_name=True: Also accepts snake_case field names
        - extra="allow": Keeps unknown keys so write-back loses nothing
        - allow_inf_nan=False: Infinity/NaN fail validation like any bad value
        - coerce_numbers_to_str=True: Numeric ids from older clients are accepted

    Example:
        >>> word = VocabularyWord.model_validate({"id": "w1", "definition": "..."})
        >>> word.model_dump(by_alias=True)["definition"]
        '...'
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        allow_inf_nan=False,
        coerce_numbers_to_str=True,
    )

    def to_storage(self) -> dict:
        """
        Dump in the persisted camelCase shape, including unknown keys.

        Only fields present in storage or set since are written, so a record
        that was loaded and not touched is written back as it was read.
        """
        return self.model_dump(by_alias=True, mode="json", exclude_unset=True)


class SnapshotModel(BaseModel):
    """
    Base model for derived summaries and snapshots.

    Snapshots are recomputed on every call and never persisted, so they are
    frozen: nothing downstream can patch a summary after it was computed.

    Features:
        - alias_generator=to_camel: Dumps camelCase with by_alias=True
        - populate_by_name=True: Construct with snake_case names
        - frozen=True: Immutable once built
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_payload(self) -> dict:
        """Dump as plain JSON-compatible data for presentation code."""
        return self.model_dump(by_alias=True, mode="json")
