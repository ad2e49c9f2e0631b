"""
RosterStore - Canonical student collection and its persistence.

The whole roster lives as one JSON array under a single storage key. Every
mutation re-reads that value, changes it, and writes the full array back.
There is no concurrency check: two writers sharing a backend race and the
last write wins.

Identity: a new record's uniqueId is the current millisecond timestamp. When
that value is already taken the candidate is advanced one millisecond at a
time until it is unused.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from roster.adapters.clock import SystemClock
from roster.components.validation import ValidatedFields, trim
from roster.domain.entities import StudentRecord

from .ports import ClockPort, KeyValueStoragePort, StorageCorrupt, StorageUnavailable

STORAGE_KEY = "students"


def _require_validated(fields: object) -> ValidatedFields:
    if not isinstance(fields, ValidatedFields):
        raise TypeError(
            f"expected ValidatedFields from validate_record(), got {type(fields).__name__}"
        )
    return fields


class RosterStore:
    """
    Roster store.

    Stateless between calls apart from the injected storage handle; every
    read goes back to storage.
    """

    def __init__(
        self,
        storage: KeyValueStoragePort,
        clock: ClockPort | None = None,
        key: str = STORAGE_KEY,
    ) -> None:
        """Initialize store."""
        self._storage = storage
        self._clock = clock or SystemClock()
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    # --- Persistence ---

    def _load(self) -> list[StudentRecord]:
        raw = self._storage.get_item(self._key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageCorrupt(self._key, f"invalid JSON ({e.msg})") from e
        except RecursionError as e:
            raise StorageCorrupt(self._key, "JSON nested too deeply") from e

        if not isinstance(data, list):
            raise StorageCorrupt(self._key, f"expected a JSON array, got {type(data).__name__}")

        try:
            return [StudentRecord.model_validate(item) for item in data]
        except ValidationError as e:
            raise StorageCorrupt(
                self._key, f"invalid student entry ({e.error_count()} errors)"
            ) from e

    def _save(self, records: list[StudentRecord]) -> None:
        try:
            payload = json.dumps([record.to_storage() for record in records])
        except (TypeError, ValueError) as e:
            raise StorageUnavailable(f"could not serialize roster: {e}") from e

        self._storage.set_item(self._key, payload)

    def _next_unique_id(self, records: list[StudentRecord]) -> str:
        taken = {record.unique_id for record in records}
        candidate = self._clock.now_millis()
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    # --- Queries ---

    def list_students(self) -> list[StudentRecord]:
        """All records in insertion order."""
        return self._load()

    def get(self, unique_id: str) -> StudentRecord | None:
        """Get record by uniqueId."""
        return next((r for r in self._load() if r.unique_id == unique_id), None)

    # --- Mutations ---

    def add(self, fields: ValidatedFields) -> StudentRecord:
        """
        Append a new record.

        Fields are stored trimmed; they are not re-validated here.
        """
        fields = _require_validated(fields)
        records = self._load()

        record = StudentRecord(
            uniqueId=self._next_unique_id(records),
            name=trim(fields.name),
            id=trim(fields.id),
            email=trim(fields.email),
            contact=trim(fields.contact),
        )
        records.append(record)

        self._save(records)
        return record

    def update(self, unique_id: str, fields: ValidatedFields) -> StudentRecord | None:
        """
        Replace the four editable fields of an existing record.

        Returns:
            The updated record, or None if no record has this uniqueId (nothing
            is written in that case).
        """
        fields = _require_validated(fields)
        records = self._load()

        index = next((i for i, r in enumerate(records) if r.unique_id == unique_id), None)
        if index is None:
            return None

        updated = records[index].model_copy(
            update={
                "name": trim(fields.name),
                "id": trim(fields.id),
                "email": trim(fields.email),
                "contact": trim(fields.contact),
            }
        )
        records[index] = updated

        self._save(records)
        return updated

    def delete(self, unique_id: str) -> bool:
        """
        Remove the record with this uniqueId.

        The filtered collection is written back even when nothing matched.

        Returns:
            True if a record was removed.
        """
        records = self._load()
        remaining = [r for r in records if r.unique_id != unique_id]

        self._save(remaining)
        return len(remaining) != len(records)
