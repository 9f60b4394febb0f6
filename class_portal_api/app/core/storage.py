"""
In‑memory entity store.

The portal keeps all of its data in process memory: one keyed
collection per entity type, each with its own auto‑incrementing
identifier.  Identifiers start at 1, grow monotonically and are never
reused after a record is deleted.  Restarting the process wipes all
state; the seed loader (``core.seed``) repopulates a fresh store.

Records are stored as plain dictionaries with snake_case keys.  Every
record handed out by the store is a copy so callers cannot modify
stored state behind the store's back.  Mutations of a collection are
serialised by a per‑collection lock, which makes identifier allocation
and the optional uniqueness check atomic.

A ``Storage`` instance is built once per application (see
``main.create_app``) and injected into request handlers, so tests can
work against a fresh store each time.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import DuplicateRecordError


logger = logging.getLogger(__name__)


class EntityType(str, Enum):
    """Kinds of records managed by the store."""

    CORE_MEMBER = "core_member"
    CLASS_MEMBER = "class_member"
    ANNOUNCEMENT = "announcement"
    SCHEDULE = "schedule"
    ASSIGNMENT = "assignment"
    TRANSACTION = "transaction"
    CONTACT_MESSAGE = "contact_message"
    USER = "user"


class Collection:
    """Records of one entity type keyed by identifier."""

    def __init__(self, entity_type: EntityType) -> None:
        self.entity_type = entity_type
        self._records: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(record) for record in self._records.values()]

    def get(self, record_id: int) -> Optional[Dict[str, Any]]:
        record = self._records.get(record_id)
        return dict(record) if record is not None else None

    def find(self, **criteria: Any) -> Optional[Dict[str, Any]]:
        for record in self.list():
            if all(record.get(key) == value for key, value in criteria.items()):
                return record
        return None

    def create(self, fields: Dict[str, Any], unique: Iterable[str] = ()) -> Dict[str, Any]:
        with self._lock:
            self._check_unique(fields, unique)
            record_id = self._next_id
            self._next_id += 1
            record = {**fields, "id": record_id}
            self._records[record_id] = record
            return dict(record)

    def update(
        self,
        record_id: int,
        fields: Dict[str, Any],
        unique: Iterable[str] = (),
    ) -> Optional[Dict[str, Any]]:
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            self._check_unique(fields, unique, exclude_id=record_id)
            # The identifier is owned by the store and cannot be overwritten.
            updated = {**existing, **fields, "id": record_id}
            self._records[record_id] = updated
            return dict(updated)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def _check_unique(
        self,
        fields: Dict[str, Any],
        unique: Iterable[str],
        exclude_id: Optional[int] = None,
    ) -> None:
        """Raise ``DuplicateRecordError`` if a unique field value is taken.

        Must be called with the collection lock held.
        """
        for field_name in unique:
            if field_name not in fields:
                continue
            value = fields[field_name]
            for record_id, record in self._records.items():
                if record_id != exclude_id and record.get(field_name) == value:
                    raise DuplicateRecordError(self.entity_type.value, field_name, value)


class Storage:
    """Process‑local repository holding one collection per entity type."""

    def __init__(self) -> None:
        self._collections: Dict[EntityType, Collection] = {
            entity_type: Collection(entity_type) for entity_type in EntityType
        }

    def collection(self, entity_type: EntityType) -> Collection:
        return self._collections[EntityType(entity_type)]

    def list(self, entity_type: EntityType) -> List[Dict[str, Any]]:
        """Return all records of ``entity_type`` in insertion order."""
        return self.collection(entity_type).list()

    def get(self, entity_type: EntityType, record_id: int) -> Optional[Dict[str, Any]]:
        """Return the record with ``record_id`` or ``None`` if absent."""
        return self.collection(entity_type).get(record_id)

    def find(self, entity_type: EntityType, **criteria: Any) -> Optional[Dict[str, Any]]:
        """Return the first record whose fields equal ``criteria``."""
        return self.collection(entity_type).find(**criteria)

    def create(
        self,
        entity_type: EntityType,
        fields: Dict[str, Any],
        unique: Iterable[str] = (),
    ) -> Dict[str, Any]:
        """Store ``fields`` under the next identifier and return the record.

        ``unique`` names fields whose values must not already occur in
        the collection; on a clash ``DuplicateRecordError`` is raised
        and nothing is stored.
        """
        record = self.collection(entity_type).create(fields, unique=unique)
        logger.debug("Created %s %s", EntityType(entity_type).value, record["id"])
        return record

    def update(
        self,
        entity_type: EntityType,
        record_id: int,
        fields: Dict[str, Any],
        unique: Iterable[str] = (),
    ) -> Optional[Dict[str, Any]]:
        """Merge ``fields`` over an existing record.

        Fields not present in ``fields`` keep their previous value.
        Returns ``None`` if the record does not exist.
        """
        return self.collection(entity_type).update(record_id, fields, unique=unique)

    def delete(self, entity_type: EntityType, record_id: int) -> bool:
        """Remove a record.  Returns ``True`` if one existed."""
        return self.collection(entity_type).delete(record_id)

    def counts(self) -> Dict[str, int]:
        return {entity_type.value: len(col) for entity_type, col in self._collections.items()}
