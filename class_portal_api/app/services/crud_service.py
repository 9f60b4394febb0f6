"""
Generic services over the in‑memory entity store.

``RecordService`` is the façade between the API handlers and the raw
``Storage``: it translates between Pydantic schemas and the plain
dictionaries kept in the store.  It performs no request validation of
its own (request bodies are validated by FastAPI before they reach
the service).  A missing record is reported as ``None`` (or ``False``
for deletions) and never raises.

``RecordService`` covers list/get/create/delete and suits write‑once
records such as contact messages.  ``CrudService`` adds partial
updates.  Entity services subclass one of them and set the class
attributes describing their entity; they may override ``order`` to
define the order of ``list`` results.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from class_portal_api.app.core.storage import EntityType, Storage


ReadT = TypeVar("ReadT", bound=BaseModel)


class RecordService(Generic[ReadT]):
    """List/get/create/delete for one entity type."""

    entity_type: ClassVar[EntityType]
    read_schema: ClassVar[Type[BaseModel]]
    # Fields whose values must be unique within the collection.
    unique_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, storage: Storage) -> None:
        self.storage = storage
        self.logger = logging.getLogger(self.__class__.__module__)

    async def list(self) -> List[ReadT]:
        records = self.order(self.storage.list(self.entity_type))
        return [self._to_read(record) for record in records]

    async def get(self, record_id: int) -> Optional[ReadT]:
        record = self.storage.get(self.entity_type, record_id)
        if record is None:
            return None
        return self._to_read(record)

    async def create(self, data: BaseModel) -> ReadT:
        fields = self._create_fields(data)
        record = self.storage.create(self.entity_type, fields, unique=self.unique_fields)
        self.logger.info("Created %s %s", self.entity_type.value, record["id"])
        return self._to_read(record)

    async def delete(self, record_id: int) -> bool:
        deleted = self.storage.delete(self.entity_type, record_id)
        if deleted:
            self.logger.info("Deleted %s %s", self.entity_type.value, record_id)
        return deleted

    def order(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Return records in listing order; insertion order by default."""
        return records

    def _create_fields(self, data: BaseModel) -> Dict[str, Any]:
        return data.model_dump()

    def _to_read(self, record: Dict[str, Any]) -> ReadT:
        return self.read_schema.model_validate(record)  # type: ignore[return-value]


class CrudService(RecordService[ReadT]):
    """``RecordService`` plus partial updates."""

    async def update(self, record_id: int, data: BaseModel) -> Optional[ReadT]:
        """Apply the fields supplied in ``data`` to an existing record.

        Fields the client did not send, or sent as null, keep their
        previous value.  Returns ``None`` if the record does not exist.
        """
        fields = data.model_dump(exclude_unset=True, exclude_none=True)
        record = self.storage.update(self.entity_type, record_id, fields, unique=self.unique_fields)
        if record is None:
            return None
        self.logger.info("Updated %s %s (%s)", self.entity_type.value, record_id, ", ".join(sorted(fields)))
        return self._to_read(record)
