"""Service for finance transactions, listed newest first."""

from typing import Any, Dict, List

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.transaction import TransactionRead
from class_portal_api.app.services.crud_service import CrudService


class TransactionService(CrudService[TransactionRead]):
    entity_type = EntityType.TRANSACTION
    read_schema = TransactionRead

    def order(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return sorted(records, key=lambda r: (r["date"], r["id"]), reverse=True)
