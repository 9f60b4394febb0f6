"""
Service for messages sent through the contact form.

Messages are write‑once: the service is a ``RecordService`` without
an update operation, and the ``created_at`` timestamp is stamped here
in UTC when the message is stored.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.contact import ContactMessageRead
from class_portal_api.app.services.crud_service import RecordService


class ContactService(RecordService[ContactMessageRead]):
    entity_type = EntityType.CONTACT_MESSAGE
    read_schema = ContactMessageRead

    def _create_fields(self, data: BaseModel) -> Dict[str, Any]:
        fields = data.model_dump()
        fields["created_at"] = datetime.now(timezone.utc)
        return fields
