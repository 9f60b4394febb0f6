"""Service for class announcements, listed newest first."""

from typing import Any, Dict, List

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.announcement import AnnouncementRead
from class_portal_api.app.services.crud_service import CrudService


class AnnouncementService(CrudService[AnnouncementRead]):
    entity_type = EntityType.ANNOUNCEMENT
    read_schema = AnnouncementRead

    def order(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        # Newest first; of two announcements on the same day the later one wins.
        return sorted(records, key=lambda r: (r["date"], r["id"]), reverse=True)
