"""
Service for the weekly schedule.

Entries are listed in weekday order (Monday first) and by start time
within a day, regardless of the order in which they were created.
"""

from typing import Any, Dict, List

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.schedule import WEEKDAYS, ScheduleRead
from class_portal_api.app.services.crud_service import CrudService


DAY_INDEX = {day: index for index, day in enumerate(WEEKDAYS)}


class ScheduleService(CrudService[ScheduleRead]):
    entity_type = EntityType.SCHEDULE
    read_schema = ScheduleRead

    def order(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return sorted(records, key=lambda r: (DAY_INDEX[r["day"]], r["start_time"], r["id"]))
