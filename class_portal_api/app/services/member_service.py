"""
Services for the class directory.

Core members (officers) and regular class members live in separate
collections.  A student number may appear once per collection, so
creating or renaming a member onto a taken ``student_id`` raises
``DuplicateRecordError``.
"""

from typing import Any, Dict, List

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.class_member import ClassMemberRead
from class_portal_api.app.schemas.core_member import CoreMemberRead
from class_portal_api.app.services.crud_service import CrudService


# Display order of the officer cards on the home page.
ROLE_ORDER = {"president": 0, "secretary": 1, "treasurer": 2}


class CoreMemberService(CrudService[CoreMemberRead]):
    entity_type = EntityType.CORE_MEMBER
    read_schema = CoreMemberRead
    unique_fields = ("student_id",)

    def order(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return sorted(records, key=lambda r: (ROLE_ORDER.get(r.get("role"), len(ROLE_ORDER)), r["id"]))


class ClassMemberService(CrudService[ClassMemberRead]):
    entity_type = EntityType.CLASS_MEMBER
    read_schema = ClassMemberRead
    unique_fields = ("student_id",)
