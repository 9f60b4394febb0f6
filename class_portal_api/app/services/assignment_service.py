"""Service for assignments, kept in insertion order."""

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.assignment import AssignmentRead
from class_portal_api.app.services.crud_service import CrudService


class AssignmentService(CrudService[AssignmentRead]):
    entity_type = EntityType.ASSIGNMENT
    read_schema = AssignmentRead
