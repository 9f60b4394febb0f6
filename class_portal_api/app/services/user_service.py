"""
Service for user accounts.

Usernames are unique.  Passwords are opaque strings stored as given;
no hashing or login flow is provided.
"""

from typing import Optional

from class_portal_api.app.core.storage import EntityType
from class_portal_api.app.schemas.user import UserRead
from class_portal_api.app.services.crud_service import CrudService


class UserService(CrudService[UserRead]):
    entity_type = EntityType.USER
    read_schema = UserRead
    unique_fields = ("username",)

    async def get_by_username(self, username: str) -> Optional[UserRead]:
        record = self.storage.find(self.entity_type, username=username)
        if record is None:
            return None
        return self._to_read(record)
