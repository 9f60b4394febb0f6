"""Domain exceptions raised by the entity store."""

from typing import Any


class DuplicateRecordError(Exception):
    """A record with the same value in a unique field already exists."""

    def __init__(self, entity_type: str, field_name: str, value: Any) -> None:
        self.entity_type = entity_type
        self.field_name = field_name
        self.value = value
        super().__init__(f"{entity_type} with {field_name}={value!r} already exists")
