"""
Shared base model for API schemas.

The web client consumes camelCase JSON (``studentId``, ``imageUrl``,
``startTime``), while Python code works with snake_case attributes.
``CamelModel`` generates camelCase aliases for every field and accepts
both spellings on input.  FastAPI serialises responses by alias.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
