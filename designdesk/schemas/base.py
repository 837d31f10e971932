"""
Shared base model for persisted records.

The persisted document uses camelCase keys (e.g. ``skillId``, ``lastUpdated``)
while Python code works with snake_case attributes. Records keep any fields
they don't declare so that editor-specific extras survive export/import.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for every entity stored inside the AppData document."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_json_dict(self) -> dict:
        """Dump with document (camelCase) keys and JSON-safe values."""
        return self.model_dump(by_alias=True, mode="json")
