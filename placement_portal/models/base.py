"""
Base record with the fields and serialization every entity shares.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """
    Base record with an integer ID.
    All entities inherit from this.

    Python attributes are snake_case; stored JSON and API payloads use
    the camelCase aliases (posted_by <-> postedBy).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        validate_assignment=True,
    )

    id: int

    def to_storage(self) -> Dict[str, Any]:
        """JSON-ready dict in the stored (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True)
