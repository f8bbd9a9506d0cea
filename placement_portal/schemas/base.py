"""
Base schemas and common response models.
"""
import json
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from placement_portal.core.exceptions import ValidationException

SchemaType = TypeVar("SchemaType", bound="BaseSchema")


class BaseSchema(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )

    @classmethod
    def parse(cls: Type[SchemaType], data: Union[SchemaType, dict]) -> SchemaType:
        """
        Accept an instance or a plain mapping (either key style).

        Raises:
            ValidationException: If the mapping is malformed.
        """
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValidationException(
                message=f"Invalid {cls.__name__} payload",
                details=json.loads(e.json(include_url=False)),
            ) from e


class UpdateSchema(BaseSchema):
    """Partial update payload. Only fields the caller sent are applied."""

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: str
    details: Optional[Any] = None
