"""
Base schemas with common functionality.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Optional, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from arm_backend.core.utils import ensure_utc, format_money

T = TypeVar('T', bound='BaseSchema')

# Amounts go over the wire as "12.50"
Money = Annotated[Decimal, PlainSerializer(format_money, return_type=str, when_used="json")]

# SQLite returns naive datetimes; everything leaving the API is UTC-aware
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


def not_null(*fields: str):
    """
    Validator for partial-update schemas: the listed fields may be left
    out of the body but not sent as null.
    """
    def check(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} must not be null")
        return value
    return field_validator(*fields)(check)


class BaseSchema(BaseModel):
    """Base schema with common functionality for all schemas"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @classmethod
    def from_orm_model(cls: Type[T], orm_model: Any) -> T:
        """Create a schema instance from an ORM model"""
        return cls.model_validate(orm_model)


class SuccessResponse(BaseSchema):
    success: bool = True
    message: Optional[str] = None
