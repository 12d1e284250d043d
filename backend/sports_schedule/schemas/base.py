"""Shared schema building blocks — camelCase base model and validated field types."""

from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

from sports_schedule.core.errors import InvalidDateError
from sports_schedule.core.parse_inputs import is_valid_entity_id, parse_calendar_date


class CamelModel(BaseModel):
    """Base for all API schemas: camelCase on the wire, attributes from ORM rows."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _check_entity_id(value: str) -> str:
    if not is_valid_entity_id(value):
        raise ValueError("must be a 24-character hex identifier")
    return value.lower()


def _coerce_date(value: object) -> object:
    if isinstance(value, str):
        try:
            return parse_calendar_date(value)
        except InvalidDateError as e:
            raise ValueError(e.message)
    return value


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("cannot be empty or whitespace")
    return value


def _lower(value: str) -> str:
    return value.lower()


EntityIdStr = Annotated[str, AfterValidator(_check_entity_id)]
CalendarDate = Annotated[date, BeforeValidator(_coerce_date)]
RequiredText = Annotated[str, AfterValidator(_strip_required)]
LowerText = Annotated[
    str, AfterValidator(_strip_required), AfterValidator(_lower),
]


class CreatedResponse(CamelModel):
    message: str
    id: str


class MessageResponse(CamelModel):
    message: str
