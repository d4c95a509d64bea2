"""
Shared base model for persisted records.

``PascalModel`` serialises field names in PascalCase and accepts any
spelling of a field name on input: ``CustomerId``, ``customerid``,
``customer_id`` and ``customerId`` all populate ``customer_id``.

All datetimes are naive local wall-clock times.  Values that arrive
with a UTC offset (``...Z`` or ``...+01:00``) are converted to local
time and stripped of their tzinfo, so stored and server-side times
can always be compared and sorted.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator, model_validator
from pydantic.alias_generators import to_pascal


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


class PascalModel(BaseModel):
    model_config = {
        "alias_generator": to_pascal,
        "populate_by_name": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[_fold(alias)] = alias
        matched = {}
        for key, value in data.items():
            target = aliases.get(_fold(key), key) if isinstance(key, str) else key
            # First spelling wins when a document carries the same field twice.
            matched.setdefault(target, value)
        return matched

    @field_validator("*", mode="after")
    @classmethod
    def _naive_local_datetimes(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return to_local_naive(value)
        return value
