"""Module: common."""

from decimal import Decimal
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Bounds of the store's INTEGER columns.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Ids and counts that land in an INTEGER column; out-of-range values are a 400, not a driver error.
StoreInt = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]
PathId = Annotated[int, Path(ge=INT_MIN, le=INT_MAX)]

# Exact amounts in the store and in Python, plain numbers on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# Payloads travel as camelCase JSON; snake_case names are accepted on input too.
class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def normalize_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned if cleaned else None
