"""Schema bases shared by the supplier and product models.

Every schema speaks camelCase on the wire and can be built straight from an
ORM row. Form input models additionally trim strings and drop unknown fields.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class FormInput(CamelModel):
    """Editable fields of a create or update form (snake_case or camelCase keys)."""

    model_config = {"str_strip_whitespace": True, "extra": "ignore"}


class StoredRecord(CamelModel):
    """Identity and system-managed timestamps of a persisted row."""

    id: str
    created_at: datetime
    updated_at: datetime


class HealthResponse(BaseModel):
    status: str = "ok"
    app: str
    env: str
    database: str
