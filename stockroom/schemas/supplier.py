"""Supplier Pydantic schemas (form input model and view models)."""


import re

from pydantic import Field, field_validator

from stockroom.schemas.common import CamelModel, FormInput, StoredRecord

PHONE_RE = re.compile(r"^[0-9\-+\s()]+$")

class SupplierIn(FormInput):
    """Editable supplier fields, as submitted by the create and update forms."""

    name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=255)
    phone: str = Field(min_length=1)

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        if not PHONE_RE.match(value):
            raise ValueError("Please enter a valid phone number")
        return value

class SupplierOut(StoredRecord):
    name: str
    address: str
    phone: str

class SupplierSummary(CamelModel):
    """Supplier fields attached to every product read."""

    id: str
    name: str
    address: str
    phone: str

class SupplierOption(CamelModel):
    """One entry of the supplier selection list on product forms."""

    id: str
    name: str
