"""Product Pydantic schemas (form input model and view models)."""


from typing import Any

from pydantic import Field, field_validator

from stockroom.schemas.common import CamelModel, FormInput, StoredRecord
from stockroom.schemas.supplier import SupplierOut, SupplierSummary

class ProductIn(FormInput):
    """Editable product fields. Accepts ``supplier_id`` or ``supplierId``."""

    name: str = Field(min_length=1, max_length=100)
    price: float = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(default=0, ge=0)
    supplier_id: str = Field(min_length=1)

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_quantity(cls, value: Any) -> Any:
        # HTML forms submit an empty string for an untouched number input
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

class ProductOut(StoredRecord):
    name: str
    price: float
    quantity: int
    supplier_id: str
    supplier: SupplierSummary | None = None

class SupplierDetail(CamelModel):
    """Supplier detail page: the supplier and the products it provides."""

    supplier: SupplierOut
    products: list[ProductOut]
