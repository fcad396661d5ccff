"""Form view model for new/edit pages and for 400 re-renders."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from stockroom.schemas.common import CamelModel
from stockroom.schemas.supplier import SupplierOption


class FormPage(CamelModel):
    values: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
    message: str | None = None
    # Only set on product forms
    suppliers: list[SupplierOption] | None = None
