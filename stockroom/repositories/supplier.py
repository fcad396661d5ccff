"""Supplier repository — validation, persistence and the product delete guard."""


from collections.abc import Mapping
from typing import Any

from stockroom.core.exceptions import SupplierInUseError
from stockroom.domain.product import Product
from stockroom.domain.supplier import Supplier
from stockroom.repositories.base import BaseRepository, validate_fields
from stockroom.schemas.supplier import SupplierIn


class SupplierRepository(BaseRepository[Supplier]):
    model = Supplier
    entity_name = "Supplier"

    async def list_by_name(self) -> list[Supplier]:
        """All suppliers A-Z, used to fill the supplier select on product forms."""
        return await self.list(order_by="name", order="asc")

    async def create(self, fields: SupplierIn | Mapping[str, Any]) -> Supplier:
        data = validate_fields(SupplierIn, fields)
        return await self._insert(**data.model_dump())

    async def update(self, supplier_id: Any, fields: SupplierIn | Mapping[str, Any]) -> Supplier:
        supplier = await self.get(supplier_id)
        data = validate_fields(SupplierIn, fields)
        return await self._assign(supplier, **data.model_dump())

    async def delete(self, supplier_id: Any) -> Supplier:
        """Delete a supplier that no product references.

        The count and the delete share the caller's transaction but are not
        serialised against a product inserted concurrently on another
        connection; the RESTRICT foreign key catches that where enforced.
        """
        supplier = await self.get(supplier_id)
        product_count = await self.count_products(supplier.id)
        if product_count > 0:
            raise SupplierInUseError(product_count)
        return await self._remove(supplier)

    async def count_products(self, supplier_id: str) -> int:
        return await self._products().count({"supplier_id": supplier_id})

    async def products_for(self, supplier_id: Any) -> list[Product]:
        """Products of one supplier, newest first, each carrying its supplier."""
        supplier = await self.get(supplier_id)
        return await self._products().list(filters={"supplier_id": supplier.id})

    def _products(self):
        from stockroom.repositories.product import ProductRepository  # circular: product checks suppliers

        return ProductRepository(self._session)
