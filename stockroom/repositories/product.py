"""Product repository — validation, supplier reference checks and the supplier join."""


from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import contains_eager

from stockroom.core.exceptions import ValidationError
from stockroom.domain.product import Product
from stockroom.repositories.base import BaseRepository, validate_fields
from stockroom.repositories.supplier import SupplierRepository
from stockroom.schemas.product import ProductIn


class ProductRepository(BaseRepository[Product]):
    model = Product
    entity_name = "Product"

    def _base_query(self):
        """Every product read carries its supplier through an explicit outer join.

        ``populate_existing`` makes a re-read after an update pick up a changed
        supplier instead of the one already in the identity map.
        """
        return (
            super()
            ._base_query()
            .outerjoin(Product.supplier)
            .options(contains_eager(Product.supplier))
            .execution_options(populate_existing=True)
        )

    async def _validated(self, fields: ProductIn | Mapping[str, Any]) -> ProductIn:
        data = validate_fields(ProductIn, fields)
        supplier = await SupplierRepository(self._session).find(data.supplier_id)
        if supplier is None:
            raise ValidationError({"supplier_id": "Supplier does not exist"})
        # Store the canonical id form
        return data.model_copy(update={"supplier_id": supplier.id})

    async def create(self, fields: ProductIn | Mapping[str, Any]) -> Product:
        data = await self._validated(fields)
        product = await self._insert(**data.model_dump())
        return await self.get(product.id)

    async def update(self, product_id: Any, fields: ProductIn | Mapping[str, Any]) -> Product:
        product = await self.get(product_id)
        data = await self._validated(fields)
        await self._assign(product, **data.model_dump())
        return await self.get(product.id)

    async def delete(self, product_id: Any) -> Product:
        product = await self.get(product_id)
        return await self._remove(product)
