"""Product service — product use cases on top of ProductRepository.

Form pages (new, edit, and 400 re-renders) also need the supplier list; when
that fetch fails the whole use case fails with InternalError.

Write use cases commit before returning, inside the store-error boundary.
"""


import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.domain.product import Product
from stockroom.domain.supplier import Supplier
from stockroom.repositories.product import ProductRepository
from stockroom.repositories.supplier import SupplierRepository
from stockroom.services.base import store_errors

logger = logging.getLogger(__name__)

class ProductService:
    def __init__(self, session: AsyncSession):
        self._session = session
        self._repo = ProductRepository(session)
        self._suppliers = SupplierRepository(session)

    async def list_products(self) -> list[Product]:
        with store_errors("fetching products"):
            return await self._repo.list()

    async def supplier_options(self) -> list[Supplier]:
        with store_errors("loading suppliers"):
            return await self._suppliers.list_by_name()

    async def new_product(self) -> list[Supplier]:
        return await self.supplier_options()

    async def create_product(self, fields: Mapping[str, Any]) -> Product:
        with store_errors("creating product"):
            product = await self._repo.create(fields)
            await self._session.commit()
        logger.info("Product created: %s (%s)", product.id, product.name)
        return product

    async def show_product(self, product_id: str) -> Product:
        with store_errors("fetching product"):
            return await self._repo.get(product_id)

    async def edit_product(self, product_id: str) -> tuple[Product, list[Supplier]]:
        # One session cannot run two statements at once, so the reads are sequential
        with store_errors("fetching product for edit"):
            product = await self._repo.get(product_id)
            suppliers = await self._suppliers.list_by_name()
        return product, suppliers

    async def update_product(self, product_id: str, fields: Mapping[str, Any]) -> Product:
        with store_errors("updating product"):
            product = await self._repo.update(product_id, fields)
            await self._session.commit()
        logger.info("Product updated: %s", product.id)
        return product

    async def delete_product(self, product_id: str) -> Product:
        with store_errors("deleting product"):
            product = await self._repo.delete(product_id)
            await self._session.commit()
        logger.info("Product deleted: %s", product.id)
        return product
