"""Supplier service — supplier use cases on top of SupplierRepository.

Write use cases commit before returning, inside the store-error boundary.
"""


import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.domain.product import Product
from stockroom.domain.supplier import Supplier
from stockroom.repositories.supplier import SupplierRepository
from stockroom.services.base import store_errors

logger = logging.getLogger(__name__)

class SupplierService:
    def __init__(self, session: AsyncSession):
        self._session = session
        self._repo = SupplierRepository(session)

    async def list_suppliers(self) -> list[Supplier]:
        with store_errors("fetching suppliers"):
            return await self._repo.list()

    async def create_supplier(self, fields: Mapping[str, Any]) -> Supplier:
        with store_errors("creating supplier"):
            supplier = await self._repo.create(fields)
            await self._session.commit()
        logger.info("Supplier created: %s (%s)", supplier.id, supplier.name)
        return supplier

    async def show_supplier(self, supplier_id: str) -> tuple[Supplier, list[Product]]:
        with store_errors("fetching supplier"):
            supplier = await self._repo.get(supplier_id)
            products = await self._repo.products_for(supplier.id)
        logger.debug("Found supplier %s with %d products", supplier.name, len(products))
        return supplier, products

    async def edit_supplier(self, supplier_id: str) -> Supplier:
        with store_errors("fetching supplier for edit"):
            return await self._repo.get(supplier_id)

    async def update_supplier(self, supplier_id: str, fields: Mapping[str, Any]) -> Supplier:
        with store_errors("updating supplier"):
            supplier = await self._repo.update(supplier_id, fields)
            await self._session.commit()
        logger.info("Supplier updated: %s", supplier.id)
        return supplier

    async def delete_supplier(self, supplier_id: str) -> Supplier:
        with store_errors("deleting supplier"):
            supplier = await self._repo.delete(supplier_id)
            await self._session.commit()
        logger.info("Supplier deleted: %s", supplier.id)
        return supplier
