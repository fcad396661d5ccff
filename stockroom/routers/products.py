"""Product pages router.

Form pages carry the supplier options; if those cannot be loaded the request
fails with 500 rather than rendering a form without them.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.exceptions import ValidationError
from stockroom.core.response import DataResponse, ListResponse, listed
from stockroom.db.base import get_db
from stockroom.routers.forms import form_page, form_rejected, read_fields, see_other
from stockroom.schemas.forms import FormPage
from stockroom.schemas.product import ProductOut
from stockroom.services.product import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


def _svc(session: AsyncSession) -> ProductService:
    return ProductService(session)


@router.get("", response_model=ListResponse[ProductOut])
async def list_products(session: AsyncSession = Depends(get_db)):
    """All products, newest first, each with its supplier's name, address and phone."""
    products = await _svc(session).list_products()
    return listed([ProductOut.model_validate(p) for p in products])


@router.get("/new", response_model=DataResponse[FormPage])
async def new_product(session: AsyncSession = Depends(get_db)):
    suppliers = await _svc(session).new_product()
    return {"data": form_page(suppliers=suppliers)}


@router.post("", status_code=status.HTTP_303_SEE_OTHER)
async def create_product(request: Request, session: AsyncSession = Depends(get_db)):
    svc = _svc(session)
    fields = await read_fields(request)
    try:
        await svc.create_product(fields)
    except ValidationError as exc:
        return form_rejected(exc, fields, await svc.supplier_options())
    return see_other("/products")


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def show_product(product_id: str, session: AsyncSession = Depends(get_db)):
    product = await _svc(session).show_product(product_id)
    return {"data": ProductOut.model_validate(product)}


@router.get("/{product_id}/edit", response_model=DataResponse[FormPage])
async def edit_product(product_id: str, session: AsyncSession = Depends(get_db)):
    product, suppliers = await _svc(session).edit_product(product_id)
    values = ProductOut.model_validate(product).model_dump(by_alias=True, mode="json")
    return {"data": form_page(values, suppliers)}


@router.put("/{product_id}", status_code=status.HTTP_303_SEE_OTHER)
@router.patch("/{product_id}", status_code=status.HTTP_303_SEE_OTHER)
async def update_product(
    product_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    svc = _svc(session)
    # An unknown id is 404 before the body is looked at
    await svc.show_product(product_id)
    fields = await read_fields(request)
    try:
        product = await svc.update_product(product_id, fields)
    except ValidationError as exc:
        return form_rejected(exc, {"id": product_id, **fields}, await svc.supplier_options())
    return see_other(f"/products/{product.id}")


@router.delete("/{product_id}", status_code=status.HTTP_303_SEE_OTHER)
async def delete_product(product_id: str, session: AsyncSession = Depends(get_db)):
    await _svc(session).delete_product(product_id)
    return see_other("/products")
