"""Supplier pages router.

Successful writes redirect (303) to the list or detail page; rejected forms
come back as 400 with the submitted values so the page can be re-rendered.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.exceptions import ValidationError
from stockroom.core.response import DataResponse, ListResponse, listed
from stockroom.db.base import get_db
from stockroom.routers.forms import form_page, form_rejected, read_fields, see_other
from stockroom.schemas.forms import FormPage
from stockroom.schemas.product import ProductOut, SupplierDetail
from stockroom.schemas.supplier import SupplierOut
from stockroom.services.supplier import SupplierService

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def _svc(session: AsyncSession) -> SupplierService:
    return SupplierService(session)


@router.get("", response_model=ListResponse[SupplierOut])
async def list_suppliers(session: AsyncSession = Depends(get_db)):
    """All suppliers, newest first."""
    suppliers = await _svc(session).list_suppliers()
    return listed([SupplierOut.model_validate(s) for s in suppliers])


@router.get("/new", response_model=DataResponse[FormPage])
async def new_supplier():
    return {"data": form_page()}


@router.post("", status_code=status.HTTP_303_SEE_OTHER)
async def create_supplier(request: Request, session: AsyncSession = Depends(get_db)):
    fields = await read_fields(request)
    try:
        await _svc(session).create_supplier(fields)
    except ValidationError as exc:
        return form_rejected(exc, fields)
    return see_other("/suppliers")


@router.get("/{supplier_id}", response_model=DataResponse[SupplierDetail])
async def show_supplier(supplier_id: str, session: AsyncSession = Depends(get_db)):
    supplier, products = await _svc(session).show_supplier(supplier_id)
    detail = SupplierDetail(
        supplier=SupplierOut.model_validate(supplier),
        products=[ProductOut.model_validate(p) for p in products],
    )
    return {"data": detail}


@router.get("/{supplier_id}/edit", response_model=DataResponse[FormPage])
async def edit_supplier(supplier_id: str, session: AsyncSession = Depends(get_db)):
    supplier = await _svc(session).edit_supplier(supplier_id)
    values = SupplierOut.model_validate(supplier).model_dump(by_alias=True, mode="json")
    return {"data": form_page(values)}


@router.put("/{supplier_id}", status_code=status.HTTP_303_SEE_OTHER)
@router.patch("/{supplier_id}", status_code=status.HTTP_303_SEE_OTHER)
async def update_supplier(
    supplier_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db),
):
    svc = _svc(session)
    # An unknown id is 404 before the body is looked at
    await svc.edit_supplier(supplier_id)
    fields = await read_fields(request)
    try:
        supplier = await svc.update_supplier(supplier_id, fields)
    except ValidationError as exc:
        return form_rejected(exc, {"id": supplier_id, **fields})
    return see_other(f"/suppliers/{supplier.id}")


@router.delete("/{supplier_id}", status_code=status.HTTP_303_SEE_OTHER)
async def delete_supplier(supplier_id: str, session: AsyncSession = Depends(get_db)):
    """Blocked with 400 while any product still references the supplier."""
    await _svc(session).delete_supplier(supplier_id)
    return see_other("/suppliers")
