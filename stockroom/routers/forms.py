"""Shared HTTP helpers for the page routers: body parsing, redirects, form re-renders."""


from collections.abc import Iterable
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from stockroom.core.exceptions import ValidationError
from stockroom.domain.supplier import Supplier
from stockroom.middleware.method_override import OVERRIDE_FIELD
from stockroom.schemas.forms import FormPage
from stockroom.schemas.supplier import SupplierOption


async def read_fields(request: Request) -> dict[str, Any]:
    """Return the submitted fields from a urlencoded, multipart or JSON body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as exc:
            raise ValidationError({"form": "Malformed JSON body"}) from exc
        if not isinstance(body, dict):
            raise ValidationError({"form": "Expected a JSON object"})
        data = dict(body)
    else:
        form = await request.form()
        # File parts have no meaning for these forms
        data = {k: v for k, v in form.items() if isinstance(v, str)}
    data.pop(OVERRIDE_FIELD, None)
    return data


def see_other(url: str) -> RedirectResponse:
    """Post/redirect/get: always follow a successful write with a GET."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def supplier_options(suppliers: Iterable[Supplier]) -> list[SupplierOption]:
    return [SupplierOption.model_validate(s) for s in suppliers]


def form_page(
    values: dict[str, Any] | None = None,
    suppliers: Iterable[Supplier] | None = None,
) -> FormPage:
    return FormPage(
        values=values or {},
        suppliers=supplier_options(suppliers) if suppliers is not None else None,
    )


def form_rejected(
    exc: ValidationError,
    values: dict[str, Any],
    suppliers: Iterable[Supplier] | None = None,
) -> JSONResponse:
    """400 re-render of a form with the values the user submitted."""
    page = form_page(values, suppliers)
    page.errors = exc.fields
    page.message = exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content=page.model_dump(by_alias=True, mode="json"),
    )
