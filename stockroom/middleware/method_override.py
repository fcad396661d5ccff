"""HTTP method override for HTML forms, which can only send GET and POST."""


import logging
from collections.abc import Callable

from fastapi import Request, Response
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import Message

logger = logging.getLogger(__name__)

OVERRIDE_FIELD = "_method"
OVERRIDE_HEADER = "x-http-method-override"
_ALLOWED = {"PUT", "PATCH", "DELETE"}
_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """Dispatch a POST as PUT/PATCH/DELETE.

    The override is read, in order, from the ``X-HTTP-Method-Override`` header,
    the ``_method`` query parameter, and the ``_method`` field of a urlencoded
    or multipart body. Any other value is ignored and the request stays a POST.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "POST":
            override = await self._requested_method(request)
            if override in _ALLOWED:
                logger.debug("Method override POST -> %s for %s", override, request.url.path)
                request.scope["method"] = override
        return await call_next(request)

    async def _requested_method(self, request: Request) -> str | None:
        value = request.headers.get(OVERRIDE_HEADER) or request.query_params.get(OVERRIDE_FIELD)
        if not value and request.headers.get("content-type", "").startswith(_FORM_TYPES):
            value = await _form_field(request, OVERRIDE_FIELD)
        return value.strip().upper() if isinstance(value, str) and value else None


async def _form_field(request: Request, name: str):
    # body() is cached and replayed to the endpoint; the form is parsed from a copy
    body = await request.body()

    async def replay() -> Message:
        return {"type": "http.request", "body": body, "more_body": False}

    try:
        async with Request(request.scope, replay).form() as form:
            return form.get(name)
    except HTTPException:
        # Malformed multipart; the endpoint reports it when it reads the body
        return None
