"""Generic async repository plus the form-validation helper shared by all repositories."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from pydantic.alias_generators import to_snake
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.core.exceptions import NotFoundError, ValidationError
from stockroom.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)
SchemaT = TypeVar("SchemaT", bound=BaseModel)


def normalize_id(entity_id: Any) -> str | None:
    """Return the canonical UUID string, or None when *entity_id* is malformed."""
    try:
        return str(uuid.UUID(str(entity_id)))
    except (TypeError, ValueError):
        return None


def validate_fields(schema: type[SchemaT], fields: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Validate a submitted field bag against *schema*.

    Raises :class:`ValidationError` keyed by attribute name (aliases such as
    ``supplierId`` are reported as ``supplier_id``).
    """
    if isinstance(fields, schema):
        return fields
    try:
        return schema.model_validate(dict(fields))
    except SchemaValidationError as exc:
        raise ValidationError(_field_errors(schema, exc)) from exc


def _field_errors(schema: type[BaseModel], exc: SchemaValidationError) -> dict[str, str]:
    names = {(f.alias or name): name for name, f in schema.model_fields.items()}
    errors: dict[str, str] = {}
    for err in exc.errors():
        key = str(err["loc"][0]) if err["loc"] else "form"
        if err["type"] == "missing":
            msg = "This field is required"
        else:
            msg = err["msg"].removeprefix("Value error, ")
        errors.setdefault(names.get(key) or to_snake(key), msg)
    return errors


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over one ORM model.

    Lookups by id accept any value; ids that are not well-formed UUIDs behave
    exactly like ids with no matching row.
    """

    model: type[ModelT]
    entity_name: str

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(self.model)

    def _filtered(self, q, filters: dict[str, Any] | None):
        # Apply simple equality filters
        if filters:
            for col_name, value in filters.items():
                if hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)
        return q

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def find(self, entity_id: Any) -> ModelT | None:
        key = normalize_id(entity_id)
        if key is None:
            return None
        result = await self._session.execute(
            self._base_query().where(self.model.id == key)
        )
        return result.scalars().first()

    async def get(self, entity_id: Any) -> ModelT:
        instance = await self.find(entity_id)
        if instance is None:
            raise NotFoundError(self.entity_name, str(entity_id))
        return instance

    async def list(
        self,
        *,
        order_by: str = "created_at",
        order: str = "desc",
        filters: dict[str, Any] | None = None,
    ) -> list[ModelT]:
        """Return every matching row, ordered by *order_by*."""
        q = self._filtered(self._base_query(), filters)
        col = getattr(self.model, order_by, None)
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())
        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    async def count(self, filters: dict[str, Any] | None = None) -> int:
        q = self._filtered(select(func.count()).select_from(self.model), filters)
        return (await self._session.execute(q)).scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def _insert(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def _assign(self, instance: ModelT, **kwargs: Any) -> ModelT:
        kwargs.pop("id", None)
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self._session.flush()
        return instance

    async def _remove(self, instance: ModelT) -> ModelT:
        await self._session.delete(instance)
        await self._session.flush()
        return instance
