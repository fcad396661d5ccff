"""SQLAlchemy ORM model for Suppliers."""

from __future__ import annotations

import uuid
from typing import List

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stockroom.db.base import Base
from stockroom.domain.mixins import TimestampMixin


class Supplier(Base, TimestampMixin):
    __tablename__ = "suppliers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)

    # Reverse side only; products are read through ProductRepository, never through this attribute
    products: Mapped[List["Product"]] = relationship(
        back_populates="supplier", lazy="raise", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<Supplier {self.id} - {self.name}>"
