"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  supplier.py  — goods providers
  product.py   — inventory items, each owned by one supplier
  mixins.py    — shared TimestampMixin
"""

from stockroom.domain.product import Product
from stockroom.domain.supplier import Supplier

__all__ = [
    "Product",
    "Supplier",
]
