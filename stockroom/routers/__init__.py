"""Routers package — HTTP endpoint definitions.

Files:
  forms.py      — request-body parsing and response helpers shared by the page routers
  suppliers.py  — /suppliers pages
  products.py   — /products pages

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to stockroom/services/.
"""
