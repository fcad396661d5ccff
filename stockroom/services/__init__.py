"""Services package — all business logic lives here, never in routers.

Files:
  base.py      — store-error classification shared by all services
  supplier.py  — supplier use cases (list, create, show, edit, update, delete)
  product.py   — product use cases, including the supplier options for forms

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
