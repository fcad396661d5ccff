"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel, FormInput and StoredRecord bases + HealthResponse
  supplier.py  — supplier input model and view models
  product.py   — product input model and view models
  forms.py     — FormPage view model shared by new/edit forms and 400 re-renders
"""
