"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds the
configuration, logging setup and the in‑memory entity store,
``schemas`` the Pydantic request/response models, ``services`` the
CRUD façade over the store and ``api`` the FastAPI routers that expose
it over HTTP.
"""

from .main import app  # noqa: F401
