"""
Service layer abstraction.

Each service wraps one collection of the in‑memory ``Storage`` and
exposes typed CRUD operations to the API handlers.  Services are
constructed per request around the application's single store, see
``api.deps``.
"""
