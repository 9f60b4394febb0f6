"""
Top‑level package for the Class Portal API.

The web application lives in the ``app`` subpackage and can be
imported as ``class_portal_api.app.main``.  A small HTTP client for
the API is provided in :mod:`class_portal_api.client`.
"""

from .client import ClassPortalClient

__all__ = ["ClassPortalClient"]
