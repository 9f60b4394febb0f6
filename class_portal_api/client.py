"""Class portal API client.

This module defines a small client wrapper around the class portal
REST API.  It uses the ``requests`` library and mirrors the resource
layout of the server:

* :meth:`ClassPortalClient.list` / :meth:`ClassPortalClient.get` – read
  records of a resource such as ``announcements`` or ``core-members``.
* :meth:`ClassPortalClient.create`, :meth:`ClassPortalClient.update`,
  :meth:`ClassPortalClient.delete` – modify records.
* :meth:`ClassPortalClient.finance_summary` – fetch the finance summary.
* :meth:`ClassPortalClient.send_contact_message` – submit the contact form.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  Request bodies and
responses use the camelCase field names of the API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]

RESOURCES = (
    "core-members",
    "class-members",
    "announcements",
    "schedules",
    "assignments",
    "transactions",
    "contact",
    "users",
)


class ClassPortalClient:
    """Client for interacting with the class portal API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix under which the API is mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/schedules``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _path(resource: str, record_id: Any | None = None) -> str:
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource: {resource}")
        if record_id is None:
            return f"/{resource}"
        return f"/{resource}/{record_id}"

    # ------------------------------------------------------------------
    # Generic resource operations
    # ------------------------------------------------------------------
    def list(self, resource: str) -> Tuple[List[Dict[str, Any]], Error]:
        """Retrieve all records of ``resource``."""
        data, error = self._request("GET", self._path(resource))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get(self, resource: str, record_id: Any) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", self._path(resource, record_id))

    def create(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("POST", self._path(resource), json_body=payload)

    def update(
        self, resource: str, record_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Send a partial update; only the keys in ``payload`` change."""
        return self._request("PUT", self._path(resource, record_id), json_body=payload)

    def delete(self, resource: str, record_id: Any) -> Tuple[bool, Error]:
        _, error = self._request("DELETE", self._path(resource, record_id))
        return error is None, error

    # ------------------------------------------------------------------
    # Finance and contact
    # ------------------------------------------------------------------
    def finance_summary(self) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Return ``{totalBalance, totalIncome, totalExpense, duesCollected}``."""
        return self._request("GET", "/finance-summary")

    def send_contact_message(
        self,
        *,
        name: str,
        email: str,
        subject: str,
        message: str,
        urgent: bool = False,
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        payload = {"name": name, "email": email, "subject": subject, "message": message, "urgent": urgent}
        return self._request("POST", "/contact", json_body=payload)
