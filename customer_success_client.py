"""Customer Success Platform API client.

This module defines a small client wrapper around the customer REST
API served by :mod:`customer_success_api`.  It uses the ``requests``
library internally to make HTTP calls.

The client exposes high‑level methods for every customer operation:

* :meth:`list_customers` – return all customers in creation order.
* :meth:`create_customer` – create a customer from a name and email.
* :meth:`get_customer` – fetch a single customer by its identifier.
* :meth:`get_churn_score` – fetch the placeholder churn score of a customer.

None of the methods raise on HTTP or network failures.  Each returns a
tuple ``(data, error)`` where exactly one element is ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CustomerSuccessAPI:
    """Client for interacting with the customer API."""

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
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            api_prefix: Prefix the API router is mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/customers``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
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
                    detail = err_json.get("detail") if isinstance(err_json, dict) else None
                    message = detail if isinstance(detail, str) else str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        """Retrieve all customers in the order they were created."""
        return self._request("GET", "/customers")

    def create_customer(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a customer.

        The server assigns the ``id`` and ``healthScore``.  Calling this
        twice with the same arguments creates two customers.
        """
        return self._request("POST", "/customers", json_body={"name": name, "email": email})

    def get_customer(self, customer_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch one customer.  A missing id yields a 404 error tuple."""
        return self._request("GET", f"/customers/{customer_id}")

    def get_churn_score(self, customer_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the placeholder churn score for one customer.

        The returned dictionary carries ``placeholder: true``; the value
        comes from an untrained network and is not a prediction.
        """
        return self._request("GET", f"/customers/{customer_id}/churn")
