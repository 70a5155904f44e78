"""Customer API client.

This module defines a simple client wrapper around the REST API served
by ``customer_api``.  It uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`list_customers` – return all customers, optionally filtered by name.
* :meth:`get_customer` – fetch a single customer by its identifier.
* :meth:`create_customer` – create a customer and return it with its id.
* :meth:`update_customer` – replace a customer's names.
* :meth:`delete_customer` – delete a customer and return the removed record.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  Transport failures
(connection refused, timeouts) are reported with ``status_code=None``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CustomerAPI:
    """Client for interacting with the customer API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the versioned API is mounted under.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included in
                all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API root (e.g. ``/customers``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            or ``None`` for empty responses.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
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

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self, name: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all customers.

        Args:
            name: Optional case‑insensitive name filter.
        Returns:
            A tuple ``(customers, error)``.  ``customers`` is empty on failure.
        """
        params = {"name": name} if name else None
        data, error = self._request("GET", "/customers", params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/customers/{customer_id}")

    def create_customer(
        self, first_name: str, last_name: str, customer_id: Optional[int] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a customer.

        Args:
            first_name: First name of the new customer.
            last_name: Last name of the new customer.
            customer_id: Explicit id; only accepted by servers that allow
                client supplied ids.
        Returns:
            A tuple ``(customer, error)``; ``customer`` includes the
            assigned ``id``.
        """
        payload: Dict[str, Any] = {"firstName": first_name, "lastName": last_name}
        if customer_id is not None:
            payload["id"] = customer_id
        return self._request("POST", "/customers", json_body=payload)

    def update_customer(self, customer_id: int, first_name: str, last_name: str) -> Tuple[bool, Optional[Error]]:
        """Replace a customer's names.

        Returns:
            A tuple ``(success, error)``.  A 409 error means the record
            was modified concurrently and the call may be retried.
        """
        payload = {"id": customer_id, "firstName": first_name, "lastName": last_name}
        _, error = self._request("PUT", f"/customers/{customer_id}", json_body=payload)
        if error:
            return False, error
        return True, None

    def delete_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/customers/{customer_id}")
