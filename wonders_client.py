"""Wonders API client.

A thin wrapper around the Wonders REST API using the ``requests``
library.  Every high-level method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with the keys ``status_code`` and
``message``.  ``status_code`` is ``None`` when the request never
reached the server.

* :meth:`WondersAPI.list_wonders` – return every wonder.
* :meth:`WondersAPI.get_wonder` – fetch a single wonder by id.
* :meth:`WondersAPI.create_wonder` – add a wonder and return it.
* :meth:`WondersAPI.update_wonder` – replace an existing wonder.
* :meth:`WondersAPI.delete_wonder` – remove a wonder.
* :meth:`WondersAPI.random_wonder` – fetch a random wonder.
* :meth:`WondersAPI.get_info` – service name, version and size.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class WondersAPI:
    """Client for interacting with the Wonders API."""

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
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the routes are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        prefix = api_prefix.strip("/")
        self.api_prefix = f"/{prefix}" if prefix else ""
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
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/wonders``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty responses.
        """
        url = f"{self.base_url}{self.api_prefix}{path}"
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
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
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
    # Wonder operations
    # ------------------------------------------------------------------
    def list_wonders(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/wonders")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_wonder(self, wonder_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/wonders/{wonder_id}")

    def random_wonder(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/wonders/random")

    def create_wonder(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a wonder.

        Args:
            payload: Wonder fields; any ``id`` is ignored by the server.
        Returns:
            A tuple ``(wonder, error)`` where ``wonder`` includes the
            assigned id.
        """
        return self._request("POST", "/wonders", json_body=payload)

    def update_wonder(self, wonder_id: Any, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace all fields of a wonder.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("PUT", f"/wonders/{wonder_id}", json_body=payload)
        if error:
            return False, error
        return True, None

    def delete_wonder(self, wonder_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/wonders/{wonder_id}")
        if error:
            return False, error
        return True, None

    def get_info(self) -> Tuple[Dict[str, Any], Optional[Error]]:
        data, error = self._request("GET", "/info")
        if error:
            return {}, error
        return (data if isinstance(data, dict) else {}), None
