"""Items API client.

A thin wrapper around the Items REST API built on ``requests``.  It
exposes one method per endpoint:

* :meth:`ItemsAPIClient.list_items` – return every stored item.
* :meth:`ItemsAPIClient.get_item` – fetch a single item by its identifier.
* :meth:`ItemsAPIClient.create_item` – create an item and return it.
* :meth:`ItemsAPIClient.update_item` – replace an item's attributes.
* :meth:`ItemsAPIClient.delete_item` – delete an item.

Any non-2xx response raises :class:`ItemsAPIError` carrying the HTTP
status, the error ``kind`` reported by the server and its ``detail``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "/api/v1/items"


class ItemsAPIError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, detail: str, kind: Optional[str] = None) -> None:
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
        self.kind = kind


class ItemsAPIClient:
    """Client for the Items API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        prefix: str = DEFAULT_PREFIX,
        timeout: float = 10.0,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            prefix: Path under which the item routes are mounted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.prefix = "/" + prefix.strip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _headers(self, request_id: Optional[str] = None) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if request_id:
            headers["X-Request-ID"] = request_id
        return headers

    def _url(self, item_id: Optional[str] = None) -> str:
        if item_id is None:
            return f"{self.base_url}{self.prefix}/"
        return f"{self.base_url}{self.prefix}/{item_id}"

    def _request(
        self,
        method: str,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> Optional[Any]:
        logger.debug("%s %s", method, url)
        response = self.session.request(
            method,
            url,
            json=json_body,
            headers=self._headers(request_id),
            timeout=self.timeout,
        )
        if response.status_code >= 400:
            detail, kind = self._decode_error(response)
            logger.warning("%s %s failed with %s: %s", method, url, response.status_code, detail)
            raise ItemsAPIError(response.status_code, detail, kind)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _decode_error(response: requests.Response) -> tuple:
        try:
            payload = response.json()
        except ValueError:
            return response.text or response.reason or "", None
        if isinstance(payload, dict):
            return str(payload.get("detail", "")), payload.get("kind")
        return str(payload), None

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def list_items(self, request_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return self._request("GET", self._url(), request_id=request_id) or []

    def get_item(self, item_id: str, request_id: Optional[str] = None) -> Dict[str, Any]:
        return self._request("GET", self._url(item_id), request_id=request_id)

    def create_item(self, data: Dict[str, Any], request_id: Optional[str] = None) -> Dict[str, Any]:
        return self._request("POST", self._url(), json_body=data, request_id=request_id)

    def update_item(self, item_id: str, data: Dict[str, Any], request_id: Optional[str] = None) -> None:
        self._request("PUT", self._url(item_id), json_body=data, request_id=request_id)

    def delete_item(self, item_id: str, request_id: Optional[str] = None) -> None:
        self._request("DELETE", self._url(item_id), request_id=request_id)
