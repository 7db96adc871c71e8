from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import ResourceError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    token: Optional[str] = None
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS


class ResourceClient:
    """Generic list/create/update/delete over `{base_url}/api/{resource}`.

    Responses may come bare or wrapped (`{"items": [...]}` for lists,
    `{"item": {...}}` for single records); both shapes are accepted.
    Failures are raised as ResourceError and never retried here.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    def _url(self, resource: str, item_id: Optional[str] = None) -> str:
        base = self._config.base_url.rstrip("/")
        url = f"{base}/api/{resource}"
        if item_id is not None:
            url = f"{url}/{quote(str(item_id), safe='')}"
        return url

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    def _request(self, method: str, url: str, *, json: Any = None, params: Optional[dict] = None) -> Any:
        logger.debug("%s %s", method, url)
        try:
            res = self._session.request(
                method,
                url,
                json=json,
                params=params,
                headers=self._headers(),
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ResourceError(f"Request failed ({e.__class__.__name__})") from e

        body = self._parse_body(res)
        if not res.ok:
            if isinstance(body, str) and body:
                msg = body
            elif isinstance(body, dict) and body.get("error"):
                msg = str(body["error"])
            else:
                msg = f"Request failed ({res.status_code})"
            logger.warning("%s %s -> %s: %s", method, url, res.status_code, msg)
            raise ResourceError(msg, status_code=res.status_code)
        return body

    @staticmethod
    def _parse_body(res: requests.Response) -> Any:
        text = res.text
        if not text:
            return None
        try:
            return res.json()
        except ValueError:
            return text

    @staticmethod
    def _unwrap_item(body: Any) -> Any:
        if isinstance(body, dict) and "item" in body:
            return body["item"]
        return body

    def list(self, resource: str, *, q: Optional[str] = None) -> list:
        params = {"q": q} if q else None
        body = self._request("GET", self._url(resource), params=params)
        if isinstance(body, list):
            return body
        if isinstance(body, dict):
            return list(body.get("items") or [])
        return []

    def create(self, resource: str, payload: dict) -> Any:
        return self._unwrap_item(self._request("POST", self._url(resource), json=payload))

    def update(self, resource: str, item_id: str, payload: dict) -> Any:
        return self._unwrap_item(self._request("PUT", self._url(resource, item_id), json=payload))

    def delete(self, resource: str, item_id: str) -> Any:
        return self._request("DELETE", self._url(resource, item_id))
