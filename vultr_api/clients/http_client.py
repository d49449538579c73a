"""Reusable HTTP client wrapper for the Vultr API."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from vultr_api.exceptions.custom_exceptions import ApiRequestError, TransportError
from vultr_api.utils.constants import API_KEY_HEADER, DEFAULT_API_BASE_URL, HTTP_STATUS_HINTS
from vultr_api.utils.logger import get_logger
from vultr_api.utils.utils import join_url

log = get_logger(__name__)


@dataclass
class HttpClient:
    """Small wrapper around requests for consistent timeouts, auth and errors.

    Every call is synchronous and is attempted exactly once.
    """
    timeout_seconds: int
    base_url: str = DEFAULT_API_BASE_URL
    user_agent: str = "vultr-api-client"

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            API_KEY_HEADER: api_key,
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    def get(self, endpoint: str, api_key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """GET an endpoint and return the response body as text."""
        url = join_url(self.base_url, endpoint)
        log.debug("GET %s params=%s", url, dict(params or {}))
        try:
            resp = requests.get(url, params=params, headers=self._headers(api_key), timeout=self.timeout_seconds)
        except requests.RequestException as e:
            log.warning("GET %s failed: %s", url, e)
            raise TransportError(f"Failed to reach {url}: {e}") from e
        return self._body_or_raise("GET", url, resp)

    def post(self, endpoint: str, api_key: str, params: Mapping[str, Any]) -> str:
        """POST form-encoded params to an endpoint and return the response body as text."""
        url = join_url(self.base_url, endpoint)
        log.debug("POST %s keys=%s", url, sorted(params))
        try:
            resp = requests.post(url, data=dict(params), headers=self._headers(api_key), timeout=self.timeout_seconds)
        except requests.RequestException as e:
            log.warning("POST %s failed: %s", url, e)
            raise TransportError(f"Failed to reach {url}: {e}") from e
        return self._body_or_raise("POST", url, resp)

    @staticmethod
    def _body_or_raise(method: str, url: str, resp: requests.Response) -> str:
        if 200 <= resp.status_code < 300:
            return resp.text
        hint = HTTP_STATUS_HINTS.get(resp.status_code, "Unexpected response.")
        log.warning("%s %s returned HTTP %s", method, url, resp.status_code)
        raise ApiRequestError(
            f"{method} {url} returned HTTP {resp.status_code}: {hint} {resp.text}".strip(),
            status_code=resp.status_code,
            body=resp.text,
        )
