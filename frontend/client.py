"""HTTP client for the /companies endpoints."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.getenv("API_URL", "http://localhost:5001/companies")
DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class CompaniesClient:
    def __init__(self, api_url: str = DEFAULT_API_URL, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT):
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, **kwargs) -> Any:
        try:
            res = self.session.request(method, self.api_url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"{method} {self.api_url} failed: {e}") from e
        try:
            payload = res.json()
        except ValueError:
            payload = res.text
        if not res.ok:
            raise ApiError(f"{method} {self.api_url} returned {res.status_code}", res.status_code, payload)
        return payload

    def list_companies(self) -> List[Dict[str, Any]]:
        data = self._request("GET")
        return data if isinstance(data, list) else []

    def create_company(self, record: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", json=record)

    def update_company(self, company_id: int, record: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", json={**record, "id": company_id})

    def delete_company(self, company_id: int) -> Dict[str, Any]:
        return self._request("DELETE", params={"id": company_id})
