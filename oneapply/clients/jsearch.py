"""JSearch API (RapidAPI) listings client."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import requests

from oneapply.config import Settings


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingsQuery:
    query: str
    page: int = 1
    num_pages: int = 1
    date_posted: str = "month"
    country: str = "US"
    remote_jobs_only: bool = False
    employment_types: str | None = None

    def to_params(self) -> dict[str, str]:
        params = {
            "query": self.query,
            "page": str(self.page),
            "num_pages": str(self.num_pages),
            "date_posted": self.date_posted,
            "country": self.country,
        }
        if self.remote_jobs_only:
            params["remote_jobs_only"] = "true"
        if self.employment_types:
            params["employment_types"] = self.employment_types
        return params


@dataclass
class ListingsResponse:
    status_code: int
    body: dict[str, Any] = field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ListingsClient(Protocol):
    def search(self, query: ListingsQuery) -> ListingsResponse: ...


class JSearchClient:
    """Thin GET wrapper around ``/search``. No retries; failures go to the caller."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://jsearch.p.rapidapi.com",
        host: str = "jsearch.p.rapidapi.com",
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.host = host
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_settings(cls, settings: Settings, api_key: str) -> "JSearchClient":
        return cls(
            api_key,
            base_url=settings.jsearch_base_url,
            host=settings.jsearch_host,
            timeout=settings.jsearch_timeout_seconds,
        )

    def search(self, query: ListingsQuery) -> ListingsResponse:
        http = self.session or requests
        r = http.get(
            f"{self.base_url}/search",
            params=query.to_params(),
            headers={
                "x-rapidapi-key": self.api_key,
                "x-rapidapi-host": self.host,
            },
            timeout=self.timeout,
        )
        logger.info("JSearch response status=%s", r.status_code)
        if not r.ok:
            return ListingsResponse(status_code=r.status_code, text=r.text)

        try:
            body = r.json()
        except ValueError:
            logger.warning("JSearch returned a non-JSON body (status=%s)", r.status_code)
            body = {}
        if not isinstance(body, dict):
            body = {"data": body if isinstance(body, list) else []}
        return ListingsResponse(status_code=r.status_code, body=body, text=r.text)
