from __future__ import annotations

import os
from typing import Any, Mapping

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"

    # Ensure local .env / shell values cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ.pop("RAPIDAPI_KEY", None)
    os.environ.pop("JSEARCH_API_KEY", None)


class InMemoryProfileStore:
    def __init__(self, profiles: Mapping[str, dict[str, Any]] | None = None) -> None:
        self.profiles: dict[str, dict[str, Any]] = dict(profiles or {})
        self.calls: list[str] = []

    def get(self, user_id: str) -> dict[str, Any] | None:
        self.calls.append(user_id)
        data = self.profiles.get(user_id)
        return dict(data) if data is not None else None

    def save(self, user_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        merged = {**self.profiles.get(user_id, {}), **data}
        self.profiles[user_id] = merged
        return dict(merged)


class FakeListingsClient:
    """Records every query and answers with a canned response."""

    def __init__(self, jobs: list[dict[str, Any]] | None = None, *, status_code: int = 200, text: str = "") -> None:
        from oneapply.clients.jsearch import ListingsResponse

        body = {"status": "OK", "request_id": "req-1", "parameters": {}, "data": list(jobs or [])}
        self.response = ListingsResponse(status_code=status_code, body=body if status_code < 400 else {}, text=text)
        self.queries: list[Any] = []
        self.error: Exception | None = None

    def search(self, query: Any) -> Any:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture()
def listings() -> FakeListingsClient:
    return FakeListingsClient()


@pytest.fixture()
def data_scientist_profile() -> dict[str, Any]:
    return {
        "jobRoles": ["Data Scientist"],
        "skills": ["Python"],
        "salaryExpectation": 90000,
        "isRemotePreferred": True,
    }


@pytest.fixture()
def candidate_jobs() -> list[dict[str, Any]]:
    return [
        {
            "job_id": "job-b",
            "job_title": "Sales Associate",
            "job_description": "Retail floor sales and customer service.",
            "employer_name": "ShopCo",
            "job_is_remote": False,
        },
        {
            "job_id": "job-a",
            "job_title": "Senior Data Scientist",
            "job_description": "Build models in Python and ship them to production.",
            "employer_name": "DataCorp",
            "job_is_remote": True,
            "job_salary_min": 100000,
        },
        {
            "job_id": "job-c",
            "job_title": "Junior Data Scientist",
            "job_description": "Python notebooks and dashboards.",
            "employer_name": "LowPay Ltd",
            "job_is_remote": True,
            "job_salary_min": 50000,
        },
    ]


@pytest.fixture()
def client(listings: FakeListingsClient) -> Any:
    from oneapply.database import Base, engine
    from oneapply.main import create_app
    from oneapply.routers.dependencies import get_listings_client

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    app.dependency_overrides[get_listings_client] = lambda: listings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_listings():
    return FakeListingsClient
