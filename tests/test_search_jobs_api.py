from __future__ import annotations


def _seed_profile(client, user_id: str, profile: dict) -> None:
    r = client.put(f"/profiles/{user_id}", json=profile)
    assert r.status_code == 200


def test_search_jobs_returns_ranked_personalized_listings(client, listings, data_scientist_profile, candidate_jobs) -> None:
    _seed_profile(client, "user-1", data_scientist_profile)
    listings.response.body["data"] = candidate_jobs

    r = client.post("/searchJobs", json={"userId": "user-1"})
    assert r.status_code == 200
    body = r.json()

    assert [j["job_id"] for j in body["data"]] == ["job-a", "job-b"]
    assert body["data"][0]["relevance_score"] == 15
    assert body["data"][1]["user_match_reasons"] == {
        "salary_match": True,
        "location_preference": False,
        "experience_level": "entry",
    }
    assert body["source"] == "jsearch-api-personalized"
    assert body["request_id"] == "req-1"
    assert body["user_profile_applied"]["searchQuery"] == "Data Scientist OR Python"
    assert body["timestamp"]


def test_search_jobs_passes_pagination(client, listings) -> None:
    _seed_profile(client, "user-2", {"jobRoles": ["Nurse"]})

    r = client.post("/searchJobs", json={"userId": "user-2", "page": 3, "num_pages": 2, "customQuery": "ICU nurse"})
    assert r.status_code == 200
    (query,) = listings.queries
    assert (query.page, query.num_pages, query.query) == (3, 2, "ICU nurse")


def test_search_jobs_requires_user_id(client, listings) -> None:
    r = client.post("/searchJobs", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "User ID required", "details": "Please provide userId in request body"}
    assert listings.queries == []


def test_search_jobs_unknown_user_is_404(client, listings) -> None:
    r = client.post("/searchJobs", json={"userId": "absent-id"})
    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "User not found"
    assert "absent-id" in body["details"]
    assert listings.queries == []


def test_search_jobs_invalid_page_is_structured_400(client) -> None:
    r = client.post("/searchJobs", json={"userId": "user-1", "page": 0})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Invalid request"
    assert "page" in body["details"]


def test_search_jobs_forwards_upstream_failure(client, listings) -> None:
    from oneapply.clients.jsearch import ListingsResponse

    _seed_profile(client, "user-3", {})
    listings.response = ListingsResponse(status_code=403, text="You are not subscribed to this API.")

    r = client.post("/searchJobs", json={"userId": "user-3"})
    assert r.status_code == 403
    assert r.json() == {
        "error": "JSearch API request failed: 403",
        "details": "You are not subscribed to this API.",
        "message": "Failed to fetch jobs from external API",
    }


def test_search_jobs_without_api_key(client) -> None:
    from oneapply.routers.dependencies import get_listings_client

    _seed_profile(client, "user-4", {})
    client.app.dependency_overrides[get_listings_client] = lambda: None

    r = client.post("/searchJobs", json={"userId": "user-4"})
    assert r.status_code == 500
    assert r.json()["error"] == "API key not configured"
