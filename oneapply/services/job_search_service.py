"""Personalized job search: profile -> query -> listings -> filter -> score -> rank."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

import requests

from oneapply.clients.jsearch import ListingsClient, ListingsQuery
from oneapply.schemas.profile import NormalizedProfile
from oneapply.schemas.search import AppliedPreferences, SearchRequest, UserProfileApplied
from oneapply.services.errors import (
    ConfigurationError,
    InternalError,
    InvalidRequest,
    JobSearchError,
    ProfileNotFound,
    UpstreamError,
    UpstreamUnavailable,
)
from oneapply.services.profile_service import ProfileStore, normalize_profile
from oneapply.services.query_builder import build_query
from oneapply.services.relevance_scorer import apply_scores, job_salary_min, rank_jobs


logger = logging.getLogger(__name__)

SOURCE_TAG = "jsearch-api-personalized"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def filter_by_salary(profile: NormalizedProfile, jobs: list[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Drop listings whose minimum salary is below the expectation; unlisted salaries are kept."""
    if not profile.has_salary_expectation():
        return list(jobs)
    kept: list[Mapping[str, Any]] = []
    for job in jobs:
        salary_min = job_salary_min(job)
        if salary_min and salary_min < profile.salary_expectation:
            continue
        kept.append(job)
    return kept


class JobSearchService:
    def __init__(
        self,
        store: ProfileStore,
        listings: ListingsClient | None,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.store = store
        # None means no API key is configured.
        self.listings = listings
        self.clock = clock

    def search(self, request: SearchRequest) -> dict[str, Any]:
        try:
            return self._search(request)
        except JobSearchError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error in job search: %s", exc)
            raise InternalError() from exc

    def _search(self, request: SearchRequest) -> dict[str, Any]:
        user_id = (request.userId or "").strip()
        if not user_id:
            raise InvalidRequest("Please provide userId in request body", error="User ID required")

        profile = self._load_profile(user_id)

        query = build_query(profile)
        custom_query = request.customQuery or ""
        # Sent as given; only a blank or whitespace-only query falls back.
        search_query = custom_query if custom_query.strip() else query.query_string
        logger.info(
            "Search parameters user=%s query=%r employment_types=%s country=%s remote_only=%s date_posted=%s page=%d num_pages=%d",
            user_id,
            search_query,
            query.employment_types,
            query.country_code,
            profile.is_remote_preferred,
            query.date_posted,
            request.page,
            request.num_pages,
        )

        if self.listings is None:
            logger.error("RapidAPI key not configured")
            raise ConfigurationError("API key not found in configuration")

        listings_query = ListingsQuery(
            query=search_query,
            page=request.page,
            num_pages=request.num_pages,
            date_posted=query.date_posted,
            country=query.country_code,
            remote_jobs_only=profile.is_remote_preferred,
            employment_types=query.employment_types,
        )
        try:
            response = self.listings.search(listings_query)
        except requests.RequestException as exc:
            logger.error("Listings API call failed: %s", exc)
            raise UpstreamUnavailable(
                "listings-api",
                str(exc),
                error="Failed to reach job listings API",
                status_code=502,
            ) from exc

        if not response.ok:
            logger.error("Listings API request failed status=%s body=%s", response.status_code, response.text)
            raise UpstreamError(response.status_code, response.text)

        body = dict(response.body)
        raw_jobs = [job for job in (body.get("data") or []) if isinstance(job, Mapping)]
        logger.info("Listings received: %d jobs", len(raw_jobs))

        candidates = filter_by_salary(profile, raw_jobs)
        ranked = rank_jobs(apply_scores(profile, candidates))
        logger.debug("Scored %d jobs (%d dropped by salary filter)", len(ranked), len(raw_jobs) - len(candidates))

        applied = UserProfileApplied(
            userId=user_id,
            searchQuery=search_query,
            preferences=AppliedPreferences(
                workType=profile.work_type,
                isRemotePreferred=profile.is_remote_preferred,
                targetCountries=list(profile.target_countries),
                salaryExpectation=profile.salary_expectation,
            ),
        )
        return {
            **body,
            "data": ranked,
            "user_profile_applied": applied.model_dump(),
            "timestamp": self.clock().isoformat(),
            "source": SOURCE_TAG,
        }

    def _load_profile(self, user_id: str) -> NormalizedProfile:
        logger.info("Fetching user profile for userId=%s", user_id)
        try:
            raw = self.store.get(user_id)
        except Exception as exc:
            logger.error("Error fetching user profile %s: %s", user_id, exc)
            raise UpstreamUnavailable(
                "profile-store",
                str(exc),
                error="Failed to fetch user profile",
            ) from exc

        if raw is None:
            logger.warning("User not found: %s", user_id)
            raise ProfileNotFound(user_id)

        profile = normalize_profile(raw)
        logger.debug(
            "Profile loaded roles=%s skills=%s work_type=%s remote=%s",
            profile.job_roles,
            profile.skills,
            profile.work_type,
            profile.is_remote_preferred,
        )
        return profile
