# search.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    # userId is optional at the schema level so that a missing id surfaces as
    # the service's "User ID required" error instead of a generic 422.
    userId: str | None = None
    customQuery: str | None = None
    page: int = Field(default=1, ge=1)
    num_pages: int = Field(default=1, ge=1)


class MatchReasons(BaseModel):
    model_config = ConfigDict(frozen=True)

    salary_match: bool
    location_preference: bool
    experience_level: str


class AppliedPreferences(BaseModel):
    workType: str | None = None
    isRemotePreferred: bool = False
    targetCountries: list[str] = Field(default_factory=list)
    salaryExpectation: int | float | None = None


class UserProfileApplied(BaseModel):
    userId: str
    searchQuery: str
    preferences: AppliedPreferences


class ErrorResponse(BaseModel):
    error: str
    details: str
    message: str | None = None
