# profile.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from oneapply.services.profile_normalizer import (
    DEFAULT_EXPERIENCE,
    experience_label,
    normalize_skills,
    optional_number,
    optional_text,
    strict_bool,
    string_list,
)


class NormalizedProfile(BaseModel):
    """Canonical view of a stored profile document.

    Field names follow Python conventions; the camelCase names used by the
    stored documents are accepted as aliases. Unknown fields are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    job_roles: list[str] = Field(default_factory=list, alias="jobRoles")
    skills: list[str] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)
    searchable_roles: str | None = Field(default=None, alias="searchableRoles")
    searchable_skills: str | None = Field(default=None, alias="searchableSkills")
    work_type: str | None = Field(default=None, alias="workType")
    target_countries: list[str] = Field(default_factory=list, alias="targetCountries")
    is_remote_preferred: bool = Field(default=False, alias="isRemotePreferred")
    salary_expectation: int | float | None = Field(default=None, alias="salaryExpectation")
    availability: str | None = None
    experience: str = DEFAULT_EXPERIENCE

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, v: Any) -> list[str]:
        return normalize_skills(v)

    @field_validator("job_roles", "industries", "target_countries", mode="before")
    @classmethod
    def _coerce_string_lists(cls, v: Any) -> list[str]:
        return string_list(v)

    @field_validator("searchable_roles", "searchable_skills", "work_type", "availability", mode="before")
    @classmethod
    def _coerce_optional_text(cls, v: Any) -> str | None:
        return optional_text(v)

    @field_validator("is_remote_preferred", mode="before")
    @classmethod
    def _coerce_remote(cls, v: Any) -> bool:
        return strict_bool(v)

    @field_validator("salary_expectation", mode="before")
    @classmethod
    def _coerce_salary(cls, v: Any) -> int | float | None:
        return optional_number(v)

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_experience(cls, v: Any) -> str:
        return experience_label(v)

    def has_salary_expectation(self) -> bool:
        return bool(self.salary_expectation) and self.salary_expectation > 0


class ProfileUpdate(BaseModel):
    """Partial profile document written by the onboarding wizard."""

    model_config = ConfigDict(extra="allow")


class ProfileLookupRequest(BaseModel):
    userId: str | None = None


class ProfileResponse(BaseModel):
    success: bool = True
    data: dict[str, Any] = Field(default_factory=dict)
    timestamp: str
