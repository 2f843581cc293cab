from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from oneapply.schemas.profile import NormalizedProfile


FALLBACK_QUERY = "software developer"
QUERY_SEPARATOR = " OR "
DEFAULT_COUNTRY_CODE = "US"
DEFAULT_EMPLOYMENT_TYPES = ("FULLTIME",)

COUNTRY_CODES: Mapping[str, str] = MappingProxyType(
    {
        "United States": "US",
        "Canada": "CA",
        "United Kingdom": "GB",
        "Australia": "AU",
        "Germany": "DE",
        "India": "IN",
    }
)

# Keys are lower-cased workType values.
EMPLOYMENT_TYPES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "full-time": ("FULLTIME",),
        "fulltime": ("FULLTIME",),
        "part-time": ("PARTTIME",),
        "parttime": ("PARTTIME",),
        "contract": ("CONTRACTOR",),
        "flexible": ("FULLTIME", "PARTTIME"),
    }
)


@dataclass(frozen=True)
class SearchQuery:
    query_string: str
    employment_types: str
    country_code: str
    date_posted: str


def build_search_query(profile: NormalizedProfile) -> str:
    parts: list[str] = [*profile.job_roles, *profile.skills, *profile.industries]

    if not parts:
        if profile.searchable_roles:
            parts.append(profile.searchable_roles)
        if profile.searchable_skills:
            parts.append(profile.searchable_skills)

    if not parts:
        parts.append(FALLBACK_QUERY)

    return QUERY_SEPARATOR.join(parts)


def get_employment_types(profile: NormalizedProfile) -> str:
    key = (profile.work_type or "").strip().lower()
    return ",".join(EMPLOYMENT_TYPES.get(key, DEFAULT_EMPLOYMENT_TYPES))


def get_target_country(profile: NormalizedProfile) -> str:
    if not profile.target_countries:
        return DEFAULT_COUNTRY_CODE
    return COUNTRY_CODES.get(profile.target_countries[0], DEFAULT_COUNTRY_CODE)


def get_date_posted(profile: NormalizedProfile) -> str:
    # Users available immediately only care about the freshest postings.
    return "week" if profile.availability == "immediate" else "month"


def build_query(profile: NormalizedProfile) -> SearchQuery:
    return SearchQuery(
        query_string=build_search_query(profile),
        employment_types=get_employment_types(profile),
        country_code=get_target_country(profile),
        date_posted=get_date_posted(profile),
    )
