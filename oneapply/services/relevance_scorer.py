from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from oneapply.schemas.profile import NormalizedProfile
from oneapply.schemas.search import MatchReasons
from oneapply.services.profile_normalizer import optional_number


ROLE_POINTS = 10
SKILL_POINTS = 5


@dataclass(frozen=True)
class RelevanceResult:
    score: int
    reasons: MatchReasons


def _text(job: Mapping[str, Any], key: str) -> str:
    value = job.get(key)
    return value.lower() if isinstance(value, str) else ""


def _term_matches(term: str, title: str, description: str) -> bool:
    needle = term.strip().lower()
    # An empty needle is a substring of everything.
    if not needle:
        return False
    return needle in title or needle in description


def _count_points(terms: Iterable[str], points: int, title: str, description: str) -> int:
    return sum(points for term in terms if _term_matches(term, title, description))


def job_salary_min(job: Mapping[str, Any]) -> int | float | None:
    # Listings sometimes carry the salary as a numeric string.
    return optional_number(job.get("job_salary_min"))


def is_salary_match(profile: NormalizedProfile, job: Mapping[str, Any]) -> bool:
    salary_min = job_salary_min(job)
    if not profile.salary_expectation or not salary_min:
        return True
    return salary_min >= profile.salary_expectation


def score_job(profile: NormalizedProfile, job: Mapping[str, Any]) -> RelevanceResult:
    title = _text(job, "job_title")
    description = _text(job, "job_description")

    score = _count_points(profile.job_roles, ROLE_POINTS, title, description)
    score += _count_points(profile.skills, SKILL_POINTS, title, description)

    reasons = MatchReasons(
        salary_match=is_salary_match(profile, job),
        location_preference=(not profile.is_remote_preferred) or bool(job.get("job_is_remote")),
        experience_level=profile.experience,
    )
    return RelevanceResult(score=score, reasons=reasons)


def apply_scores(profile: NormalizedProfile, jobs: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Return copies of ``jobs`` with ``relevance_score`` and ``user_match_reasons`` attached."""
    scored: list[dict[str, Any]] = []
    for job in jobs:
        result = score_job(profile, job)
        scored.append(
            {
                **job,
                "relevance_score": result.score,
                "user_match_reasons": result.reasons.model_dump(),
            }
        )
    return scored


def rank_jobs(jobs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    # sorted() is stable, so equal scores keep the upstream order.
    return sorted(jobs, key=lambda job: job.get("relevance_score") or 0, reverse=True)
