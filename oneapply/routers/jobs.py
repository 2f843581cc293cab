# jobs.py
from typing import Any

from fastapi import APIRouter, Depends

from oneapply.routers.dependencies import get_job_search_service
from oneapply.schemas.search import ErrorResponse, SearchRequest
from oneapply.services.job_search_service import JobSearchService


router = APIRouter(tags=["jobs"])


@router.post(
    "/searchJobs",
    summary="Personalized job search",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def search_jobs(
    payload: SearchRequest,
    service: JobSearchService = Depends(get_job_search_service),
) -> dict[str, Any]:
    return service.search(payload)
