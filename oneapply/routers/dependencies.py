# dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from oneapply.clients.jsearch import JSearchClient, ListingsClient
from oneapply.config import get_rapidapi_key, get_settings
from oneapply.database import get_db
from oneapply.services.job_search_service import JobSearchService
from oneapply.services.profile_service import ProfileStore, SqlProfileStore


def get_profile_store(db: Session = Depends(get_db)) -> ProfileStore:
    return SqlProfileStore(db)


def get_listings_client() -> ListingsClient | None:
    settings = get_settings()
    api_key = get_rapidapi_key(settings)
    if not api_key:
        return None
    return JSearchClient.from_settings(settings, api_key)


def get_job_search_service(
    store: ProfileStore = Depends(get_profile_store),
    listings: ListingsClient | None = Depends(get_listings_client),
) -> JobSearchService:
    return JobSearchService(store, listings)
