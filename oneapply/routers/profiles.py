# profiles.py
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query

from oneapply.routers.dependencies import get_profile_store
from oneapply.schemas.profile import ProfileLookupRequest, ProfileResponse, ProfileUpdate
from oneapply.services.errors import InvalidRequest, ProfileNotFound
from oneapply.services.profile_service import ProfileStore


router = APIRouter(tags=["profiles"])


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _read_profile(store: ProfileStore, user_id: str | None) -> ProfileResponse:
    user_id = (user_id or "").strip()
    if not user_id:
        raise InvalidRequest("Please provide userId parameter", error="User ID required")
    data = store.get(user_id)
    if data is None:
        raise ProfileNotFound(user_id)
    return ProfileResponse(data=data, timestamp=_iso_now())


@router.get("/getUserProfile", response_model=ProfileResponse)
def get_user_profile(
    user_id: str | None = Query(default=None, alias="userId"),
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    return _read_profile(store, user_id)


@router.post("/getUserProfile", response_model=ProfileResponse)
def post_user_profile(
    payload: ProfileLookupRequest,
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    return _read_profile(store, payload.userId)


@router.put("/profiles/{user_id}", response_model=ProfileResponse)
def update_user_profile(
    user_id: str,
    payload: ProfileUpdate,
    store: ProfileStore = Depends(get_profile_store),
) -> ProfileResponse:
    updates = payload.model_dump()
    updates["updatedAt"] = _iso_now()
    saved = store.save(user_id, updates)
    return ProfileResponse(data=saved, timestamp=_iso_now())
