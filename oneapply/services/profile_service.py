# profile_service.py
from __future__ import annotations

from typing import Any, Mapping, Protocol

from sqlalchemy.orm import Session

from oneapply.models.profile import UserProfileRecord
from oneapply.schemas.profile import NormalizedProfile


class ProfileStore(Protocol):
    def get(self, user_id: str) -> dict[str, Any] | None: ...

    def save(self, user_id: str, data: Mapping[str, Any]) -> dict[str, Any]: ...


def normalize_profile(raw: Mapping[str, Any] | NormalizedProfile | None) -> NormalizedProfile:
    if isinstance(raw, NormalizedProfile):
        return raw
    if not isinstance(raw, Mapping) or not raw:
        return NormalizedProfile()
    return NormalizedProfile.model_validate(dict(raw))


def merge_profile_data(base: Mapping[str, Any] | None, updates: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base or {})
    merged.update(updates)
    return merged


class SqlProfileStore:
    """Profile documents stored as JSON in the ``user_profiles`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _record(self, user_id: str) -> UserProfileRecord | None:
        return self.db.query(UserProfileRecord).filter(UserProfileRecord.user_id == user_id).first()

    def get(self, user_id: str) -> dict[str, Any] | None:
        record = self._record(user_id)
        if not record:
            return None
        data = record.profile_data
        return dict(data) if isinstance(data, Mapping) else {}

    def save(self, user_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        record = self._record(user_id)
        if record:
            record.profile_data = merge_profile_data(record.profile_data, data)
        else:
            record = UserProfileRecord(user_id=user_id, profile_data=dict(data))
            self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return dict(record.profile_data or {})
