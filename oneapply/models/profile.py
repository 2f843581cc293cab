# profile.py
from sqlalchemy import Column, DateTime, JSON, String, func
from oneapply.database import Base


class UserProfileRecord(Base):
    __tablename__ = "user_profiles"

    # Opaque id issued by the auth provider; not generated here.
    user_id = Column(String(128), primary_key=True, index=True)
    profile_data = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
