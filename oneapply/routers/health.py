from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from oneapply.config import get_rapidapi_key, get_settings
from oneapply.database import engine


router = APIRouter(tags=["health"])


class HealthServices(BaseModel):
    database: str
    rapidapi: str


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    apiKeyConfigured: bool
    environment: str
    services: HealthServices


@router.get("/healthCheck", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    settings = get_settings()
    api_key_configured = bool(get_rapidapi_key(settings))

    database_status = "connected"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        database_status = "error"

    return HealthStatus(
        status="healthy" if database_status == "connected" else "degraded",
        timestamp=datetime.now(timezone.utc),
        apiKeyConfigured=api_key_configured,
        environment=settings.environment,
        services=HealthServices(
            database=database_status,
            rapidapi="configured" if api_key_configured else "not configured",
        ),
    )
