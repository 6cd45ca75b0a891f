from fastapi import APIRouter
from core.config import settings
from schemas.health import HealthStatus

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthStatus)
async def health_status():
    return HealthStatus(name=settings.app_name, status="OK", version=settings.app_version)
