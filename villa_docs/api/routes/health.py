"""
Liveness check with the configuration state of the mail and booking backends.
"""
from datetime import datetime, timezone
from fastapi import APIRouter
from ..config import settings
from ..models import HealthResponse
from config.settings import email_config, wordpress_config


router = APIRouter(prefix="/health", tags=["health"])


def _configured(ok: bool) -> str:
    return "configured" if ok else "missing"


@router.get("", response_model=HealthResponse, summary="Service liveness")
async def health_check() -> HealthResponse:
    """Report liveness without contacting SMTP or WordPress."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.app_version,
        dependencies={
            "email": _configured(not email_config.missing_fields()),
            "wordpress": _configured(bool(wordpress_config.api_url and wordpress_config.api_key)),
        },
    )
