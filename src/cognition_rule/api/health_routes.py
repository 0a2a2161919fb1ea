from fastapi import APIRouter
from pydantic import ValidationError

from ..config import DEFAULT_API_URL, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    try:
        settings = get_settings()
    except ValidationError:
        # liveness must not depend on PRECOGNITIVE_* being present
        return {"status": "degraded", "api_url": DEFAULT_API_URL}
    return {"status": "ok", "api_url": str(settings.api_url)}
