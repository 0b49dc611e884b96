from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.dependencies import get_app_settings
from app.services.rates.store import RateStore

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe with rate file status")
def health(settings: Settings = Depends(get_app_settings)):
    store = RateStore(settings.rates_file)
    return {
        "status": "ok",
        "version": settings.version,
        "rates_file": str(store.path),
        "rates_file_present": store.exists(),
        "configured_overrides": len(settings.rate_overrides),
    }
