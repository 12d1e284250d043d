"""Maps Key Route — hands the configured browser maps key to the frontend."""

from fastapi import APIRouter, Depends

from sports_schedule.config import Settings, get_settings

router = APIRouter(prefix="/api", tags=["maps"])


@router.get("/maps-key")
async def maps_key(settings: Settings = Depends(get_settings)):
    return {"key": settings.google_maps_api_key}
