"""Google Maps Config — hands the Maps API key and map id to the frontend."""

from fastapi import APIRouter, Depends

from stoneboard.config import Settings, get_settings
from stoneboard.schemas.post import MapsConfigResponse

router = APIRouter(prefix="/api", tags=["config"])


@router.get("/google-maps-config", response_model=MapsConfigResponse)
async def google_maps_config(settings: Settings = Depends(get_settings)):
    return MapsConfigResponse(
        api_key=settings.google_maps_api_key,
        map_id=settings.google_maps_map_id,
    )
