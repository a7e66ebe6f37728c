from fastapi import APIRouter, HTTPException, Query

from ..services import weather
from .schemas_packages import WeatherOut

router = APIRouter(prefix="/api", tags=["weather"])


@router.get("/weather", response_model=WeatherOut)
def get_weather(city: str = Query(weather.DEFAULT_CITY, min_length=1, max_length=100)):
    """Current conditions for ``city`` in metric units."""
    try:
        return weather.current_weather(city)
    except weather.WeatherNotConfigured:
        raise HTTPException(status_code=503, detail="Weather service is not configured")
    except weather.WeatherUnavailable as e:
        raise HTTPException(status_code=502, detail=str(e))
