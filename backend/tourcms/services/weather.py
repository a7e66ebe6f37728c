"""Current-weather lookup against OpenWeatherMap."""
import json
import logging
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from .. import config

logger = logging.getLogger(__name__)

DEFAULT_CITY = "Dehradun"


class WeatherNotConfigured(Exception):
    pass


class WeatherUnavailable(Exception):
    pass


def fetch_json(url: str, timeout: int) -> dict:
    """GET ``url`` and decode the JSON body."""
    req = Request(url, headers={"User-Agent": "tourcms/1.0", "Accept": "application/json"})
    with urlopen(req, timeout=timeout) as resp:
        return json.loads(resp.read().decode("utf-8"))


def current_weather(city: str = DEFAULT_CITY) -> dict:
    api_key = config.OWM_KEY
    if not api_key:
        raise WeatherNotConfigured("OWM_KEY is not set")

    url = f"{config.OWM_BASE_URL}?{urlencode({'q': city, 'appid': api_key, 'units': 'metric'})}"
    try:
        data = fetch_json(url, timeout=config.WEATHER_TIMEOUT_S)
    except HTTPError as e:
        logger.warning(f"Weather lookup for {city!r} failed with HTTP {e.code}")
        raise WeatherUnavailable(f"Weather service returned HTTP {e.code}")
    except (URLError, TimeoutError, ValueError) as e:
        logger.warning(f"Weather lookup for {city!r} failed: {e}")
        raise WeatherUnavailable("Weather service unreachable")

    main = data.get("main") or {}
    conditions = (data.get("weather") or [{}])[0]
    if main.get("temp") is None:
        raise WeatherUnavailable("Weather service returned no temperature")

    return {
        "city": data.get("name") or city,
        "temperature": main["temp"],
        "climate_description": conditions.get("description") or "",
        "icon": conditions.get("icon"),
    }
