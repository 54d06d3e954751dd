import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from flood_alert_mcp.errors import UpstreamError
from flood_alert_mcp.models import Coordinates, OpenWeatherCurrent, WeatherSnapshot

logger = logging.getLogger("flood_alert.weather")


class WeatherService:
    """Client for the OpenWeatherMap current weather and forecast endpoints"""

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    async def get_current_weather(self, city: str) -> WeatherSnapshot:
        """Get current conditions and rainfall for a city, in metric units"""
        logger.info(f"Requesting current weather for {city}")
        data = await self._get_json("weather", {"q": city, "units": "metric"})

        try:
            snapshot = OpenWeatherCurrent.model_validate(data).to_snapshot()
        except PydanticValidationError as e:
            logger.error(f"Unexpected weather payload for {city}: {e}")
            raise UpstreamError(f"Unexpected weather payload: {e}") from e

        logger.debug(f"Weather snapshot for {city}: {snapshot}")
        return snapshot

    async def get_uv_index(self, coords: Coordinates) -> int:
        """
        Fetch the forecast for the given coordinates and return the UV index.

        The forecast tier we call does not expose UV data, so the index is
        always 0. The call is still made and its failure still aborts the
        request.
        """
        logger.info(f"Requesting forecast for ({coords.lat}, {coords.lon})")
        data = await self._get_json("forecast", {"lat": coords.lat, "lon": coords.lon, "units": "metric"})

        if not isinstance(data, dict) or not isinstance(data.get("city"), dict):
            logger.error("Forecast payload has no city block")
            raise UpstreamError("Unexpected forecast payload: missing city")

        return 0

    async def _get_json(self, endpoint: str, params: dict):
        url = f"{self.base_url}/{endpoint}"
        try:
            response = await self.client.get(url, params={**params, "appid": self.api_key})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Request to {endpoint} failed: {str(e)}")
            raise UpstreamError.from_http_error(e) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Response from {endpoint} is not JSON")
            raise UpstreamError(f"Invalid JSON from {endpoint}: {e}") from e
