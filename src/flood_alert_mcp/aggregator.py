import logging
from typing import Optional

import httpx

from flood_alert_mcp.config import Config, get_config
from flood_alert_mcp.errors import ConfigurationError, ValidationError
from flood_alert_mcp.models import FloodRiskResult, WeatherReport
from flood_alert_mcp.news import NewsService
from flood_alert_mcp.risk import assess_risk, classify_news
from flood_alert_mcp.weather import WeatherService

logger = logging.getLogger("flood_alert.aggregator")


class FloodRiskAggregator:
    """Combines weather and news for a city into a flood risk assessment"""

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config if config is not None else get_config()
        self._transport = transport

    async def assess(self, city: Optional[str]) -> FloodRiskResult:
        """
        Run the full weather -> forecast -> news -> classification chain.

        Raises:
            ValidationError: city is missing
            ConfigurationError: no OpenWeather key is configured
            UpstreamError: any upstream call failed or returned bad data
        """
        if not city:
            raise ValidationError("City required")

        api_key = self.config.openweather_key
        if not api_key:
            logger.error("OPENWEATHER_KEY is not configured")
            raise ConfigurationError("Missing OpenWeather key")

        logger.info(f"Starting flood risk assessment for {city}")

        async with httpx.AsyncClient(transport=self._transport, timeout=self.config.http_timeout) as client:
            weather_service = WeatherService(client, api_key, self.config.openweather_base_url)
            news_service = NewsService(
                client,
                self.config.news_rss_url,
                language=self.config.news_language,
                region=self.config.news_region,
                edition=self.config.news_edition,
            )

            logger.info("Step 1: Getting current weather")
            weather = await weather_service.get_current_weather(city)

            logger.info("Step 2: Getting forecast")
            uvi = await weather_service.get_uv_index(weather.coordinates)

            logger.info("Step 3: Getting today's news")
            news = await news_service.get_todays_news(city)

        logger.info("Step 4: Classifying news alerts")
        alerts = classify_news(news)

        logger.info("Step 5: Deciding flood risk")
        level, reasons = assess_risk(weather, alerts)
        logger.info(f"Flood risk for {city}: {level.value} ({'; '.join(reasons)})")

        return FloodRiskResult(
            city=city,
            weather=WeatherReport.from_snapshot(weather, uvi=uvi),
            flood_risk_level=level,
            reasons=reasons,
            news_alerts=alerts,
        )
