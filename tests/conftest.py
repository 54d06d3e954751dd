from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Any, Dict, List, Optional, Tuple
from xml.sax.saxutils import escape

import httpx
import pytest

from flood_alert_mcp.config import Config


def build_rss(items: List[Tuple[str, str]]) -> str:
    entries = "".join(
        f"<item><title>{escape(title)}</title><pubDate>{published}</pubDate></item>"
        for title, published in items
    )
    return f'<?xml version="1.0"?><rss version="2.0"><channel><title>News</title>{entries}</channel></rss>'


def weather_payload(rain: Optional[Dict[str, float]] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "coord": {"lat": 19.07, "lon": 72.88},
        "main": {"temp": 29.5, "humidity": 84},
        "weather": [{"description": "light rain"}],
    }
    if rain is not None:
        payload["rain"] = rain
    return payload


class FakeUpstream:
    """Serves canned OpenWeatherMap and Google News responses"""

    def __init__(self):
        self.weather: Any = (200, {"json": weather_payload()})
        self.forecast: Any = (200, {"json": {"city": {"name": "Mumbai", "sunrise": 1700000000}}})
        self.news: Any = (200, {"text": build_rss([])})
        self.requests: List[httpx.Request] = []

    def set_rain(self, one_hour: Optional[float] = None, three_hours: Optional[float] = None) -> None:
        rain = {}
        if one_hour is not None:
            rain["1h"] = one_hour
        if three_hours is not None:
            rain["3h"] = three_hours
        self.weather = (200, {"json": weather_payload(rain)})

    def set_news(self, items: List[Tuple[str, str]]) -> None:
        self.news = (200, {"text": build_rss(items)})

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/weather"):
            reply = self.weather
        elif path.endswith("/forecast"):
            reply = self.forecast
        elif path.endswith("/rss/search"):
            reply = self.news
        else:
            reply = (404, {"json": {"message": "not found"}})
        if isinstance(reply, Exception):
            raise reply
        status, kwargs = reply
        return httpx.Response(status, **kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def config() -> Config:
    return Config(OPENWEATHER_KEY="test-key")


@pytest.fixture
def rss():
    return build_rss


@pytest.fixture
def now_utc() -> datetime:
    return datetime.now(timezone.utc)


@pytest.fixture
def today_pubdate(now_utc) -> str:
    return format_datetime(now_utc, usegmt=True)


@pytest.fixture
def old_pubdate(now_utc) -> str:
    return format_datetime(now_utc - timedelta(days=3), usegmt=True)
