from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class AlertLevel(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class RiskLevel(str, Enum):
    SAFE = "SAFE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class WeatherSnapshot(BaseModel):
    temperature: float
    humidity: int
    rain_1h: float = 0.0
    rain_3h: float = 0.0
    description: str
    coordinates: Coordinates = Field(..., exclude=True)


class WeatherReport(BaseModel):
    """Weather block of the response, with the UV index placeholder"""

    temperature: float
    humidity: int
    rain_1h: float
    rain_3h: float
    uvi: int = 0
    description: str

    @classmethod
    def from_snapshot(cls, snapshot: WeatherSnapshot, uvi: int = 0) -> "WeatherReport":
        return cls(**snapshot.model_dump(), uvi=uvi)


class NewsItem(BaseModel):
    title: str
    published: str


class NewsAlert(BaseModel):
    title: str
    published: str
    level: AlertLevel


class FloodRiskResult(BaseModel):
    city: str
    weather: WeatherReport
    flood_risk_level: RiskLevel
    reasons: List[str]
    news_alerts: List[NewsAlert]


# OpenWeatherMap payloads


class OpenWeatherMain(BaseModel):
    temp: float
    humidity: int


class OpenWeatherCondition(BaseModel):
    description: str


class OpenWeatherRain(BaseModel):
    one_hour: Optional[float] = Field(None, alias="1h")
    three_hours: Optional[float] = Field(None, alias="3h")


class OpenWeatherCurrent(BaseModel):
    """Subset of the /weather response we rely on"""

    coord: Coordinates
    main: OpenWeatherMain
    weather: List[OpenWeatherCondition]
    rain: Optional[OpenWeatherRain] = None

    @field_validator("weather")
    @classmethod
    def _require_condition(cls, value: List[OpenWeatherCondition]) -> List[OpenWeatherCondition]:
        if not value:
            raise ValueError("weather conditions list is empty")
        return value

    def to_snapshot(self) -> WeatherSnapshot:
        rain = self.rain or OpenWeatherRain()
        return WeatherSnapshot(
            temperature=self.main.temp,
            humidity=self.main.humidity,
            rain_1h=rain.one_hour or 0.0,
            rain_3h=rain.three_hours or 0.0,
            description=self.weather[0].description,
            coordinates=self.coord,
        )
