from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    openweather_key: Optional[str] = Field(None, alias="OPENWEATHER_KEY")
    host: str = "0.0.0.0"
    port: int = 5004
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    news_rss_url: str = "https://news.google.com/rss/search"
    news_language: str = "en-IN"
    news_region: str = "IN"
    news_edition: str = "IN:en"
    http_timeout: float = 10.0


def get_config() -> Config:
    """Return settings read from the current environment"""
    return Config()
