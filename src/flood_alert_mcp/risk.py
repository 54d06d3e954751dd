"""Keyword classification of news headlines and the flood risk decision table."""

from typing import List, Sequence, Tuple

from flood_alert_mcp.models import AlertLevel, NewsAlert, NewsItem, RiskLevel, WeatherSnapshot

HIGH_KEYWORDS = (
    "flash flood",
    "evacuation",
    "river overflow",
    "dam discharge",
    "flood warning",
)

MEDIUM_KEYWORDS = (
    "waterlogging",
    "heavy rainfall expected",
    "monsoon alert",
    "rainfall alert",
)

# Not consulted: anything that misses HIGH and MEDIUM is LOW already.
LOW_KEYWORDS = (
    "rain expected",
    "weather disturbance",
)

REASON_HEAVY_HOURLY_RAIN = "Rainfall > 5mm/hr"
REASON_HEAVY_3H_RAIN = "Rainfall > 10mm in 3 hours"
REASON_LIGHT_RAIN = "Light rainfall detected"
REASON_NEWS_HIGH = "Google News detected HIGH alert keywords"
REASON_NEWS_MEDIUM = "Google News detected MEDIUM alert keywords"
REASON_NONE = "No risk indicators detected"


def classify_title(title: str) -> AlertLevel:
    lowered = title.lower()
    if any(keyword in lowered for keyword in HIGH_KEYWORDS):
        return AlertLevel.HIGH
    if any(keyword in lowered for keyword in MEDIUM_KEYWORDS):
        return AlertLevel.MEDIUM
    return AlertLevel.LOW


def classify_news(items: Sequence[NewsItem]) -> List[NewsAlert]:
    return [
        NewsAlert(title=item.title, published=item.published, level=classify_title(item.title))
        for item in items
    ]


def assess_risk(weather: WeatherSnapshot, alerts: Sequence[NewsAlert]) -> Tuple[RiskLevel, List[str]]:
    """
    Combine rainfall thresholds with news severity.

    Weather thresholds are checked first (first match wins), then news: a HIGH
    alert always sets HIGH, a MEDIUM alert sets MEDIUM unless already HIGH.

    Returns:
        The risk level and the ordered reasons, which are never empty.
    """
    level = RiskLevel.SAFE
    reasons: List[str] = []

    if weather.rain_1h > 5:
        level = RiskLevel.HIGH
        reasons.append(REASON_HEAVY_HOURLY_RAIN)
    elif weather.rain_3h > 10:
        level = RiskLevel.MEDIUM
        reasons.append(REASON_HEAVY_3H_RAIN)
    elif weather.rain_1h > 1:
        level = RiskLevel.LOW
        reasons.append(REASON_LIGHT_RAIN)

    levels = {alert.level for alert in alerts}
    if AlertLevel.HIGH in levels:
        level = RiskLevel.HIGH
        reasons.append(REASON_NEWS_HIGH)
    elif AlertLevel.MEDIUM in levels:
        if level != RiskLevel.HIGH:
            level = RiskLevel.MEDIUM
        reasons.append(REASON_NEWS_MEDIUM)

    if not reasons:
        level = RiskLevel.SAFE
        reasons.append(REASON_NONE)

    return level, reasons
