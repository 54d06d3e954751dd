import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import List, Optional

import httpx

from flood_alert_mcp.errors import FeedParseError, UpstreamError
from flood_alert_mcp.models import NewsItem

logger = logging.getLogger("flood_alert.news")

NEWS_SEARCH_TERMS = "flood OR rain OR waterlogging"


def build_news_query(city: str) -> str:
    return f"{city} {NEWS_SEARCH_TERMS}"


def parse_feed(xml_text: str) -> List[NewsItem]:
    """Parse an RSS document into its items"""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise FeedParseError(f"Malformed news feed: {e}") from e

    if root.tag != "rss":
        raise FeedParseError(f"Malformed news feed: root element is <{root.tag}>, not <rss>")

    channel = root.find("channel")
    if channel is None:
        raise FeedParseError("Malformed news feed: no channel element")

    items = []
    for item in channel.findall("item"):
        title = item.findtext("title")
        published = item.findtext("pubDate")
        if title is None or published is None:
            raise FeedParseError("Malformed news feed: item without title or pubDate")
        items.append(NewsItem(title=title, published=published))
    return items


def to_utc_iso(published: str) -> str:
    """Convert an RFC 822 (or ISO 8601) publish date to a UTC ISO timestamp"""
    txt = published.strip()
    try:
        parsed = parsedate_to_datetime(txt)
    except (TypeError, ValueError):
        if txt.endswith(("Z", "z")):
            txt = f"{txt[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(txt)
        except ValueError as e:
            raise FeedParseError(f"Invalid publish date: {published!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).isoformat()


def utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def filter_today(items: List[NewsItem], today: Optional[str] = None) -> List[NewsItem]:
    """Keep items whose UTC publish date matches today's UTC date"""
    today = today or utc_today()
    return [item for item in items if to_utc_iso(item.published)[:10] == today]


class NewsService:
    """Fetches the Google News RSS search feed for a city"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        feed_url: str,
        language: str = "en-IN",
        region: str = "IN",
        edition: str = "IN:en",
    ):
        self.client = client
        self.feed_url = feed_url
        self.language = language
        self.region = region
        self.edition = edition

    async def get_news(self, city: str) -> List[NewsItem]:
        params = {
            "q": build_news_query(city),
            "hl": self.language,
            "gl": self.region,
            "ceid": self.edition,
        }
        logger.info(f"Fetching news feed for {city}")
        try:
            response = await self.client.get(self.feed_url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"News feed request failed: {str(e)}")
            raise UpstreamError.from_http_error(e) from e

        items = parse_feed(response.text)
        logger.debug(f"Parsed {len(items)} news items")
        return items

    async def get_todays_news(self, city: str, today: Optional[str] = None) -> List[NewsItem]:
        items = filter_today(await self.get_news(city), today)
        logger.info(f"{len(items)} news items published today for {city}")
        return items
