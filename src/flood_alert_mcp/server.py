import logging
from typing import Any, Dict

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from flood_alert_mcp.aggregator import FloodRiskAggregator
from flood_alert_mcp.config import get_config
from flood_alert_mcp.errors import FloodAlertError
from flood_alert_mcp.logging_setup import setup_logging

load_dotenv()

logger = logging.getLogger("flood_alert")

mcp = FastMCP(
    "Flood Alert",
    instructions="Flood risk for a city from OpenWeatherMap rainfall and today's Google News headlines",
    dependencies=["httpx", "pydantic", "pydantic-settings", "python-dotenv"],
    debug=False,
    log_level="INFO",
)


# Tools
@mcp.tool()
async def get_flood_risk(city: str) -> Dict[str, Any]:
    """
    Assess the current flood risk for a city

    Args:
        city: City name, as understood by OpenWeatherMap
    Returns:
        The flood risk level with its reasons, the weather used and today's
        news alerts, or an error payload if the assessment failed
    """
    logger.info(f"Flood risk tool called for {city}")
    try:
        result = await FloodRiskAggregator(get_config()).assess(city)
    except FloodAlertError as e:
        logger.error(f"Error assessing flood risk for {city}: {e.message}")
        return e.to_payload()
    return result.model_dump(mode="json")


def main() -> None:
    setup_logging()
    mcp.run()


if __name__ == "__main__":
    main()
