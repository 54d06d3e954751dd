import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from flood_alert_mcp.aggregator import FloodRiskAggregator
from flood_alert_mcp.config import get_config
from flood_alert_mcp.errors import FloodAlertError
from flood_alert_mcp.logging_setup import setup_logging
from flood_alert_mcp.models import FloodRiskResult

load_dotenv()

logger = logging.getLogger("flood_alert.api")

app = FastAPI(title="Flood Alert API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FloodAlertError)
async def flood_alert_error_handler(request: Request, exc: FloodAlertError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def get_aggregator() -> FloodRiskAggregator:
    return FloodRiskAggregator(get_config())


@app.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    return "Flood API Running"


@app.get("/api/flood", response_model=FloodRiskResult)
async def get_flood_risk(
    city: Optional[str] = None,
    aggregator: FloodRiskAggregator = Depends(get_aggregator),
) -> FloodRiskResult:
    """Flood risk for a city from current rainfall and today's news"""
    return await aggregator.assess(city)


def main() -> None:
    import uvicorn

    setup_logging()
    config = get_config()
    logger.info(f"Server running on port {config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
