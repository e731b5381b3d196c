# ABOUTME: Service layer for the data.gov.sg 24-hour forecast call and payload shape checks.
# ABOUTME: Handles the single outbound GET and validation of the first forecast item.

import logging

import httpx
from pydantic import ValidationError

from shoresquad.models import ForecastItem, ForecastPayload

logger = logging.getLogger(__name__)


class ForecastDataError(ValueError):
    """The forecast body arrived but does not have the expected shape."""


async def fetch_forecast(client: httpx.AsyncClient, url: str, params: dict | None = None) -> dict:
    """Fetch the raw forecast JSON. Non-success statuses raise httpx.HTTPStatusError."""
    logger.info("Fetching forecast from %s", url)
    resp = await client.get(url, params=params or {})
    resp.raise_for_status()
    return resp.json()


def parse_forecast(data) -> ForecastItem:
    """Validate a forecast body and return its first item.

    Raises ForecastDataError when the body is not an object, the items list is
    missing or empty, or a field has the wrong type.
    """
    if not isinstance(data, dict) or not data.get("items"):
        raise ForecastDataError("No weather data available")

    try:
        payload = ForecastPayload.model_validate(data)
    except ValidationError as e:
        raise ForecastDataError(f"Unexpected forecast format: {e.error_count()} invalid field(s)") from e

    return payload.items[0]


async def get_forecast(client: httpx.AsyncClient, url: str, params: dict | None = None) -> ForecastItem:
    """Fetch and validate the forecast in one step."""
    data = await fetch_forecast(client, url, params)
    return parse_forecast(data)
