"""Open-Meteo forecast API client: one request, no retry."""

import logging

import httpx

from skyterm.errors import DecodeError, RemoteError, TransportError
from skyterm.models.forecast import ForecastRequest, ForecastResult
from skyterm.models.wire import decode_forecast

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_USER_AGENT = "skyterm/0.1.0"


def build_params(request: ForecastRequest) -> dict[str, str | int | float]:
    """Translate a ForecastRequest into Open-Meteo query parameters."""
    params: dict[str, str | int | float] = {
        "latitude": request.coordinate.latitude,
        "longitude": request.coordinate.longitude,
        "temperature_unit": request.temperature_unit.value,
        "forecast_days": request.forecast_days,
    }
    if request.current_fields:
        params["current"] = ",".join(request.current_fields)
    if request.daily_fields:
        params["daily"] = ",".join(request.daily_fields)
        # Daily aggregation needs a timezone to know where a day starts
        params["timezone"] = request.timezone
    return params


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    def fetch(self, request: ForecastRequest) -> ForecastResult:
        """Fetch forecast data for a single request.

        Performs exactly one HTTP GET. Raises TransportError, RemoteError or
        DecodeError; the caller decides how to degrade.
        """
        params = build_params(request)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        logger.info(
            "Fetching forecast for %.4f,%.4f from %s",
            request.coordinate.latitude, request.coordinate.longitude, self.base_url,
        )
        try:
            if self.timeout is None:
                resp = httpx.get(self.base_url, params=params, headers=headers)
            else:
                resp = httpx.get(
                    self.base_url, params=params, headers=headers, timeout=self.timeout
                )
        except httpx.RequestError as e:
            raise TransportError(f"Request to {self.base_url} failed: {e}", cause=e) from e

        logger.info("Open-Meteo responded %d for %s", resp.status_code, resp.url)
        logger.info("Raw payload: %s", resp.text)

        if resp.is_error:
            reason = _error_reason(resp)
            raise RemoteError(
                f"Open-Meteo returned {resp.status_code}: {reason or resp.reason_phrase}",
                status_code=resp.status_code,
                reason=reason,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise DecodeError(f"Response body is not JSON: {e}", cause=e) from e

        return decode_forecast(payload)


def _error_reason(resp: httpx.Response) -> str | None:
    """Extract Open-Meteo's ``reason`` field from an error body, if any."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("reason"), str):
        return body["reason"]
    return None
