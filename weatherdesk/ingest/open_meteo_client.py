"""Open-Meteo client for current conditions, daily forecast and archive data."""

import json
import logging
import math
from datetime import date

import httpx

from weatherdesk.errors import ForecastError
from weatherdesk.models.location import Coordinate
from weatherdesk.models.weather import NOT_AVAILABLE, CurrentConditions, ForecastWindow

logger = logging.getLogger(__name__)

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"

DAILY_FORECAST_FIELDS = "weathercode,temperature_2m_max,temperature_2m_min"


class WeatherClient:
    def __init__(
        self,
        client: httpx.Client,
        forecast_url: str = FORECAST_URL,
        archive_url: str = ARCHIVE_URL,
    ):
        self.client = client
        self.forecast_url = forecast_url
        self.archive_url = archive_url

    def get_current_and_forecast(
        self, coord: Coordinate
    ) -> tuple[CurrentConditions, ForecastWindow]:
        """Fetch current conditions and the daily forecast window.

        Transport and status errors are fatal; missing fields are zeroed.
        """
        params = {
            "latitude": coord.latitude,
            "longitude": coord.longitude,
            "current_weather": "true",
            "daily": DAILY_FORECAST_FIELDS,
            "timezone": "auto",
        }
        try:
            resp = self.client.get(self.forecast_url, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise ForecastError.from_http_error("Forecast lookup failed", e) from e
        except ValueError as e:
            raise ForecastError(f"Forecast lookup returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            data = {}
        return (
            _parse_current(data.get("current_weather")),
            _parse_forecast(data.get("daily")),
        )

    def get_daily_mean(self, coord: Coordinate, day: str | date) -> str:
        """Fetch the archived mean temperature for a single day.

        Raises httpx.HTTPError or ValueError; the caller decides how to
        treat a failed day.
        """
        day = day.isoformat() if isinstance(day, date) else day
        params = {
            "latitude": coord.latitude,
            "longitude": coord.longitude,
            "start_date": day,
            "end_date": day,
            "daily": "temperature_2m_mean",
        }
        resp = self.client.get(self.archive_url, params=params)
        resp.raise_for_status()
        return _extract_daily_mean(resp.json())


def _as_float(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        result = float(value)
    except OverflowError:
        return 0.0
    # inf/nan cannot be serialized into the JSON response
    return result if math.isfinite(result) else 0.0


def _as_int(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _parse_current(raw: object) -> CurrentConditions:
    if not isinstance(raw, dict):
        logger.warning("Forecast payload has no current_weather object")
        return CurrentConditions()
    return CurrentConditions(
        temperature=_as_float(raw.get("temperature")),
        windspeed=_as_float(raw.get("windspeed")),
        weathercode=_as_int(raw.get("weathercode")),
    )


def _parse_forecast(raw: object) -> ForecastWindow:
    if not isinstance(raw, dict):
        logger.warning("Forecast payload has no daily object")
        return ForecastWindow()

    columns = {
        key: raw.get(key) if isinstance(raw.get(key), list) else None
        for key in DAILY_FORECAST_FIELDS.split(",")
    }
    # A missing column is zero-filled to the window length so indices stay aligned
    length = max((len(c) for c in columns.values() if c is not None), default=0)

    def column(key: str) -> list:
        values = columns[key] or []
        return list(values) + [None] * (length - len(values))

    return ForecastWindow(
        weathercodes=[_as_int(v) for v in column("weathercode")],
        max_temperatures=[_as_float(v) for v in column("temperature_2m_max")],
        min_temperatures=[_as_float(v) for v in column("temperature_2m_min")],
    )


def _extract_daily_mean(data: object) -> str:
    daily = data.get("daily") if isinstance(data, dict) else None
    means = daily.get("temperature_2m_mean") if isinstance(daily, dict) else None
    if not isinstance(means, list) or not means:
        return NOT_AVAILABLE
    value = means[0]
    if isinstance(value, str):
        return value
    return json.dumps(value)
