"""Exception hierarchy for fatal upstream failures."""

import httpx


class WeatherDeskError(Exception):
    """Base class for weatherdesk errors."""


class UpstreamError(WeatherDeskError):
    """An upstream lookup failed in a way that aborts the whole request."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_http_error(cls, what: str, exc: httpx.HTTPError) -> "UpstreamError":
        status = 504 if isinstance(exc, httpx.TimeoutException) else 502
        return cls(f"{what}: {exc}", status_code=status)


class LocationError(UpstreamError):
    """Geolocation failed or returned an unusable location string."""


class ForecastError(UpstreamError):
    """Current conditions / forecast lookup failed."""
