"""Report pipeline: location -> current/forecast -> history -> WeatherReport."""

import logging
from datetime import date

import httpx

from weatherdesk.config.schema import AppConfig
from weatherdesk.ingest.geo_client import GeoLocator
from weatherdesk.ingest.open_meteo_client import WeatherClient
from weatherdesk.models.common import utc_today
from weatherdesk.models.report import WeatherReport
from weatherdesk.pipeline.history_sampler import HistoricalSampler

logger = logging.getLogger(__name__)


class ReportPipeline:
    def __init__(
        self,
        geo: GeoLocator,
        weather: WeatherClient,
        sampler: HistoricalSampler,
    ):
        self.geo = geo
        self.weather = weather
        self.sampler = sampler

    @classmethod
    def from_config(cls, config: AppConfig, client: httpx.Client) -> "ReportPipeline":
        """Wire the collaborators around one shared HTTP client."""
        weather = WeatherClient(
            client,
            forecast_url=config.upstream.forecast_url,
            archive_url=config.upstream.archive_url,
        )
        return cls(
            geo=GeoLocator(client, base_url=config.upstream.ipinfo_url),
            weather=weather,
            sampler=HistoricalSampler(
                weather,
                base_year=config.history.base_year,
                step_years=config.history.step_years,
                max_workers=config.history.max_workers,
            ),
        )

    def produce_report(
        self, client_ip: str | None = None, as_of: date | None = None
    ) -> WeatherReport:
        """Build the consolidated report for one request.

        LocationError and ForecastError propagate; historical failures are
        collected into the report's errors.
        """
        # 1. LOCATION
        location = self.geo.locate(client_ip)

        # 2. CURRENT + FORECAST
        current, forecast = self.weather.get_current_and_forecast(location.coordinate)

        # 3. HISTORY
        as_of = as_of or utc_today()
        history, errors = self.sampler.sample(location.coordinate, as_of)

        # 4. ASSEMBLE
        report = WeatherReport(
            location=location,
            current=current,
            forecast=forecast,
            history=history,
            errors=errors,
        )
        logger.info(
            "Report for %s: %d forecast days, %d history samples, %d errors",
            location.city or location.ip, len(forecast.weathercodes), len(history), len(errors),
        )
        return report
