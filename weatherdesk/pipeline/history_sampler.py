"""Historical sampler: one archived mean temperature per scheduled past year."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import httpx

from weatherdesk.ingest.open_meteo_client import WeatherClient
from weatherdesk.models.location import Coordinate
from weatherdesk.models.weather import AggregationError, HistoricalSample

logger = logging.getLogger(__name__)

BASE_YEAR = 1940  # earliest year with reliable archive coverage
STEP_YEARS = 5


def sampling_schedule(
    current_year: int, base_year: int = BASE_YEAR, step: int = STEP_YEARS
) -> list[int]:
    """Years to sample for a request made in current_year.

    Starts at base_year + ((current_year - 1) mod 10) and steps forward
    while the year is at most current_year - 1. E.g. 2024 gives
    1943, 1948, ..., 2023.
    """
    start = base_year + (current_year - 1) % 10
    return list(range(start, current_year, step))


def target_date(year: int, as_of: date) -> str:
    """Same month/day as as_of in the given year.

    Built as text, so Feb 29 in a non-leap year is passed through unchanged.
    """
    return f"{year:04d}-{as_of.month:02d}-{as_of.day:02d}"


class HistoricalSampler:
    def __init__(
        self,
        weather: WeatherClient,
        base_year: int = BASE_YEAR,
        step_years: int = STEP_YEARS,
        max_workers: int = 4,
    ):
        self.weather = weather
        self.base_year = base_year
        self.step_years = step_years
        self.max_workers = max_workers

    def sample(
        self, coord: Coordinate, as_of: date
    ) -> tuple[list[HistoricalSample], list[AggregationError]]:
        """Fetch one sample per scheduled year, in ascending year order.

        A failed year contributes an AggregationError instead of a sample;
        it never aborts the other years.
        """
        years = sampling_schedule(as_of.year, self.base_year, self.step_years)
        logger.info("Sampling %d historical years for %s", len(years), as_of)
        if not years:
            return [], []

        workers = min(self.max_workers, len(years))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, one result slot per year
            results = list(executor.map(lambda y: self._fetch_year(coord, y, as_of), years))

        samples = [r for r in results if isinstance(r, HistoricalSample)]
        errors = [r for r in results if isinstance(r, AggregationError)]
        return samples, errors

    def _fetch_year(
        self, coord: Coordinate, year: int, as_of: date
    ) -> HistoricalSample | AggregationError:
        day = target_date(year, as_of)
        try:
            mean = self.weather.get_daily_mean(coord, day)
        except (httpx.HTTPError, ValueError) as e:
            message = f"Error fetching historical data for {year}: {e}"
            logger.warning("%s", message)
            return AggregationError(year=year, message=message)
        return HistoricalSample(year=year, date=day, mean_temperature=mean)
