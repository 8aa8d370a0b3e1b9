"""The consolidated weather report returned by GET /weather."""

from dataclasses import dataclass, field
from typing import Any

from weatherdesk.models.location import LocationInfo
from weatherdesk.models.weather import (
    AggregationError,
    CurrentConditions,
    ForecastWindow,
    HistoricalSample,
)


@dataclass(frozen=True)
class WeatherReport:
    location: LocationInfo
    current: CurrentConditions
    forecast: ForecastWindow
    history: list[HistoricalSample] = field(default_factory=list)
    errors: list[AggregationError] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the public JSON shape, keys in wire order."""
        loc = self.location
        return {
            "ip": loc.ip,
            "lat": loc.coordinate.latitude,
            "lon": loc.coordinate.longitude,
            "city": loc.city,
            "region": loc.region,
            "country": loc.country,
            "temperature": self.current.temperature,
            "windspeed": self.current.windspeed,
            "weathercode": self.current.weathercode,
            "week_weather_codes": list(self.forecast.weathercodes),
            "week_max_temperatures": list(self.forecast.max_temperatures),
            "week_min_temperatures": list(self.forecast.min_temperatures),
            "weather_history": [
                {
                    "year": s.year,
                    "date": s.date,
                    "mean_temperature": s.mean_temperature,
                }
                for s in self.history
            ],
            "errors": [e.message for e in self.errors],
        }
