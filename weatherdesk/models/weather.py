"""Weather data models: current conditions, forecast window, history."""

from dataclasses import dataclass, field

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float = 0.0
    windspeed: float = 0.0
    weathercode: int = 0


@dataclass(frozen=True)
class ForecastWindow:
    # Aligned by index, one entry per forecast day
    weathercodes: list[int] = field(default_factory=list)
    max_temperatures: list[float] = field(default_factory=list)
    min_temperatures: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class HistoricalSample:
    year: int
    date: str  # YYYY-MM-DD
    mean_temperature: str  # kept as text, may be "null" or "N/A"


@dataclass(frozen=True)
class AggregationError:
    year: int
    message: str
