"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest
import yaml

from weatherdesk.config.schema import AppConfig
from weatherdesk.models.location import Coordinate, LocationInfo

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def ipinfo_payload() -> dict:
    return load_fixture("ipinfo_berlin.json")


@pytest.fixture
def forecast_payload() -> dict:
    return load_fixture("open_meteo_forecast_berlin.json")


@pytest.fixture
def archive_payload() -> dict:
    return load_fixture("open_meteo_archive_day.json")


@pytest.fixture
def berlin() -> LocationInfo:
    return LocationInfo(
        ip="203.0.113.7",
        city="Berlin",
        region="Land Berlin",
        country="DE",
        coordinate=Coordinate(latitude="52.5244", longitude="13.4105"),
    )


@pytest.fixture
def as_of() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "upstream": {"timeout_seconds": 2.5},
        "history": {"max_workers": 1},
        "server": {"port": 8080},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
