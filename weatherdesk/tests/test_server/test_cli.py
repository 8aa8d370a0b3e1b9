"""Tests for CLI commands."""

import json
from datetime import date
from pathlib import Path
from unittest.mock import patch

from weatherdesk.cli import main
from weatherdesk.errors import LocationError
from weatherdesk.models.location import LocationInfo
from weatherdesk.models.report import WeatherReport
from weatherdesk.models.weather import CurrentConditions, ForecastWindow


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, capsys):
        assert main(["config", "show"]) == 0
        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["server"]["port"] == 5000

    def test_config_show_from_file(self, config_yaml_path: Path, capsys):
        assert main(["--config", str(config_yaml_path), "config", "show"]) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)["server"]["port"] == 8080

    def test_config_get(self, capsys):
        assert main(["config", "get", "history.base_year"]) == 0
        assert capsys.readouterr().out.strip() == "1940"

    def test_config_get_upstream_url(self, capsys):
        assert main(["config", "get", "upstream.archive_url"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == "https://archive-api.open-meteo.com/v1/archive"

    def test_config_get_unknown(self, capsys):
        assert main(["config", "get", "history.nope"]) == 1
        assert "Error" in capsys.readouterr().out

    def test_report(self, berlin: LocationInfo, capsys):
        report = WeatherReport(
            location=berlin, current=CurrentConditions(), forecast=ForecastWindow()
        )
        with patch("weatherdesk.cli.ReportPipeline") as pipeline_cls:
            pipeline_cls.from_config.return_value.produce_report.return_value = report
            result = main(["report", "--date", "2024-03-15"])

        assert result == 0
        produce = pipeline_cls.from_config.return_value.produce_report
        produce.assert_called_once_with(as_of=date(2024, 3, 15))
        assert json.loads(capsys.readouterr().out)["city"] == "Berlin"

    def test_report_fatal_error(self, capsys):
        with patch("weatherdesk.cli.ReportPipeline") as pipeline_cls:
            pipeline_cls.from_config.return_value.produce_report.side_effect = (
                LocationError("Location lookup failed: boom")
            )
            result = main(["report"])

        assert result == 1
        assert "Location lookup failed" in capsys.readouterr().out

    def test_serve(self):
        with patch("uvicorn.run") as run:
            assert main(["serve", "--port", "5050"]) == 0

        _, kwargs = run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 5050
