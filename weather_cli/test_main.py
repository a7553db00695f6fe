import io
import sys

import pytest
from structlog.testing import capture_logs

from weather_cli.main import main
from weather_cli.weather_service.sanitizer import sanitize
from weather_cli.weather_service.weather import CityNotFoundError


@pytest.fixture(autouse=True)
def keep_logging_config(monkeypatch):
    monkeypatch.setattr("weather_cli.main.configure_logging", lambda level=None: None)


class FakeController:
    created_with = None

    def __init__(self, settings):
        FakeController.created_with = settings

    def run(self):
        return 0


def test_main_requires_api_key(monkeypatch, capsys):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.setattr("weather_cli.main.MenuController", FakeController)

    assert main() == 1
    assert "OPENWEATHER_API_KEY is not set" in capsys.readouterr().err


def test_main_rejects_invalid_numeric_setting(monkeypatch, capsys):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc")
    monkeypatch.setenv("WEATHER_TIMEOUT_S", "soon")

    assert main() == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_main_runs_menu_with_loaded_settings(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc")
    monkeypatch.setenv("OPENWEATHER_BASE_URL", "https://owm.test/")
    monkeypatch.delenv("WEATHER_TIMEOUT_S", raising=False)
    monkeypatch.setattr("weather_cli.main.MenuController", FakeController)

    assert main() == 0
    assert FakeController.created_with.api_key == "abc"
    assert FakeController.created_with.base_url == "https://owm.test"


def test_main_reads_undecodable_bytes_without_crashing(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc")
    monkeypatch.setenv("MENU_REDRAW_DELAY_S", "0")
    stdin = io.TextIOWrapper(io.BytesIO(b"1\n\xff\xfeCity\n5\n"), encoding="utf-8")
    stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    queries = []

    def fake_fetch_coordinates(city_name, settings):
        queries.append(sanitize(city_name))
        raise CityNotFoundError("City not found")

    monkeypatch.setattr("weather_cli.menu.controller.fetch_coordinates", fake_fetch_coordinates)

    with capture_logs():
        assert main() == 0

    assert stdin.errors == "surrogateescape"
    assert queries == ["%FF%FECity"]
