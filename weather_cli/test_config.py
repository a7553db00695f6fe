import pytest

from weather_cli.config import DEFAULT_BASE_URL, ConfigError, load_settings


def test_defaults_without_environment():
    settings = load_settings({})

    assert settings.api_key == ""
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout_s == 5.0
    assert settings.redraw_delay_s == 1.0
    assert settings.log_level == "WARNING"


def test_values_are_read_from_environment():
    settings = load_settings(
        {
            "OPENWEATHER_API_KEY": " secret ",
            "WEATHER_TIMEOUT_S": "2.5",
            "MENU_REDRAW_DELAY_S": "0",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.api_key == "secret"
    assert settings.timeout_s == 2.5
    assert settings.redraw_delay_s == 0.0
    assert settings.log_level == "debug"


@pytest.mark.parametrize(
    "name, value",
    [("WEATHER_TIMEOUT_S", "0"), ("WEATHER_TIMEOUT_S", "fast"), ("MENU_REDRAW_DELAY_S", "-1")],
)
def test_invalid_numbers_raise_config_error(name, value):
    with pytest.raises(ConfigError):
        load_settings({name: value})
