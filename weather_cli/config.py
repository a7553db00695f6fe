"""Environment-backed settings for the weather menu."""

import os

from pydantic import BaseModel, Field, ValidationError

DEFAULT_BASE_URL = "https://api.openweathermap.org"


class ConfigError(Exception):
    """Raised when an environment setting cannot be parsed."""
    pass


class Settings(BaseModel):
    """Runtime settings for the API client and the menu."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = Field(default=5.0, gt=0)
    redraw_delay_s: float = Field(default=1.0, ge=0)
    log_level: str = "WARNING"


def load_settings(environ=None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        A validated Settings model.

    Raises:
        ConfigError: If a numeric variable is malformed or out of range.
    """
    env = os.environ if environ is None else environ
    try:
        return Settings(
            api_key=env.get("OPENWEATHER_API_KEY", "").strip(),
            base_url=env.get("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout_s=env.get("WEATHER_TIMEOUT_S", "5"),
            redraw_delay_s=env.get("MENU_REDRAW_DELAY_S", "1.0"),
            log_level=env.get("LOG_LEVEL", "WARNING"),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
