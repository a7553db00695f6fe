"""OpenWeather integration: geocoding by name and current weather by coordinates."""

import httpx
from pydantic import ValidationError

from weather_cli.config import Settings
from weather_cli.logging_config import logger
from weather_cli.models.city import GeoResult
from weather_cli.models.weather import WeatherReading
from weather_cli.weather_service.sanitizer import sanitize

GEOCODE_PATH = "/geo/1.0/direct"
WEATHER_PATH = "/data/2.5/weather"


class WeatherServiceError(Exception):
    """Base exception for weather service failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def with_context(self, context: str) -> "WeatherServiceError":
        """Return an error of the same type whose message is prefixed with context.

        Extra attributes such as ``status_code`` are carried over.
        """
        wrapped = self.__class__.__new__(self.__class__)
        wrapped.__dict__.update(self.__dict__)
        wrapped.message = f"{context}: {self.message}"
        wrapped.args = (wrapped.message,)
        return wrapped


class TransportError(WeatherServiceError):
    """Raised when the API cannot be reached."""
    pass


class StatusError(WeatherServiceError):
    """Raised when the API answers with a non-200 HTTP status."""

    def __init__(self, status_code: int):
        super().__init__(f"GET request status: {status_code}")
        self.status_code = status_code


class ParseError(WeatherServiceError):
    """Raised when a response body is not valid JSON."""
    pass


class DataError(WeatherServiceError):
    """Raised when a payload lacks an expected field."""
    pass


class CityNotFoundError(WeatherServiceError, LookupError):
    """Raised when a city lookup returns no results."""
    pass


class ApiError(WeatherServiceError):
    """Raised when the weather payload reports an error code."""
    pass


def _get_json(path: str, query: str, settings: Settings, event_prefix: str):
    """Execute a GET against the OpenWeather host and decode the JSON body.

    Args:
        path: Endpoint path, e.g. ``/data/2.5/weather``.
        query: Pre-encoded query string without the API key.
        settings: Settings providing host, key and timeout.
        event_prefix: Log event prefix, e.g. ``GEOCODE`` or ``WEATHER``.

    Returns:
        The decoded JSON body.

    Raises:
        TransportError: On connection failure or timeout.
        StatusError: When the HTTP status is not 200.
        ParseError: When the body is not valid JSON.
    """
    url = f"{settings.base_url}{path}?{query}&appid={settings.api_key}"
    try:
        response = httpx.get(url, timeout=settings.timeout_s)
    except httpx.RequestError as exc:
        logger.error(f"{event_prefix}_REQUEST_FAILED", path=path, error=str(exc))
        raise TransportError("Failed to connect to OpenWeather API.") from exc

    logger.info(f"{event_prefix}_RESPONSE", path=path, status=response.status_code)
    if response.status_code != 200:
        raise StatusError(response.status_code)

    try:
        return response.json()
    except ValueError as exc:
        logger.error(f"{event_prefix}_BAD_JSON", path=path, error=str(exc))
        raise ParseError(f"Failed to parse response body to JSON: {exc}") from exc


def fetch_coordinates(city_name: str, settings: Settings) -> GeoResult:
    """Resolve a city name to the coordinates of its first match.

    Args:
        city_name: Raw city name; it is trimmed and percent-encoded.
        settings: Settings for the API call.

    Returns:
        A GeoResult with six-decimal latitude and longitude strings.

    Raises:
        CityNotFoundError: If the geocoding result is empty.
        DataError: If the first match lacks lat/lon.
        WeatherServiceError: Any transport failure, with added context.
    """
    try:
        results = _get_json(
            GEOCODE_PATH, f"q={sanitize(city_name)}&limit=1", settings, "GEOCODE"
        )
        if not isinstance(results, list):
            raise DataError("API returned an unexpected payload.")
        if not results:
            raise CityNotFoundError(f"City not found: {city_name}")
        match = results[0]
        if not isinstance(match, dict) or "lat" not in match or "lon" not in match:
            logger.error("GEOCODE_BAD_PAYLOAD", city=city_name)
            raise DataError("API missing lat or lon information.")
        try:
            return GeoResult.from_coordinates(float(match["lat"]), float(match["lon"]))
        except (TypeError, ValueError) as exc:
            logger.error("GEOCODE_BAD_PAYLOAD", city=city_name, error=str(exc))
            raise DataError("API returned non-numeric coordinates.") from exc
    except WeatherServiceError as exc:
        raise exc.with_context("Error fetching geocoding data") from exc


def fetch_weather(lat: str, lon: str, settings: Settings) -> WeatherReading:
    """Fetch current metric weather for a coordinate pair.

    Args:
        lat: Latitude as a decimal string.
        lon: Longitude as a decimal string.
        settings: Settings for the API call.

    Returns:
        A WeatherReading built from the response.

    Raises:
        DataError: If the body is empty or lacks a required metric.
        ApiError: If the payload's ``cod`` is not 200.
        WeatherServiceError: Any transport failure, with added context.
    """
    try:
        data = _get_json(
            WEATHER_PATH, f"lat={lat}&lon={lon}&units=metric", settings, "WEATHER"
        )
        if not data or not isinstance(data, dict):
            raise DataError("API returned empty result.")
        if str(data.get("cod")) != "200":
            logger.error("WEATHER_API_ERROR", lat=lat, lon=lon, cod=data.get("cod"))
            raise ApiError(f"API returned error: {data.get('message', 'unknown error')}")
        try:
            return WeatherReading.from_api_response(data)
        except (KeyError, TypeError, AttributeError, ValidationError) as exc:
            logger.error("WEATHER_BAD_PAYLOAD", lat=lat, lon=lon, error=str(exc))
            raise DataError(f"API missing weather information: {exc}") from exc
    except WeatherServiceError as exc:
        raise exc.with_context("Error fetching weather data") from exc
