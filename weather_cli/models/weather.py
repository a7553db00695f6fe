"""Weather reading model and display labels."""

from pydantic import BaseModel

WEATHER_LABELS = {
    "temperature_c": "Temperature (Celsius)",
    "feels_like_c": "Feels Like (Celsius)",
    "temp_min_c": "Min Temperature (Celsius)",
    "temp_max_c": "Max Temperature (Celsius)",
    "pressure_hpa": "Pressure (hPa)",
    "humidity_pct": "Humidity (%)",
    "wind_speed_ms": "Wind Speed (meters/sec)",
    "cloudiness_pct": "Cloudiness (%)",
    "rain_mm_h": "Rain (mm/hr)",
    "snow_mm_h": "Snow (mm/hr)",
}


class WeatherReading(BaseModel):
    """Current conditions for a coordinate pair, in metric units."""

    temperature_c: float
    feels_like_c: float
    pressure_hpa: float
    humidity_pct: float
    temp_min_c: float
    temp_max_c: float
    wind_speed_ms: float
    cloudiness_pct: float
    rain_mm_h: float = 0.0
    snow_mm_h: float = 0.0

    @classmethod
    def from_api_response(cls, api_data: dict) -> "WeatherReading":
        """Create a reading from the /data/2.5/weather payload.

        Args:
            api_data: Decoded JSON body of the weather endpoint.

        Returns:
            A populated WeatherReading. Rain and snow default to 0.0.

        Raises:
            KeyError: If a required section or field is missing.
            TypeError: If a section is not an object.
        """
        main = api_data["main"]
        return cls(
            temperature_c=main["temp"],
            feels_like_c=main["feels_like"],
            pressure_hpa=main["pressure"],
            humidity_pct=main["humidity"],
            temp_min_c=main["temp_min"],
            temp_max_c=main["temp_max"],
            wind_speed_ms=api_data["wind"]["speed"],
            cloudiness_pct=api_data["clouds"]["all"],
            rain_mm_h=_hourly_rate(api_data, "rain"),
            snow_mm_h=_hourly_rate(api_data, "snow"),
        )

    def labeled(self) -> list[tuple[str, float]]:
        """Return (label, value) pairs in display order."""
        return [(label, getattr(self, field)) for field, label in WEATHER_LABELS.items()]


def _hourly_rate(api_data: dict, section: str) -> float:
    # Absent sections mean no precipitation in the last hour.
    if section not in api_data:
        return 0.0
    return api_data[section].get("1h", 0.0)
