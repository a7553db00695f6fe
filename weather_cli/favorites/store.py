"""In-memory, capped list of favorite cities."""

from pydantic import ValidationError

from weather_cli.logging_config import logger
from weather_cli.models.city import FavoriteCity, GeoResult

MAX_FAVORITES = 3


class FavoritesError(Exception):
    """Base exception for favorites list operations."""
    pass


class CapacityError(FavoritesError):
    """Raised when adding to a full favorites list."""
    pass


class PositionError(FavoritesError, IndexError):
    """Raised when a 1-based position is outside the list."""
    pass


class InvalidCityError(FavoritesError, ValueError):
    """Raised when a city cannot be stored, e.g. a name that is not valid text."""
    pass


class FavoritesStore:
    """Ordered favorites with a fixed capacity; duplicate names are allowed."""

    def __init__(self, capacity: int = MAX_FAVORITES):
        self.capacity = capacity
        self._cities: list[FavoriteCity] = []

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self):
        return iter(self._cities)

    @property
    def is_full(self) -> bool:
        return len(self._cities) >= self.capacity

    def add(self, name: str, geo: GeoResult) -> FavoriteCity:
        """Append a city built from a geocoding result.

        Raises:
            CapacityError: If the list already holds ``capacity`` cities.
            InvalidCityError: If the name or coordinates fail validation.
        """
        if self.is_full:
            raise CapacityError("Favorites list is full.")
        try:
            city = FavoriteCity(name=name, latitude=geo.latitude, longitude=geo.longitude)
        except ValidationError as exc:
            raise InvalidCityError("City name is not valid text.") from exc
        self._cities.append(city)
        logger.info("FAVORITE_ADDED", city=name, count=len(self._cities))
        return city

    def remove(self, position: int) -> FavoriteCity:
        """Remove and return the city at a 1-based position.

        Raises:
            PositionError: If position is below 1 or past the end.
        """
        if position < 1 or position > len(self._cities):
            raise PositionError(
                f"Position {position} is out of bounds (1-{len(self._cities)})."
            )
        city = self._cities.pop(position - 1)
        logger.info("FAVORITE_REMOVED", city=city.name, count=len(self._cities))
        return city

    def list(self) -> tuple[FavoriteCity, ...]:
        """Return the favorites in insertion order."""
        return tuple(self._cities)
