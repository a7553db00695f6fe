"""City models for geocoding results and saved favorites."""

from pydantic import BaseModel


class GeoResult(BaseModel):
    """Coordinates of the first geocoding match, as decimal strings."""

    latitude: str
    longitude: str

    @classmethod
    def from_coordinates(cls, lat: float, lon: float) -> "GeoResult":
        """Render numeric coordinates with six fractional digits."""
        return cls(latitude=f"{lat:.6f}", longitude=f"{lon:.6f}")


class FavoriteCity(BaseModel):
    """A city the user saved to their favorites."""

    name: str
    latitude: str
    longitude: str
