"""
Airport model - static reference data keyed by IATA code.

Airports are registered once and never change afterwards.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Airport:
    """
    A known airport.

    Fields:
        iata: 3-letter IATA code (e.g., 'BOS'), unique within a store
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
    """
    iata: str
    latitude: float
    longitude: float

    def __repr__(self) -> str:
        return f'<Airport {self.iata} ({self.latitude:.4f}, {self.longitude:.4f})>'

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'iata': self.iata,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }
