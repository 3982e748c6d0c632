"""
AtmosphericRecord model - latest accepted readings for one airport.

Each airport owns exactly one record, created together with it. The
record holds at most one reading per kind plus the time of the last
accepted ingestion.
"""

from dataclasses import dataclass, fields
from typing import Dict, Optional

from weatherwall.models.reading import AtmosphericReading, ReadingKind


# Default freshness window: readings updated within the last day
DAY_SECONDS = 86400

_KIND_FIELDS = {
    ReadingKind.WIND: 'wind',
    ReadingKind.TEMPERATURE: 'temperature',
    ReadingKind.HUMIDITY: 'humidity',
    ReadingKind.PRESSURE: 'pressure',
    ReadingKind.CLOUD_COVER: 'cloud_cover',
    ReadingKind.PRECIPITATION: 'precipitation',
}


@dataclass
class AtmosphericRecord:
    """
    Latest known atmospheric state of an airport.

    Readings are None until a valid one is ingested. `last_update_time`
    is epoch seconds, 0.0 when nothing has been accepted yet.
    """
    wind: Optional[AtmosphericReading] = None
    temperature: Optional[AtmosphericReading] = None
    humidity: Optional[AtmosphericReading] = None
    pressure: Optional[AtmosphericReading] = None
    cloud_cover: Optional[AtmosphericReading] = None
    precipitation: Optional[AtmosphericReading] = None
    last_update_time: float = 0.0

    def get(self, kind: ReadingKind) -> Optional[AtmosphericReading]:
        return getattr(self, _KIND_FIELDS[kind])

    def set(self, reading: AtmosphericReading, timestamp: float) -> None:
        """Store a reading under its kind and stamp the update time."""
        setattr(self, _KIND_FIELDS[reading.kind], reading)
        self.last_update_time = timestamp

    def readings(self) -> Dict[ReadingKind, AtmosphericReading]:
        """Present readings keyed by kind."""
        result = {}
        for kind, name in _KIND_FIELDS.items():
            reading = getattr(self, name)
            if reading is not None:
                result[kind] = reading
        return result

    @property
    def has_readings(self) -> bool:
        return any(getattr(self, name) is not None for name in _KIND_FIELDS.values())

    def is_fresh(self, now: float, window_seconds: float = DAY_SECONDS) -> bool:
        """True if the record has a reading updated within the window."""
        return self.has_readings and self.last_update_time > now - window_seconds

    def copy(self) -> 'AtmosphericRecord':
        """Shallow copy; readings are immutable so sharing them is safe."""
        return AtmosphericRecord(**{f.name: getattr(self, f.name) for f in fields(self)})

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        result = {}
        for name in _KIND_FIELDS.values():
            reading = getattr(self, name)
            result[name] = reading.to_dict() if reading else None
        result['last_update_time'] = self.last_update_time
        return result
