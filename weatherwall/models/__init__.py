"""
Data models for WeatherWall.

Plain dataclasses held in memory; nothing here is persisted:
1. Airport - immutable reference data keyed by IATA code
2. AtmosphericReading - statistical summary of one quantity
3. AtmosphericRecord - latest readings for one airport
"""

from weatherwall.models.airport import Airport
from weatherwall.models.reading import AtmosphericReading, ReadingKind
from weatherwall.models.record import AtmosphericRecord, DAY_SECONDS

__all__ = [
    'Airport',
    'AtmosphericReading',
    'ReadingKind',
    'AtmosphericRecord',
    'DAY_SECONDS',
]
