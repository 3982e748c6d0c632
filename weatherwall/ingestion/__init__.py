"""
Data ingestion module for WeatherWall.

Handles validating station readings, loading the airport list and
talking to a remote WeatherWall over HTTP.
"""

from weatherwall.ingestion.airport_loader import load_airport_file, parse_airport_lines
from weatherwall.ingestion.collector_client import WeatherCollectorClient
from weatherwall.ingestion.validator import ACCEPTED_RANGES, IngestionValidator, accepts

__all__ = [
    'ACCEPTED_RANGES',
    'IngestionValidator',
    'WeatherCollectorClient',
    'accepts',
    'load_airport_file',
    'parse_airport_lines',
]
