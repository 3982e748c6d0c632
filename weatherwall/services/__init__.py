"""
Services operating on the in-memory airport store.

Query answering with request tracking, and the WeatherService facade
handed to the API layer.
"""

from weatherwall.services.query_engine import QueryEngine
from weatherwall.services.weather_service import WeatherService, parse_radius

__all__ = ['QueryEngine', 'WeatherService', 'parse_radius']
