"""
API module for WeatherWall.

Provides REST endpoints for:
- Weather collection (stations upload readings, airport registry)
- Weather queries and usage statistics
"""

from weatherwall.api.collect import collect_bp
from weatherwall.api.query import query_bp

__all__ = ['collect_bp', 'query_bp']
