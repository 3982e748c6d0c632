"""
Analytics module for WeatherWall.

Usage statistics over the record store and past queries:
- Request frequency counters
- Fresh record counts
- Radius histogram (NumPy)
"""

from weatherwall.analytics.frequency import RequestFrequency
from weatherwall.analytics.stats import (
    StatsAggregator,
    StatsSnapshot,
    radius_histogram,
)

__all__ = [
    'RequestFrequency',
    'StatsAggregator',
    'StatsSnapshot',
    'radius_histogram',
]
