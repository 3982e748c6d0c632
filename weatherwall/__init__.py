"""
WeatherWall Package.

Airport atmospheric data service built with Flask and NumPy.

Modules:
    api/         REST endpoints for weather collection and queries
    models/      Airport, reading and record dataclasses
    ingestion/   Reading validation, airport list loading, HTTP client
    services/    Query engine and the WeatherService facade
    analytics/   Usage statistics over queries and stored records
    store.py     Thread-safe in-memory airport/record store
    geo.py       Great-circle distance
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
