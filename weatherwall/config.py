"""
Configuration management for WeatherWall.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


class FrequencyDivisor(str, Enum):
    """
    Divisor used for the per-airport query fraction in stats.

    - DISTINCT_RADII: number of distinct radius buckets requested (legacy)
    - TOTAL_QUERIES: total number of point and radius queries
    """
    DISTINCT_RADII = 'distinct_radii'
    TOTAL_QUERIES = 'total_queries'


def _parse_divisor(value: str) -> FrequencyDivisor:
    """Parse divisor name, falling back to the legacy behaviour."""
    try:
        return FrequencyDivisor(value.strip().lower())
    except ValueError:
        return FrequencyDivisor.DISTINCT_RADII


def _parse_origins(value: str) -> Tuple[str, ...]:
    """Parse comma-separated CORS origins."""
    origins = tuple(o.strip() for o in value.split(',') if o.strip())
    return origins or ('*',)


@dataclass(frozen=True)
class StoreConfig:
    """Record store settings."""
    freshness_hours: int = int(os.getenv('FRESHNESS_HOURS', '24'))

    @property
    def freshness_seconds(self) -> int:
        return self.freshness_hours * 3600


@dataclass(frozen=True)
class StatsConfig:
    """Usage statistics settings."""
    divisor: FrequencyDivisor = _parse_divisor(os.getenv('IATA_FREQ_DIVISOR', 'distinct_radii'))
    radius_buckets: int = 10


@dataclass(frozen=True)
class AirportsConfig:
    """Static airport list loaded at startup."""
    data_file: Optional[str] = os.getenv('AIRPORTS_FILE') or None


@dataclass(frozen=True)
class ClientConfig:
    """HTTP client settings for talking to a remote WeatherWall."""
    base_url: str = os.getenv('WEATHER_BASE_URL', 'http://localhost:9090')
    timeout_seconds: float = float(os.getenv('WEATHER_CLIENT_TIMEOUT', '10'))


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    store: StoreConfig
    stats: StatsConfig
    airports: AirportsConfig
    client: ClientConfig

    # Flask settings
    secret_key: str
    debug: bool
    port: int
    cors_origins: Tuple[str, ...] = field(default=('*',))


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        store=StoreConfig(),
        stats=StatsConfig(),
        airports=AirportsConfig(),
        client=ClientConfig(),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
        port=int(os.getenv('PORT', '9090')),
        cors_origins=_parse_origins(os.getenv('CORS_ORIGINS', '*')),
    )


# Default instance
config = load_config()
