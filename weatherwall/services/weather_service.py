"""
WeatherService - the single entry point the API layer talks to.

Owns one airport store, one set of request counters and the components
operating on them. Built once at startup by the application factory
and shared by every request handler; nothing here is a module global.
"""

import logging
import math
import time
from typing import Callable, Iterable, List, Optional, Tuple, Union

from weatherwall.analytics.frequency import RequestFrequency
from weatherwall.analytics.stats import StatsAggregator, StatsSnapshot
from weatherwall.config import AppConfig, config as default_config
from weatherwall.exceptions import DuplicateCodeError
from weatherwall.ingestion.validator import IngestionValidator
from weatherwall.models import Airport, AtmosphericReading, AtmosphericRecord, ReadingKind
from weatherwall.services.query_engine import QueryEngine
from weatherwall.store import AirportStore

logger = logging.getLogger(__name__)


def parse_radius(value: Optional[Union[str, float]]) -> float:
    """
    Parse a query radius in km.

    Missing or blank values mean 0 (point query). Raises ValueError for
    non-numeric, negative or non-finite input.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        if not value.strip():
            return 0.0
        value = value.strip()

    radius = float(value)
    if not math.isfinite(radius) or radius < 0:
        raise ValueError(f'Invalid radius: {value!r}')
    return radius


class WeatherService:
    """
    Facade over the airport store, ingestion, queries and stats.
    """

    def __init__(
        self,
        app_config: Optional[AppConfig] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            app_config: Configuration (module default if None)
            clock: Returns current epoch seconds (time.time if None)
        """
        cfg = app_config or default_config
        self.clock = clock or time.time

        self.store = AirportStore()
        self.frequency = RequestFrequency()
        self.validator = IngestionValidator(self.store, clock=self.clock)
        self.queries = QueryEngine(self.store, self.frequency)
        self.stats = StatsAggregator(
            self.store,
            self.frequency,
            divisor=cfg.stats.divisor,
            freshness_seconds=cfg.store.freshness_seconds,
            clock=self.clock,
            buckets=cfg.stats.radius_buckets,
        )

    # -------------------------------------------------------------------------
    # Airports
    # -------------------------------------------------------------------------

    def register_airport(self, code: str, latitude: float, longitude: float) -> Airport:
        return self.store.register_airport(code, latitude, longitude)

    def load_airports(self, triples: Iterable[Tuple[str, float, float]]) -> int:
        """
        Register a batch of airports, skipping duplicates and invalid entries.

        Returns count of airports added.
        """
        added = 0
        for code, lat, lon in triples:
            try:
                self.store.register_airport(code, lat, lon)
                added += 1
            except (DuplicateCodeError, ValueError) as e:
                logger.warning(f'Skipping airport {code}: {e}')

        logger.info(f'Loaded {added} airports ({len(self.store)} total)')
        return added

    def find_airport(self, code: str) -> Airport:
        return self.store.find_airport(code)

    def airports(self) -> List[Airport]:
        return self.store.all_airports()

    def reset(self) -> None:
        """Drop all airports, records and counters."""
        with self.store.lock:
            self.store.clear()
            self.frequency.clear()

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def ingest(
        self,
        code: str,
        kind: Union[str, ReadingKind],
        reading: Union[AtmosphericReading, dict],
    ) -> AtmosphericRecord:
        """
        Validate and store a reading.

        `reading` may be an AtmosphericReading or its wire-form dict;
        anything else fails in from_dict with ValueError.
        """
        kind = ReadingKind.parse(kind)
        if not isinstance(reading, AtmosphericReading):
            reading = AtmosphericReading.from_dict(kind, reading)
        return self.validator.ingest(code, kind, reading)

    def query(
        self,
        code: str,
        radius: Optional[Union[str, float]] = None,
    ) -> List[AtmosphericRecord]:
        """Weather around an airport; blank radius means the airport alone."""
        return self.queries.query_by_radius(code, parse_radius(radius))

    def query_by_point(self, code: str) -> AtmosphericRecord:
        return self.queries.query_by_point(code)

    def query_by_radius(self, code: str, radius_km: float) -> List[AtmosphericRecord]:
        return self.queries.query_by_radius(code, radius_km)

    def snapshot(self) -> StatsSnapshot:
        return self.stats.snapshot()
