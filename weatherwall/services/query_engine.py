"""
Query engine - point and radius lookups over the airport store.

Every query also feeds the request frequency counters that the stats
endpoint reports on:
- one count per query for the origin airport
- one count per query for the requested radius (point queries use 0)

Point queries return the record even when it holds no readings; radius
queries only return airports that have at least one reading.
"""

import logging
from typing import List

from weatherwall.analytics.frequency import RequestFrequency
from weatherwall.geo import distance_km
from weatherwall.models import AtmosphericRecord
from weatherwall.store import AirportStore

logger = logging.getLogger(__name__)


class QueryEngine:
    """
    Answers weather queries and tracks how often each is asked.
    """

    def __init__(self, store: AirportStore, frequency: RequestFrequency):
        self.store = store
        self.frequency = frequency

    def query_by_point(self, code: str) -> AtmosphericRecord:
        """
        Record of a single airport, empty or not.

        Raises AirportNotFoundError.
        """
        with self.store.lock:
            entry = self.store.entry(code)
            self.frequency.record(entry.airport.iata, 0.0)
            return entry.record.copy()

    def query_by_radius(self, code: str, radius_km: float) -> List[AtmosphericRecord]:
        """
        Records of all airports within `radius_km` of the origin.

        Airports whose record has no readings are skipped, except for a
        zero radius which behaves like query_by_point and returns the
        origin's record as a one-element list.

        Raises AirportNotFoundError before touching any counter.
        """
        if radius_km == 0:
            return [self.query_by_point(code)]

        with self.store.lock:
            origin = self.store.find_airport(code)
            self.frequency.record(origin.iata, radius_km)

            results = []
            for airport, record in self.store.entries():
                if distance_km(origin, airport) <= radius_km and record.has_readings:
                    results.append(record.copy())

        logger.debug(f'Radius query {origin.iata} r={radius_km}km matched {len(results)} airports')
        return results
