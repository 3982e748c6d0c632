"""
Usage statistics over stored records and past queries.

Produces the health snapshot served by the query ping endpoint:

1. datasize: records with a reading updated inside the freshness window
2. iata_freq: per-airport share of queries
3. radius_freq: 10-bucket histogram of requested radii

Histogram note:
Each requested radius lands in bucket floor(radius) mod 10. Older
deployments sized the array by the largest radius seen, but only the
first ten slots could ever be written, so the histogram has a fixed
size: ten buckets unless StatsConfig.radius_buckets says otherwise.

Query share note:
By default the per-airport count is divided by the number of distinct
radii requested, which is what existing dashboards were built against.
FrequencyDivisor.TOTAL_QUERIES divides by total query volume instead.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np

from weatherwall.config import FrequencyDivisor, config
from weatherwall.analytics.frequency import RequestFrequency
from weatherwall.store import AirportStore

logger = logging.getLogger(__name__)


RADIUS_BUCKETS = 10


@dataclass
class StatsSnapshot:
    """Point-in-time usage statistics."""
    fresh_record_count: int
    per_airport_query_fraction: Dict[str, float] = field(default_factory=dict)
    radius_histogram: List[int] = field(default_factory=lambda: [0] * RADIUS_BUCKETS)

    def to_dict(self) -> dict:
        """Flat wire form served by the ping endpoint."""
        return {
            'datasize': self.fresh_record_count,
            'iata_freq': dict(self.per_airport_query_fraction),
            'radius_freq': list(self.radius_histogram),
        }


def radius_histogram(radius_counts: Dict[float, int], buckets: int = RADIUS_BUCKETS) -> List[int]:
    """Accumulate radius counts into `buckets` slots by floor(radius) mod buckets."""
    hist = np.zeros(buckets, dtype=np.int64)
    if not radius_counts:
        return hist.tolist()

    radii = np.fromiter(radius_counts.keys(), dtype=np.float64, count=len(radius_counts))
    counts = np.fromiter(radius_counts.values(), dtype=np.int64, count=len(radius_counts))

    # np.mod follows Python semantics, so negative radii still land in [0, buckets)
    indices = np.mod(np.floor(radii).astype(np.int64), buckets)
    np.add.at(hist, indices, counts)

    return hist.tolist()


class StatsAggregator:
    """
    Derives usage snapshots from the store and query counters.
    """

    def __init__(
        self,
        store: AirportStore,
        frequency: RequestFrequency,
        divisor: Optional[FrequencyDivisor] = None,
        freshness_seconds: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
        buckets: Optional[int] = None,
    ):
        self.store = store
        self.frequency = frequency
        self.divisor = config.stats.divisor if divisor is None else divisor
        if freshness_seconds is None:
            freshness_seconds = config.store.freshness_seconds
        self.freshness_seconds = freshness_seconds
        self.buckets = config.stats.radius_buckets if buckets is None else buckets
        self.clock = clock or time.time

    def fresh_record_count(self) -> int:
        now = self.clock()
        return sum(
            1 for _, record in self.store.entries()
            if record.is_fresh(now, self.freshness_seconds)
        )

    def query_fractions(self) -> Dict[str, float]:
        """Share of queries per registered airport."""
        airport_counts = self.frequency.airport_counts()

        if self.divisor is FrequencyDivisor.TOTAL_QUERIES:
            denominator = sum(airport_counts.values())
        else:
            denominator = len(self.frequency.radius_counts())

        fractions = {}
        for airport in self.store.all_airports():
            count = airport_counts.get(airport.iata, 0)
            fractions[airport.iata] = count / denominator if denominator else 0.0
        return fractions

    def snapshot(self) -> StatsSnapshot:
        """Build the current usage snapshot."""
        with self.store.lock:
            snapshot = StatsSnapshot(
                fresh_record_count=self.fresh_record_count(),
                per_airport_query_fraction=self.query_fractions(),
                radius_histogram=radius_histogram(self.frequency.radius_counts(), self.buckets),
            )

        logger.debug(f'Stats snapshot: datasize={snapshot.fresh_record_count}')
        return snapshot
