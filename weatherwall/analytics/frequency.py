"""
Request frequency counters fed by the query engine.

Airport counts are keyed by IATA code, radius counts by the raw radius
value as requested (not rounded). Counters live only in memory.
"""

import threading
from collections import Counter
from typing import Dict


class RequestFrequency:
    """Thread-safe query counters."""

    def __init__(self):
        self._airports: Counter = Counter()
        self._radii: Counter = Counter()
        self._lock = threading.Lock()

    def record(self, code: str, radius: float) -> None:
        with self._lock:
            self._airports[code] += 1
            self._radii[float(radius)] += 1

    def airport_counts(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._airports)

    def radius_counts(self) -> Dict[float, int]:
        with self._lock:
            return dict(self._radii)

    def total_queries(self) -> int:
        with self._lock:
            return sum(self._airports.values())

    def clear(self) -> None:
        with self._lock:
            self._airports.clear()
            self._radii.clear()
