"""
In-memory store of airports and their atmospheric records.

Each airport is kept together with its record in a single entry, keyed
by IATA code, so the two can never drift apart. Positional accessors
(index_of, record_at) follow registration order for callers that still
address airports by position.

Design rationale:
The data set is small (hundreds of airports) and lives only for the
lifetime of the process. A dict keyed by code gives constant-time
lookups; scans for radius queries walk the dict in insertion order.

Thread safety:
All access goes through one re-entrant lock. Ingestion and query hold
`store.lock` across lookup and mutation so concurrent updates to the
same airport cannot be lost.
"""

import logging
import math
import re
import threading
from dataclasses import dataclass
from typing import Dict, List, Tuple

from weatherwall.exceptions import AirportNotFoundError, DuplicateCodeError
from weatherwall.models import Airport, AtmosphericRecord

logger = logging.getLogger(__name__)

IATA_CODE = re.compile(r'^[A-Z]{3}$')


@dataclass
class AirportEntry:
    """An airport and the record that belongs to it."""
    airport: Airport
    record: AtmosphericRecord


def normalize_code(code: str) -> str:
    """Canonical form of an IATA code ('  bos ' -> 'BOS')."""
    return code.strip().upper()


class AirportStore:
    """
    Thread-safe registry of airports and their atmospheric records.
    """

    def __init__(self):
        self._entries: Dict[str, AirportEntry] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding every entry; hold it for read-modify-write."""
        return self._lock

    def register_airport(self, code: str, latitude: float, longitude: float) -> Airport:
        """
        Add a new airport with an empty record.

        Raises:
            ValueError: code is not three letters or a coordinate is out of range
            DuplicateCodeError: code is already registered
        """
        code = normalize_code(code)
        latitude = float(latitude)
        longitude = float(longitude)

        if not IATA_CODE.match(code):
            raise ValueError(f'IATA code must be three letters: {code!r}')
        if not (math.isfinite(latitude) and -90 <= latitude <= 90):
            raise ValueError(f'Latitude must be between -90 and 90: {latitude}')
        if not (math.isfinite(longitude) and -180 <= longitude <= 180):
            raise ValueError(f'Longitude must be between -180 and 180: {longitude}')

        airport = Airport(iata=code, latitude=latitude, longitude=longitude)

        with self._lock:
            if code in self._entries:
                raise DuplicateCodeError(code)
            self._entries[code] = AirportEntry(airport=airport, record=AtmosphericRecord())

        logger.debug(f'Registered airport {airport!r}')
        return airport

    def entry(self, code: str) -> AirportEntry:
        """Entry for a code. Raises AirportNotFoundError."""
        with self._lock:
            entry = self._entries.get(normalize_code(code))
        if entry is None:
            raise AirportNotFoundError(code)
        return entry

    def find_airport(self, code: str) -> Airport:
        return self.entry(code).airport

    def record_for(self, code: str) -> AtmosphericRecord:
        return self.entry(code).record

    def index_of(self, code: str) -> int:
        """Registration position of an airport. Raises AirportNotFoundError."""
        code = normalize_code(code)
        with self._lock:
            for index, key in enumerate(self._entries):
                if key == code:
                    return index
        raise AirportNotFoundError(code)

    def record_at(self, index: int) -> AtmosphericRecord:
        """Record of the airport registered at `index`. Raises IndexError."""
        with self._lock:
            entries = list(self._entries.values())
        if index < 0 or index >= len(entries):
            raise IndexError(f'No airport at position {index}')
        return entries[index].record

    def all_airports(self) -> List[Airport]:
        with self._lock:
            return [e.airport for e in self._entries.values()]

    def entries(self) -> List[Tuple[Airport, AtmosphericRecord]]:
        """Snapshot of (airport, record) pairs in registration order."""
        with self._lock:
            return [(e.airport, e.record) for e in self._entries.values()]

    def codes(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        """Forget every airport and record."""
        with self._lock:
            self._entries.clear()
        logger.info('Airport store cleared')

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        with self._lock:
            return normalize_code(code) in self._entries
