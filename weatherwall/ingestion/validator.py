"""
Ingestion validator - range-checks station readings before storing them.

Each reading kind has an accepted range for its mean. A reading inside
the range replaces the airport's previous reading of that kind and
stamps the record's update time; a reading outside it is rejected and
the record is left exactly as it was.

Accepted mean ranges (lower inclusive, upper exclusive):
    wind           [0, inf)
    temperature    [-50, 100)
    humidity       [0, 100)
    pressure       [650, 800)
    cloudcover     [0, 100)
    precipitation  [0, 100)
"""

import logging
import math
import time
from typing import Callable, Dict, Optional, Tuple, Union

from weatherwall.exceptions import InvalidRangeError
from weatherwall.models import AtmosphericReading, AtmosphericRecord, ReadingKind
from weatherwall.store import AirportStore

logger = logging.getLogger(__name__)


ACCEPTED_RANGES: Dict[ReadingKind, Tuple[float, float]] = {
    ReadingKind.WIND: (0.0, math.inf),
    ReadingKind.TEMPERATURE: (-50.0, 100.0),
    ReadingKind.HUMIDITY: (0.0, 100.0),
    ReadingKind.PRESSURE: (650.0, 800.0),
    ReadingKind.CLOUD_COVER: (0.0, 100.0),
    ReadingKind.PRECIPITATION: (0.0, 100.0),
}


def accepts(kind: Union[str, ReadingKind], mean: float) -> bool:
    """
    Check a mean against the kind's accepted range.

    Wind has no upper bound, so +inf is accepted there. NaN never is.
    """
    low, high = ACCEPTED_RANGES[ReadingKind.parse(kind)]
    if high == math.inf:
        return mean >= low
    return low <= mean < high


class IngestionValidator:
    """
    Validates readings and writes accepted ones through to the store.
    """

    def __init__(
        self,
        store: AirportStore,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            store: Store holding the airport records
            clock: Returns current epoch seconds (time.time if None)
        """
        self.store = store
        self.clock = clock or time.time

        self._accepted = 0
        self._rejected = 0

    def ingest(
        self,
        code: str,
        kind: Union[str, ReadingKind],
        reading: AtmosphericReading,
    ) -> AtmosphericRecord:
        """
        Store one reading for an airport.

        `kind` decides where the reading goes; a reading built for a
        different kind is re-tagged to it.

        Returns a copy of the updated record.

        Raises:
            UnknownKindError: kind string matches no reading kind
            AirportNotFoundError: code is not registered
            InvalidRangeError: mean outside the accepted range
        """
        kind = ReadingKind.parse(kind)
        if reading.kind is not kind:
            reading = AtmosphericReading(
                kind=kind,
                mean=reading.mean,
                min=reading.min,
                max=reading.max,
                std=reading.std,
                count=reading.count,
            )

        with self.store.lock:
            record = self.store.record_for(code)

            if not accepts(kind, reading.mean):
                self._rejected += 1
                logger.warning(f'Rejected {kind.value} reading for {code}: mean={reading.mean}')
                raise InvalidRangeError(kind.value, reading.mean)

            record.set(reading, self.clock())
            self._accepted += 1
            updated = record.copy()

        logger.info(f'Stored {kind.value} reading for {code}: mean={reading.mean}')
        return updated

    @property
    def stats(self) -> dict:
        """Get ingestion statistics."""
        with self.store.lock:
            return {
                'accepted': self._accepted,
                'rejected': self._rejected,
            }
