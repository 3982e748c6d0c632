"""
Atmospheric readings - one statistical summary per measured quantity.

Weather stations report a summary (mean, min, max, std, sample count)
rather than raw samples. A reading is immutable once built; a newer
accepted reading of the same kind replaces it in the airport's record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

import numpy as np

from weatherwall.exceptions import UnknownKindError


class ReadingKind(str, Enum):
    """Measured atmospheric quantity."""
    WIND = 'wind'
    TEMPERATURE = 'temperature'
    HUMIDITY = 'humidity'
    PRESSURE = 'pressure'
    CLOUD_COVER = 'cloudcover'
    PRECIPITATION = 'precipitation'

    @classmethod
    def parse(cls, value: Union[str, 'ReadingKind']) -> 'ReadingKind':
        """
        Resolve a kind from user input.

        Case-insensitive; '_', '-' and spaces are ignored so 'Cloud_Cover'
        and 'CLOUDCOVER' both resolve. Raises UnknownKindError otherwise.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownKindError(str(value))

        key = value.strip().lower()
        for ch in '_- ':
            key = key.replace(ch, '')

        key = _KIND_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnknownKindError(value) from None


# Misspelling used by older station firmware
_KIND_ALIASES = {
    'humidty': ReadingKind.HUMIDITY.value,
}


@dataclass(frozen=True)
class AtmosphericReading:
    """
    Statistical summary of one atmospheric quantity.

    Only `mean` takes part in validation; the remaining fields are
    carried through to query responses as reported.
    """
    kind: ReadingKind
    mean: float
    min: float = 0.0
    max: float = 0.0
    std: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, kind: Union[str, ReadingKind], data: dict) -> 'AtmosphericReading':
        """
        Build a reading from its wire form.

        Raises ValueError if `data` is not a mapping or `mean` is missing
        or non-numeric. Other fields default to zero.
        """
        if not isinstance(data, dict):
            raise ValueError('Reading body must be a JSON object')
        if data.get('mean') is None:
            raise ValueError('Reading requires a mean')

        kind = ReadingKind.parse(kind)
        try:
            return cls(
                kind=kind,
                mean=float(data['mean']),
                min=float(data.get('min', 0.0)),
                max=float(data.get('max', 0.0)),
                std=float(data.get('std', 0.0)),
                count=int(data.get('count', 0)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f'Malformed reading: {e}') from e

    @classmethod
    def from_samples(
        cls,
        kind: Union[str, ReadingKind],
        samples: Iterable[float],
    ) -> 'AtmosphericReading':
        """
        Summarize raw station samples into a reading.

        NaN samples are dropped. Raises ValueError if nothing is left.
        """
        values = np.asarray(list(samples), dtype=np.float64)
        valid = values[~np.isnan(values)]

        if len(valid) == 0:
            raise ValueError('No valid samples to summarize')

        return cls(
            kind=ReadingKind.parse(kind),
            mean=float(np.mean(valid)),
            min=float(np.min(valid)),
            max=float(np.max(valid)),
            std=float(np.std(valid)),
            count=int(len(valid)),
        )

    def to_dict(self) -> dict:
        """Wire form without the kind (the kind is the enclosing key)."""
        return {
            'mean': self.mean,
            'min': self.min,
            'max': self.max,
            'std': self.std,
            'count': self.count,
        }
