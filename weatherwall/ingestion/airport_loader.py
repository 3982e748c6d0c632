"""
Airport list loader.

Reads the static list of known airports, one per line:

    BOS,42.364347,-71.005181
    "EWR", 40.6925, -74.168667

Fields may be quoted and padded with whitespace. Blank lines and lines
starting with '#' are skipped. Malformed lines are logged and skipped
rather than aborting the whole load.

Usage:
    from weatherwall.ingestion.airport_loader import load_airport_file

    for code, lat, lon in load_airport_file('airports.dat'):
        service.register_airport(code, lat, lon)
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

logger = logging.getLogger(__name__)

AirportTriple = Tuple[str, float, float]


def parse_airport_lines(lines: Iterable[str]) -> Iterator[AirportTriple]:
    """Parse 'code,lat,lon' lines into (code, lat, lon) triples."""
    reader = csv.reader(lines, skipinitialspace=True)
    for line_no, row in enumerate(reader, start=1):
        if not row or not ''.join(row).strip():
            continue
        if row[0].lstrip().startswith('#'):
            continue

        if len(row) < 3:
            logger.warning(f'Airport line {line_no}: expected code,lat,lon, got {row!r}')
            continue

        code = row[0].strip()
        try:
            lat = float(row[1])
            lon = float(row[2])
        except ValueError:
            logger.warning(f'Airport line {line_no}: invalid coordinates {row[1:3]!r}')
            continue

        if not code:
            logger.warning(f'Airport line {line_no}: missing IATA code')
            continue

        yield code, lat, lon


def load_airport_file(path: Union[str, Path]) -> List[AirportTriple]:
    """Read and parse an airport list file."""
    path = Path(path)
    with path.open(newline='', encoding='utf-8') as f:
        triples = list(parse_airport_lines(f))

    logger.info(f'Parsed {len(triples)} airports from {path}')
    return triples
