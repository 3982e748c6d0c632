"""
HTTP client for a remote WeatherWall service.

Used by weather stations to push readings and by operators to seed the
airport list on a running server. Wraps both APIs:
- /collect: ping, airport registration and lookup, reading upload
- /query: weather around an airport, usage statistics

Errors:
Any non-2xx answer is logged and raised as CollectorClientError with
the HTTP status code attached. Network failures propagate as
requests.RequestException.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

import requests

from weatherwall.config import config
from weatherwall.exceptions import CollectorClientError
from weatherwall.models import AtmosphericReading, ReadingKind

logger = logging.getLogger(__name__)


class WeatherCollectorClient:
    """
    Client for the WeatherWall collector and query APIs.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.client.base_url).rstrip('/')
        self.timeout = timeout or config.client.timeout_seconds
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'WeatherCollectorClient':
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send a request and raise CollectorClientError on error status."""
        url = f'{self.base_url}{path}'
        logger.debug(f'{method} {url}')

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout:
            logger.error(f'WeatherWall API timeout: {method} {url}')
            raise
        except requests.exceptions.RequestException as e:
            logger.error(f'WeatherWall request failed: {e}')
            raise

        if response.status_code >= 400:
            logger.warning(f'WeatherWall API error: {response.status_code} for {method} {path}')
            raise CollectorClientError(response.status_code, response.text)

        return response

    # -------------------------------------------------------------------------
    # Collector API
    # -------------------------------------------------------------------------

    def ping(self) -> bool:
        """Check the collector is reachable."""
        try:
            self._request('HEAD', '/collect/ping')
            return True
        except (CollectorClientError, requests.exceptions.RequestException):
            return False

    def list_airports(self) -> List[str]:
        return self._request('GET', '/collect/airports').json()

    def get_airport(self, code: str) -> dict:
        return self._request('GET', f'/collect/airport/{code}').json()

    def add_airport(self, code: str, latitude: float, longitude: float) -> dict:
        return self._request('POST', f'/collect/airport/{code}/{latitude}/{longitude}').json()

    def submit_reading(
        self,
        code: str,
        kind: Union[str, ReadingKind],
        reading: Union[AtmosphericReading, dict],
    ) -> None:
        """Upload one reading summary for an airport."""
        kind = ReadingKind.parse(kind)
        body = reading.to_dict() if isinstance(reading, AtmosphericReading) else reading
        self._request('POST', f'/collect/weather/{code}/{kind.value}', json=body)
        logger.info(f'Submitted {kind.value} reading for {code}')

    def submit_samples(
        self,
        code: str,
        kind: Union[str, ReadingKind],
        samples: Iterable[float],
    ) -> AtmosphericReading:
        """Summarize raw samples and upload the resulting reading."""
        reading = AtmosphericReading.from_samples(kind, samples)
        self.submit_reading(code, reading.kind, reading)
        return reading

    def upload_airports(self, triples: Iterable[Tuple[str, float, float]]) -> int:
        """
        Register airports on the server.

        Airports the server already knows (409) are skipped.
        Returns count of airports created.
        """
        created = 0
        for code, lat, lon in triples:
            try:
                self.add_airport(code, lat, lon)
                created += 1
            except CollectorClientError as e:
                if e.status_code != 409:
                    raise
                logger.debug(f'Airport {code} already registered')

        logger.info(f'Uploaded {created} airports to {self.base_url}')
        return created

    # -------------------------------------------------------------------------
    # Query API
    # -------------------------------------------------------------------------

    def query_weather(self, code: str, radius: float = 0) -> List[dict]:
        return self._request('GET', f'/query/weather/{code}/{radius}').json()

    def stats(self) -> dict:
        return self._request('GET', '/query/ping').json()
