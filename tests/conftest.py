"""Shared test fixtures and sample readings."""

from __future__ import annotations

from dataclasses import replace

import pytest

from weatherwall.app import create_app
from weatherwall.config import AirportsConfig, load_config
from weatherwall.services import WeatherService

# Real airport positions
BOS = ("BOS", 42.3643, -71.0052)
EWR = ("EWR", 40.6925, -74.1687)
JFK = ("JFK", 40.6398, -73.7789)
LGA = ("LGA", 40.7772, -73.8726)
MMU = ("MMU", 40.7994, -74.4149)

SAMPLE_WIND = {"mean": 5.0, "min": 1.0, "max": 12.0, "std": 2.5, "count": 40}
SAMPLE_TEMPERATURE = {"mean": 21.5, "min": 18.0, "max": 25.0, "std": 1.2, "count": 24}
SAMPLE_PRESSURE = {"mean": 700.0, "min": 690.0, "max": 710.0, "std": 4.0, "count": 12}

NOW = 1_700_000_000.0


class FakeClock:
    """Controllable replacement for time.time."""

    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(clock: FakeClock) -> WeatherService:
    return WeatherService(clock=clock)


@pytest.fixture
def seeded_service(service: WeatherService) -> WeatherService:
    """Service with the five New York / Boston airports registered."""
    service.load_airports([BOS, EWR, JFK, LGA, MMU])
    return service


@pytest.fixture
def app(seeded_service: WeatherService):
    cfg = replace(load_config(), airports=AirportsConfig(data_file=None))
    app = create_app(service=seeded_service, app_config=cfg)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
