"""Tests for the in-memory airport store."""

from __future__ import annotations

import threading

import pytest

from weatherwall.exceptions import AirportNotFoundError, DuplicateCodeError
from weatherwall.models import Airport
from weatherwall.store import AirportStore


@pytest.fixture
def store() -> AirportStore:
    s = AirportStore()
    s.register_airport("BOS", 42.3643, -71.0052)
    s.register_airport("EWR", 40.6925, -74.1687)
    return s


class TestRegister:
    def test_register_returns_airport(self) -> None:
        airport = AirportStore().register_airport("JFK", 40.6398, -73.7789)
        assert airport == Airport("JFK", 40.6398, -73.7789)

    def test_latitude_and_longitude_kept_apart(self, store: AirportStore) -> None:
        bos = store.find_airport("BOS")
        assert bos.latitude == 42.3643
        assert bos.longitude == -71.0052

    def test_duplicate_rejected(self, store: AirportStore) -> None:
        with pytest.raises(DuplicateCodeError):
            store.register_airport("BOS", 0.0, 0.0)
        assert len(store) == 2
        assert store.find_airport("BOS").latitude == 42.3643

    def test_code_normalized(self, store: AirportStore) -> None:
        store.register_airport(" lga ", 40.7772, -73.8726)
        assert "LGA" in store
        assert store.find_airport("lga").iata == "LGA"

    @pytest.mark.parametrize(
        "code, lat, lon",
        [
            ("", 40.0, -70.0),
            ("XX", 40.0, -70.0),
            ("BOST", 40.0, -70.0),
            ("B0S", 40.0, -70.0),
            ("ORD", 200.0, 0.0),
            ("ORD", 41.97, -181.0),
            ("ORD", float("nan"), 0.0),
        ],
    )
    def test_invalid_airport_rejected(self, store: AirportStore, code: str, lat: float, lon: float) -> None:
        with pytest.raises(ValueError):
            store.register_airport(code, lat, lon)
        assert len(store) == 2

    def test_every_airport_has_a_record(self, store: AirportStore) -> None:
        assert len(store.all_airports()) == len(store.entries()) == 2
        assert not store.record_for("EWR").has_readings


class TestLookup:
    def test_find_unknown(self, store: AirportStore) -> None:
        with pytest.raises(AirportNotFoundError) as exc_info:
            store.find_airport("XXX")
        assert exc_info.value.code == "XXX"

    def test_index_of_follows_registration_order(self, store: AirportStore) -> None:
        assert store.index_of("BOS") == 0
        assert store.index_of("EWR") == 1

    def test_index_of_unknown(self, store: AirportStore) -> None:
        with pytest.raises(AirportNotFoundError):
            store.index_of("XXX")

    def test_record_at_matches_record_for(self, store: AirportStore) -> None:
        for code in store.codes():
            assert store.record_at(store.index_of(code)) is store.record_for(code)

    def test_record_at_out_of_range(self, store: AirportStore) -> None:
        with pytest.raises(IndexError):
            store.record_at(2)
        with pytest.raises(IndexError):
            store.record_at(-1)

    def test_all_airports_order(self, store: AirportStore) -> None:
        assert [a.iata for a in store.all_airports()] == ["BOS", "EWR"]

    def test_contains_non_string(self, store: AirportStore) -> None:
        assert 42 not in store

    def test_clear(self, store: AirportStore) -> None:
        store.clear()
        assert len(store) == 0
        assert store.codes() == []


class TestConcurrency:
    def test_parallel_registration_keeps_codes_unique(self) -> None:
        store = AirportStore()
        errors = []

        def register() -> None:
            try:
                store.register_airport("ORD", 41.97, -87.90)
            except DuplicateCodeError as e:
                errors.append(e)

        threads = [threading.Thread(target=register) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 1
        assert len(errors) == 7
