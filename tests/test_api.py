"""Tests for the Flask collector and query endpoints."""

from __future__ import annotations

import pytest

from conftest import SAMPLE_WIND


class TestCollectPing:
    def test_get(self, client) -> None:
        response = client.get("/collect/ping")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}

    def test_head(self, client) -> None:
        assert client.head("/collect/ping").status_code == 200


class TestUpdateWeather:
    def test_created(self, client, seeded_service) -> None:
        response = client.post("/collect/weather/BOS/wind", json=SAMPLE_WIND)
        assert response.status_code == 201
        assert response.get_json()["wind"]["mean"] == 5.0
        assert seeded_service.query_by_point("BOS").wind.mean == 5.0

    def test_kind_case_insensitive(self, client) -> None:
        response = client.post("/collect/weather/BOS/CLOUDCOVER", json={"mean": 30})
        assert response.status_code == 201

    def test_out_of_range(self, client, seeded_service) -> None:
        response = client.post("/collect/weather/BOS/temperature", json={"mean": 150})
        assert response.status_code == 422
        assert "error" in response.get_json()
        assert not seeded_service.query_by_point("BOS").has_readings

    def test_unknown_kind(self, client) -> None:
        response = client.post("/collect/weather/BOS/visibility", json={"mean": 10})
        assert response.status_code == 422

    def test_unknown_airport(self, client) -> None:
        response = client.post("/collect/weather/XXX/wind", json=SAMPLE_WIND)
        assert response.status_code == 404

    @pytest.mark.parametrize("body", ["not json", "[1, 2]", "42", "\"wind\"", '{"min": 1}'])
    def test_malformed_body(self, client, body: str) -> None:
        response = client.post(
            "/collect/weather/BOS/wind", data=body, content_type="application/json"
        )
        assert response.status_code == 422


class TestAirports:
    def test_list(self, client) -> None:
        response = client.get("/collect/airports")
        assert response.get_json() == ["BOS", "EWR", "JFK", "LGA", "MMU"]

    def test_get(self, client) -> None:
        response = client.get("/collect/airport/BOS")
        assert response.status_code == 200
        assert response.get_json() == {"iata": "BOS", "latitude": 42.3643, "longitude": -71.0052}

    def test_get_unknown(self, client) -> None:
        assert client.get("/collect/airport/XXX").status_code == 404

    def test_add(self, client) -> None:
        response = client.post("/collect/airport/ORD/41.9786/-87.9048")
        assert response.status_code == 201
        assert response.get_json()["longitude"] == -87.9048
        assert "ORD" in client.get("/collect/airports").get_json()

    def test_add_duplicate(self, client) -> None:
        assert client.post("/collect/airport/BOS/1/1").status_code == 409

    @pytest.mark.parametrize("lat, lon", [("abc", "1"), ("91", "0"), ("0", "-181")])
    def test_add_invalid_coordinates(self, client, lat: str, lon: str) -> None:
        assert client.post(f"/collect/airport/ORD/{lat}/{lon}").status_code == 422

    @pytest.mark.parametrize("code", ["XX", "OR1", "LONG"])
    def test_add_invalid_code(self, client, code: str) -> None:
        assert client.post(f"/collect/airport/{code}/41.0/-87.0").status_code == 422

    def test_delete_not_supported(self, client) -> None:
        assert client.delete("/collect/airport/BOS").status_code == 501
        assert client.get("/collect/airport/BOS").status_code == 200


class TestQueryWeather:
    def test_point_query_without_radius(self, client) -> None:
        response = client.get("/query/weather/EWR")
        assert response.status_code == 200
        data = response.get_json()
        assert len(data) == 1
        assert data[0]["wind"] is None

    def test_radius_query(self, client) -> None:
        client.post("/collect/weather/JFK/wind", json=SAMPLE_WIND)
        client.post("/collect/weather/BOS/wind", json=SAMPLE_WIND)
        response = client.get("/query/weather/EWR/50")
        assert response.status_code == 200
        assert len(response.get_json()) == 1

    def test_unknown_airport(self, client) -> None:
        assert client.get("/query/weather/XXX/10").status_code == 404

    def test_bad_radius(self, client) -> None:
        assert client.get("/query/weather/BOS/far").status_code == 422


class TestQueryPing:
    def test_stats(self, client) -> None:
        client.post("/collect/weather/BOS/wind", json=SAMPLE_WIND)
        client.get("/query/weather/BOS/0")
        client.get("/query/weather/BOS/21.5")
        client.get("/query/weather/EWR/21.5")

        data = client.get("/query/ping").get_json()
        assert data["datasize"] == 1
        assert data["radius_freq"] == [1, 2, 0, 0, 0, 0, 0, 0, 0, 0]
        assert set(data["iata_freq"]) == {"BOS", "EWR", "JFK", "LGA", "MMU"}
        assert data["iata_freq"]["JFK"] == 0.0


class TestApp:
    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.get_json() == {"status": "ok", "airports": 5}

    def test_unknown_route(self, client) -> None:
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.get_json() == {"error": "Not found"}

    def test_loads_airport_file(self, tmp_path) -> None:
        from dataclasses import replace

        from weatherwall.app import create_app
        from weatherwall.config import AirportsConfig, load_config

        path = tmp_path / "airports.dat"
        path.write_text("BOS,42.364347,-71.005181\nEWR,40.6925,-74.168667\n", encoding="utf-8")
        cfg = replace(load_config(), airports=AirportsConfig(data_file=str(path)))

        app = create_app(app_config=cfg)
        assert app.test_client().get("/collect/airports").get_json() == ["BOS", "EWR"]
