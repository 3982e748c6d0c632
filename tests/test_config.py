"""Tests for environment-driven configuration."""

from __future__ import annotations

from weatherwall.config import (
    FrequencyDivisor,
    StoreConfig,
    _parse_divisor,
    _parse_origins,
    load_config,
)


class TestParsers:
    def test_divisor(self) -> None:
        assert _parse_divisor("total_queries") is FrequencyDivisor.TOTAL_QUERIES
        assert _parse_divisor(" DISTINCT_RADII ") is FrequencyDivisor.DISTINCT_RADII

    def test_unknown_divisor_falls_back_to_legacy(self) -> None:
        assert _parse_divisor("median") is FrequencyDivisor.DISTINCT_RADII

    def test_origins(self) -> None:
        assert _parse_origins("https://a.example, https://b.example") == (
            "https://a.example",
            "https://b.example",
        )
        assert _parse_origins(" , ") == ("*",)


class TestLoadConfig:
    def test_freshness_seconds(self) -> None:
        assert StoreConfig(freshness_hours=24).freshness_seconds == 86400

    def test_load(self) -> None:
        cfg = load_config()
        assert cfg.stats.radius_buckets == 10
        assert isinstance(cfg.stats.divisor, FrequencyDivisor)
