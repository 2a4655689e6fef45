"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from gateway.config.defaults import DEFAULT_LOCATIONS
from gateway.config.schema import GatewayConfig, UpstreamConfig

TEST_BASE_URL = "https://test-cwa.example.com/api"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def kaohsiung_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "cwa_forecast_kaohsiung.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def empty_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "cwa_forecast_empty.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Default locations, a test API key and a fake upstream host."""
    return GatewayConfig(
        cwa_api_key="test-key",
        upstream=UpstreamConfig(base_url=TEST_BASE_URL, timeout_seconds=1.0),
        locations=DEFAULT_LOCATIONS,
    )


@pytest.fixture
def keyless_config(gateway_config: GatewayConfig) -> GatewayConfig:
    return gateway_config.model_copy(update={"cwa_api_key": ""})
