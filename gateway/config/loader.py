"""YAML config loader with environment variable overrides."""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from gateway.config.defaults import DEFAULT_LOCATIONS
from gateway.config.schema import GatewayConfig

ENV_PORT = "PORT"
ENV_API_KEY = "CWA_API_KEY"
ENV_BASE_URL = "CWA_API_BASE_URL"
ENV_ENVIRONMENT = ("APP_ENV", "NODE_ENV")


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> GatewayConfig:
    """Load and validate config from an optional YAML file plus the environment.

    If no locations are specified in the YAML, injects DEFAULT_LOCATIONS.
    Environment variables win over file values. When reading the process
    environment, a .env file in the working directory is loaded first; it
    never replaces variables that are already set.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path), encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    apply_env_overrides(raw, environ)
    return GatewayConfig(**raw)


def apply_env_overrides(raw: dict, environ: Mapping[str, str]) -> dict:
    """Overlay recognised environment variables onto a raw config dict in place."""
    if environ.get(ENV_PORT):
        raw["port"] = environ[ENV_PORT]
    if ENV_API_KEY in environ:
        raw["cwa_api_key"] = environ[ENV_API_KEY].strip()
    if environ.get(ENV_BASE_URL):
        raw.setdefault("upstream", {})["base_url"] = environ[ENV_BASE_URL]
    for name in ENV_ENVIRONMENT:
        if environ.get(name):
            raw["environment"] = environ[name]
            break
    return raw
