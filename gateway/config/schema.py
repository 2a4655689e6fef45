"""Pydantic v2 configuration schema with strict validation."""

from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator

CWA_API_BASE_URL = "https://opendata.cwa.gov.tw/api"
CWA_FORECAST_DATASET = "F-C0032-001"  # 36-hour general forecast


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = CWA_API_BASE_URL
    dataset_id: str = CWA_FORECAST_DATASET
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    code: str = Field(min_length=1)
    name: str = Field(min_length=1)


class GatewayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    environment: str = "development"
    cwa_api_key: str = ""
    upstream: UpstreamConfig = UpstreamConfig()
    locations: list[LocationConfig] = []

    @field_validator("locations")
    @classmethod
    def _unique_codes(cls, v: list[LocationConfig]) -> list[LocationConfig]:
        seen: set[str] = set()
        for loc in v:
            if loc.code in seen:
                raise ValueError(f"Duplicate location code: {loc.code}")
            seen.add(loc.code)
        return v

    def location_map(self) -> MappingProxyType:
        """Read-only code -> CWA region name table."""
        return MappingProxyType({loc.code: loc.name for loc in self.locations})
