"""CWA open-data API client for the 36-hour county forecast dataset."""

import logging

import httpx

from gateway.config.schema import CWA_API_BASE_URL, CWA_FORECAST_DATASET
from gateway.errors import (
    ForecastDataNotFoundError,
    MissingCredentialError,
    UpstreamError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


class CwaClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = CWA_API_BASE_URL,
        dataset_id: str = CWA_FORECAST_DATASET,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.dataset_id = dataset_id
        self.timeout = timeout

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url}/v1/rest/datastore/{self.dataset_id}"

    async def get_forecast(self, region: str) -> dict:
        """Fetch the raw forecast payload for one CWA region name.

        Makes exactly one request; no retries.
        """
        if not self.api_key:
            logger.error("CWA_API_KEY is not configured; refusing to call CWA")
            raise MissingCredentialError()

        params = {"Authorization": self.api_key, "locationName": region}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.forecast_url, params=params)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as e:
            details = _error_body(e.response)
            logger.error(
                "CWA API returned %d for region=%s: %s",
                e.response.status_code, region, details,
            )
            message = details.get("message") if isinstance(details, dict) else None
            raise UpstreamError(e.response.status_code, details, message) from e
        except httpx.RequestError as e:
            logger.error("CWA API request failed for region=%s: %s", region, e)
            raise UpstreamTransportError() from e

        records = payload.get("records") or {}
        if not records.get("location"):
            logger.warning("CWA returned no location data for region=%s", region)
            raise ForecastDataNotFoundError(region)
        return payload


def _error_body(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return {"raw": resp.text}
