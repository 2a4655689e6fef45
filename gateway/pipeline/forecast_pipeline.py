"""Forecast pipeline: resolve -> fetch -> normalize for a single request."""

import logging

from gateway.config.schema import GatewayConfig
from gateway.errors import ForecastUnavailableError, GatewayError
from gateway.ingest.cwa_client import CwaClient
from gateway.ingest.location_resolver import resolve
from gateway.ingest.normalizer import normalize
from gateway.models.forecast import ForecastResult

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(self, config: GatewayConfig, client: CwaClient | None = None):
        self.config = config
        self.locations = config.location_map()
        self.client = client or CwaClient(
            api_key=config.cwa_api_key,
            base_url=config.upstream.base_url,
            dataset_id=config.upstream.dataset_id,
            timeout=config.upstream.timeout_seconds,
        )

    async def run(self, code: str) -> ForecastResult:
        """Build the forecast for a location code.

        Every failure surfaces as a GatewayError subclass.
        """
        try:
            region = resolve(code, self.locations)
        except GatewayError as e:
            logger.warning("Rejected location code %r: %s", code, e)
            raise

        try:
            payload = await self.client.get_forecast(region)
            result = normalize(payload)
        except GatewayError:
            raise
        except Exception as e:
            logger.exception("Failed to build forecast for %s (%s)", code, region)
            raise ForecastUnavailableError() from e

        logger.info(
            "Forecast for %s (%s): %d slots", code, region, len(result.forecasts)
        )
        return result
